"""
GET /status
Liveness check for hosts, reporting which path conventions are in effect.
"""
from fastapi import APIRouter

from pathview.core.platform import current_flavor

router = APIRouter()

@router.get("/status")
async def get_status():
    return {"status": "ok", "platform": current_flavor().platform.value}
