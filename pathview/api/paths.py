"""
Path Endpoints
==============
HTTP surface over the path core, for hosts that cannot import it.

Routes:
    POST /paths/normalize   — canonical separator form
    POST /paths/equal       — same-location check
    POST /paths/readable    — display form relative to a base
    POST /paths/relative    — plain relative path (may contain "..")
    POST /workspace/resolve — default base from a workspace snapshot

Every request may name a ``platform`` ("windows" / "posix" / "auto");
when omitted the server's configured platform applies.
"""
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, field_validator

from pathview.core import config
from pathview.core.comparator import paths_equal
from pathview.core.platform import PathFlavor, current_flavor, flavor_for, platform_from_name
from pathview.core.readable_path import get_readable_path, to_relative_path
from pathview.models.workspace import WorkspaceSnapshot
from pathview.utils.path_utils import to_posix
from pathview.workspace.resolver import (
    StaticWorkspace,
    resolve_base_for_context,
    resolve_default_base,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Paths"])


# ---------------------------------------------------------------------------
# Request / Response schemas
# ---------------------------------------------------------------------------
class PlatformRequest(BaseModel):
    platform: Optional[str] = None

    @field_validator("platform")
    @classmethod
    def validate_platform(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        platform_from_name(v)
        return v.strip().lower()


class NormalizeRequest(BaseModel):
    path: str


class NormalizeResponse(BaseModel):
    normalized: str


class EqualRequest(PlatformRequest):
    a: Optional[str] = None
    b: Optional[str] = None


class EqualResponse(BaseModel):
    equal: bool


class ReadableRequest(PlatformRequest):
    base: Optional[str] = None
    target: Optional[str] = None
    workspace: Optional[WorkspaceSnapshot] = None


class ReadableResponse(BaseModel):
    base: str
    readable: str


class RelativeRequest(PlatformRequest):
    file_path: str
    cwd: str


class RelativeResponse(BaseModel):
    relative: str


class ResolveRequest(PlatformRequest):
    workspace: Optional[WorkspaceSnapshot] = None
    context_path: Optional[str] = None
    fallback: Optional[str] = None


class ResolveResponse(BaseModel):
    base: str


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _flavor(platform: Optional[str]) -> PathFlavor:
    try:
        if platform is None:
            return current_flavor()
        return flavor_for(platform_from_name(platform))
    except ValueError as e:
        logger.error("Invalid platform configuration: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------
@router.post("/paths/normalize", response_model=NormalizeResponse)
async def normalize_path(request: NormalizeRequest):
    return NormalizeResponse(normalized=to_posix(request.path))


@router.post("/paths/equal", response_model=EqualResponse)
async def compare_paths(request: EqualRequest):
    flavor = _flavor(request.platform)
    return EqualResponse(equal=paths_equal(request.a, request.b, flavor))


@router.post("/paths/readable", response_model=ReadableResponse)
async def readable_path(request: ReadableRequest):
    """
    Display form of ``target``.

    Without an explicit ``base`` the workspace snapshot decides it,
    falling back to PATHVIEW_DEFAULT_BASE.
    """
    flavor = _flavor(request.platform)
    base = request.base
    if not base:
        workspace = StaticWorkspace(request.workspace)
        base = resolve_default_base(workspace, config.DEFAULT_BASE, flavor)
        logger.info("Resolved base %s from workspace snapshot", base)

    readable = get_readable_path(
        base,
        request.target,
        flavor=flavor,
        absolute_bases=config.ABSOLUTE_BASES,
    )
    return ReadableResponse(base=base, readable=readable)


@router.post("/paths/relative", response_model=RelativeResponse)
async def relative_path(request: RelativeRequest):
    flavor = _flavor(request.platform)
    return RelativeResponse(relative=to_relative_path(request.file_path, request.cwd, flavor))


@router.post("/workspace/resolve", response_model=ResolveResponse)
async def resolve_workspace(request: ResolveRequest):
    flavor = _flavor(request.platform)
    workspace = StaticWorkspace(request.workspace)
    fallback = request.fallback or config.DEFAULT_BASE
    base = resolve_base_for_context(workspace, request.context_path, fallback, flavor)
    return ResolveResponse(base=base)
