"""
Workspace Snapshot Model
========================
Pydantic model describing what the host editor currently has open.

This is the contract between a host (editor extension, CLI wrapper,
HTTP client) and the workspace resolver. The core never discovers this
state itself; hosts send it.

Fields:
    active_document — path of the focused document, or None when nothing is open
    roots           — open workspace folder roots, in the host's order
                      (the first entry is the "primary" root)
"""
from typing import List, Optional
from pydantic import BaseModel, field_validator


class WorkspaceSnapshot(BaseModel):
    active_document: Optional[str] = None
    roots: List[str] = []

    @field_validator("roots")
    @classmethod
    def drop_blank_roots(cls, v: List[str]) -> List[str]:
        return [r for r in v if r and r.strip()]
