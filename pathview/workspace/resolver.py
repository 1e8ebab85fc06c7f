"""
Workspace Root Resolver
=======================
Picks the default base directory for readable paths from host state.

The host is reached only through the two-method ``HostWorkspace``
interface, so the core never imports an editor API.

Resolution order (resolve_default_base):
    1. Active document inside an open root → that root
       (the most specific one when roots nest)
    2. Any root open                       → the first root
    3. Otherwise                           → the caller's fallback
"""
import logging
from typing import Optional, Protocol, runtime_checkable

from pathview.core.comparator import is_within, normalize_structure
from pathview.core.platform import PathFlavor, resolve_flavor
from pathview.models.workspace import WorkspaceSnapshot

logger = logging.getLogger(__name__)


@runtime_checkable
class HostWorkspace(Protocol):
    """What the resolver needs from a host environment."""

    def get_active_document_path(self) -> Optional[str]:
        ...

    def list_root_directories(self) -> list[str]:
        ...


class StaticWorkspace:
    """
    HostWorkspace backed by a fixed snapshot.

    Usage:
        ws = StaticWorkspace(WorkspaceSnapshot(roots=["/repo"]))
        base = resolve_default_base(ws, fallback="/tmp")
    """

    def __init__(self, snapshot: Optional[WorkspaceSnapshot] = None) -> None:
        self._snapshot = snapshot or WorkspaceSnapshot()

    @classmethod
    def of(cls, roots: Optional[list[str]] = None, active_document: Optional[str] = None) -> "StaticWorkspace":
        return cls(WorkspaceSnapshot(roots=roots or [], active_document=active_document))

    def get_active_document_path(self) -> Optional[str]:
        return self._snapshot.active_document

    def list_root_directories(self) -> list[str]:
        return list(self._snapshot.roots)


def find_owning_root(
    workspace: HostWorkspace,
    path: Optional[str],
    flavor: Optional[PathFlavor] = None,
) -> Optional[str]:
    """
    Return the open root that contains ``path``, or None.

    When several roots contain it, the deepest one wins, so a file in a
    nested folder maps to that folder rather than its parent.
    """
    if not path:
        return None
    flavor = resolve_flavor(flavor)

    best: Optional[str] = None
    best_depth = -1
    for root in workspace.list_root_directories():
        if not is_within(path, root, flavor):
            continue
        depth = len(flavor.purepath(normalize_structure(root, flavor)).parts)
        if depth > best_depth:
            best, best_depth = root, depth
    return best


def resolve_default_base(
    workspace: HostWorkspace,
    fallback: str,
    flavor: Optional[PathFlavor] = None,
) -> str:
    """
    Default base directory for the host's current context.

    Parameters
    ----------
    workspace : HostWorkspace
        Host state provider.
    fallback : str
        Returned when no root can be determined.
    flavor : PathFlavor | None
        Path rules for matching the active document against roots.

    Returns
    -------
    str
        A root path exactly as the host reported it, or ``fallback``.
    """
    roots = workspace.list_root_directories()
    active = workspace.get_active_document_path()

    if active:
        owner = find_owning_root(workspace, active, flavor)
        if owner is not None:
            logger.debug("Active document %s belongs to root %s", active, owner)
            return owner
        logger.debug("Active document %s is outside all open roots", active)

    if roots:
        return roots[0]

    logger.debug("No workspace roots open; using fallback %s", fallback)
    return fallback


def resolve_base_for_context(
    workspace: HostWorkspace,
    context_path: Optional[str],
    fallback: str,
    flavor: Optional[PathFlavor] = None,
) -> str:
    """
    Root containing ``context_path`` if any, else ``resolve_default_base``.

    Used when the caller already knows which file it is talking about
    (e.g. a tool call naming a file) and that should win over whatever
    document happens to be focused.
    """
    owner = find_owning_root(workspace, context_path, flavor)
    if owner is not None:
        return owner
    return resolve_default_base(workspace, fallback, flavor)
