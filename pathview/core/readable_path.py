"""
Readable Path Formatter
=======================
Produces the string a user should see for a path, given a base directory.

DISPLAY CONTRACT:
  - Target equals base           → base's final segment      ("project")
  - Target strictly inside base  → relative, no leading "./" ("src/file.txt")
  - Anything else                → target's absolute path    ("/Users/test/other/file.txt")

  A "../" form is never produced: a path just outside the base is shown
  in full. Output is always canonical (forward slashes), on every platform.

Relative targets are resolved against the base first; absolute targets
are taken as given. Both are structurally normalised before any
comparison, so "src/./x/../file.txt" reads as "src/file.txt".
"""
import logging
from typing import Iterable, Optional

from pathview.core.comparator import (
    is_within,
    normalize_structure,
    paths_equal,
    relative_parts,
)
from pathview.core.constants import POSIX_SEP
from pathview.core.platform import PathFlavor, resolve_flavor
from pathview.utils.path_utils import is_absent, to_posix, validate_path_arg

logger = logging.getLogger(__name__)


def _anchor(path: str, flavor: PathFlavor) -> str:
    # relative bases hang off the process cwd
    if flavor.pathmod.isabs(path):
        return path
    return flavor.pathmod.abspath(path)


def _resolve_target(base: str, target: Optional[str], flavor: PathFlavor) -> str:
    if is_absent(target):
        return normalize_structure(base, flavor)
    # join() returns target unchanged when it is already anchored
    return normalize_structure(flavor.pathmod.join(base, target), flavor)


def _basename(path: str, flavor: PathFlavor) -> str:
    name = flavor.pathmod.basename(path)
    # Roots have no final segment; show the root itself.
    return to_posix(name or path)


def get_readable_path(
    base: str,
    target: Optional[str] = None,
    flavor: Optional[PathFlavor] = None,
    absolute_bases: Iterable[str] = (),
) -> str:
    """
    Shortest readable form of ``target`` as seen from ``base``.

    Parameters
    ----------
    base : str
        Directory the user is "in" (usually the workspace root). A relative
        base is taken from the process cwd.
    target : str | None
        Path to display. None or "" means the base itself. Relative
        targets are joined onto ``base``.
    flavor : PathFlavor | None
        Path rules; defaults to the execution environment's at call time.
    absolute_bases : Iterable[str]
        Bases for which the absolute form is always shown (e.g. the user's
        Desktop, where relative names carry no context).

    Returns
    -------
    str
        Basename, relative path or absolute path, in canonical form.
    """
    validate_path_arg(base, "base")
    validate_path_arg(target, "target", allow_none=True)
    flavor = resolve_flavor(flavor)

    anchored = _anchor(base, flavor)
    base_path = normalize_structure(anchored, flavor)
    target_path = _resolve_target(anchored, target, flavor)

    if any(paths_equal(base_path, candidate, flavor) for candidate in absolute_bases):
        logger.debug("Base %s is configured as absolute-only", base_path)
        return to_posix(target_path)

    if paths_equal(target_path, base_path, flavor):
        return _basename(base_path, flavor)

    if is_within(target_path, base_path, flavor, strict=True):
        parts = relative_parts(target_path, base_path, flavor)
        return to_posix(POSIX_SEP.join(parts))

    return to_posix(target_path)


def to_relative_path(
    file_path: str,
    cwd: str,
    flavor: Optional[PathFlavor] = None,
) -> str:
    """
    Plain relative path from ``cwd`` to ``file_path`` in canonical form.

    Unlike ``get_readable_path`` this may walk up with "..", and it keeps a
    trailing "/" on ``file_path`` so directory references stay recognisable.
    ``file_path`` equal to ``cwd`` gives "". Paths on different drives
    cannot be made relative; the absolute canonical form of ``file_path``
    is returned for those.
    """
    validate_path_arg(file_path, "file_path")
    validate_path_arg(cwd, "cwd")
    flavor = resolve_flavor(flavor)

    pathmod = flavor.pathmod
    start = normalize_structure(cwd, flavor)
    target = normalize_structure(pathmod.join(cwd, file_path), flavor)
    try:
        relative = pathmod.relpath(target, start)
    except ValueError:
        logger.debug("No relative path from %s to %s", start, target)
        relative = target

    if relative == ".":
        return ""

    relative = to_posix(relative)
    separators = tuple(s for s in (flavor.separator, flavor.alt_separator) if s)
    if file_path.endswith(separators) and not relative.endswith(POSIX_SEP):
        relative += POSIX_SEP
    return relative
