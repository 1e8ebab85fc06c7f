"""
Path Comparator
===============
Decides whether two path strings denote the same location, without
touching the filesystem.

Comparison pipeline (per path):
    1. Structural normalisation with the flavor's segment parser
       ("." and ".." resolved, duplicate separators collapsed,
       one trailing separator dropped unless the path is a root).
    2. Windows only: separators canonicalised via to_posix().
    3. Windows only: case folded to lowercase.

Absent paths (None or "") are equal to each other and to nothing else.
"""
from typing import Optional

from pathview.core.platform import PathFlavor, resolve_flavor
from pathview.utils.path_utils import is_absent, to_posix, validate_path_arg


def _is_root(path: str, flavor: PathFlavor) -> bool:
    _, rest = flavor.pathmod.splitdrive(path)
    return bool(rest) and not rest.strip(flavor.separator + (flavor.alt_separator or ""))


def normalize_structure(path: str, flavor: Optional[PathFlavor] = None) -> str:
    """
    Resolve "." / ".." and redundant separators in ``path``.

    The result uses the flavor's native separator. A single trailing
    separator is removed unless the path is a root ("/", "C:\\"), so a root
    never collapses into an empty string.
    """
    validate_path_arg(path, "path")
    flavor = resolve_flavor(flavor)
    normalized = flavor.pathmod.normpath(path)
    if flavor.is_windows:
        drive, rest = flavor.pathmod.splitdrive(normalized)
        # a bare UNC share is the same place as its root
        if not rest and drive.startswith(flavor.separator * 2):
            normalized = drive + flavor.separator
    if (
        len(normalized) > 1
        and normalized.endswith(flavor.separator)
        and not _is_root(normalized, flavor)
    ):
        normalized = normalized[:-1]
    return normalized


def comparison_key(path: str, flavor: Optional[PathFlavor] = None) -> str:
    """
    The exact string ``paths_equal`` compares for ``path``.

    Parameters
    ----------
    path : str
        Non-empty path string.
    flavor : PathFlavor | None
        Rules to apply; defaults to the execution environment's.

    Returns
    -------
    str
        Structurally normalised path; canonical and lowercased on Windows.
    """
    flavor = resolve_flavor(flavor)
    key = normalize_structure(path, flavor)
    if flavor.is_windows:
        key = to_posix(key)
    if not flavor.case_sensitive:
        key = key.lower()
    return key


def paths_equal(
    a: Optional[str],
    b: Optional[str],
    flavor: Optional[PathFlavor] = None,
) -> bool:
    """
    Return True if ``a`` and ``b`` refer to the same location.

    Parameters
    ----------
    a, b : str | None
        Paths to compare. None and "" count as absent.
    flavor : PathFlavor | None
        Rules to apply; when omitted the platform is read at call time.

    Returns
    -------
    bool
        True when both are absent, False when exactly one is, otherwise
        the result of comparing their comparison keys.
    """
    validate_path_arg(a, "a", allow_none=True)
    validate_path_arg(b, "b", allow_none=True)

    if is_absent(a) and is_absent(b):
        return True
    if is_absent(a) or is_absent(b):
        return False

    flavor = resolve_flavor(flavor)
    return comparison_key(a, flavor) == comparison_key(b, flavor)


def relative_parts(
    target: str,
    base: str,
    flavor: Optional[PathFlavor] = None,
) -> Optional[tuple[str, ...]]:
    """
    Segments leading from ``base`` down to ``target``.

    Returns an empty tuple when the two are equal and None when ``target``
    does not lie under ``base``. Segment matching follows the flavor's case
    rule, so "C:\\Users\\Test\\a" is under "c:\\users\\test" on Windows only.
    """
    flavor = resolve_flavor(flavor)
    target_path = flavor.purepath(normalize_structure(target, flavor))
    base_path = flavor.purepath(normalize_structure(base, flavor))
    try:
        return target_path.relative_to(base_path).parts
    except ValueError:
        return None


def is_within(
    target: Optional[str],
    base: Optional[str],
    flavor: Optional[PathFlavor] = None,
    strict: bool = False,
) -> bool:
    """
    True if ``target`` is ``base`` or lies underneath it.

    With ``strict=True`` the base itself does not count. Matching is by
    whole segments: "/a/bc" is not within "/a/b".
    """
    validate_path_arg(target, "target", allow_none=True)
    validate_path_arg(base, "base", allow_none=True)
    if is_absent(target) or is_absent(base):
        return False
    parts = relative_parts(target, base, flavor)
    if parts is None:
        return False
    return bool(parts) or not strict
