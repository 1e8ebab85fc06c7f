"""
Path Utils
==========
Separator canonicalisation and argument checks shared by the core.

Responsibilities:
    - Normalise path separators to forward slashes (canonical form)
    - Leave extended-length ("\\\\?\\") paths untouched
    - Validate that path arguments are strings or absent

Nothing here touches the filesystem.
"""
from typing import Optional

from pathview.core.constants import EXTENDED_LENGTH_PREFIX, POSIX_SEP, WINDOWS_SEP


def is_extended_length(path: str) -> bool:
    """True if ``path`` carries the Win32 verbatim-path prefix."""
    return path.startswith(EXTENDED_LENGTH_PREFIX)


def to_posix(path: str) -> str:
    """
    Convert a path to canonical forward-slash form.

    Parameters
    ----------
    path : str
        Any path string, native or canonical. Empty string is allowed.

    Returns
    -------
    str
        ``path`` with every backslash replaced by "/", or ``path`` unchanged
        if it starts with the extended-length prefix.

    Notes
    -----
    - No case change, no resolution of "." / "..".
    - Idempotent: to_posix(to_posix(p)) == to_posix(p).
    """
    validate_path_arg(path, "path")
    if is_extended_length(path):
        return path
    return path.replace(WINDOWS_SEP, POSIX_SEP)


def is_absent(path: Optional[str]) -> bool:
    """None and "" both mean "no path"."""
    return not path


def validate_path_arg(path: Optional[str], name: str, allow_none: bool = False) -> None:
    """
    Raises TypeError if ``path`` is not a str (or None when allowed).
    Type check only; the filesystem is never consulted.
    """
    if path is None and allow_none:
        return
    if not isinstance(path, str):
        raise TypeError(f"{name} must be str, got {type(path).__name__}")
