"""
Platform
========
Path conventions as an injectable strategy object.

Every core function takes an optional ``flavor``. When it is omitted the
flavor is read from the execution environment at call time (see
``current_flavor``), which matches running under one OS per process while
keeping the comparator deterministic under test.

Segment parsing is delegated to the stdlib ``ntpath`` / ``posixpath``
modules, both of which are pure string code and importable on any host.
"""
import logging
import ntpath
import posixpath
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath, PureWindowsPath
from types import ModuleType
from typing import Optional

from pathview.core import config
from pathview.core.constants import (
    PLATFORM_AUTO,
    PLATFORM_NAMES,
    PLATFORM_POSIX,
    PLATFORM_WINDOWS,
    POSIX_SEP,
    WINDOWS_SEP,
)

logger = logging.getLogger(__name__)


class Platform(str, Enum):
    WINDOWS = PLATFORM_WINDOWS
    POSIX = PLATFORM_POSIX


@dataclass(frozen=True)
class PathFlavor:
    """
    Separator and case rules for one platform.

    Attributes
    ----------
    platform : Platform
        Which platform these rules describe.
    separator : str
        Native separator emitted by ``pathmod.normpath``.
    alt_separator : str | None
        Second separator accepted on input ("/" on Windows, none on POSIX).
    case_sensitive : bool
        Whether two spellings differing only in case are different paths.
    pathmod : module
        ``ntpath`` or ``posixpath``.
    purepath : type
        ``PureWindowsPath`` or ``PurePosixPath``, used for containment.
    """
    platform: Platform
    separator: str
    alt_separator: Optional[str]
    case_sensitive: bool
    pathmod: ModuleType
    purepath: type

    @property
    def is_windows(self) -> bool:
        return self.platform is Platform.WINDOWS


WINDOWS_FLAVOR = PathFlavor(
    platform=Platform.WINDOWS,
    separator=WINDOWS_SEP,
    alt_separator=POSIX_SEP,
    case_sensitive=False,
    pathmod=ntpath,
    purepath=PureWindowsPath,
)

POSIX_FLAVOR = PathFlavor(
    platform=Platform.POSIX,
    separator=POSIX_SEP,
    alt_separator=None,
    case_sensitive=True,
    pathmod=posixpath,
    purepath=PurePosixPath,
)

_FLAVORS: dict[Platform, PathFlavor] = {
    Platform.WINDOWS: WINDOWS_FLAVOR,
    Platform.POSIX: POSIX_FLAVOR,
}


def flavor_for(platform: Platform) -> PathFlavor:
    return _FLAVORS[Platform(platform)]


def detect_platform() -> Platform:
    """Platform of the running interpreter."""
    return Platform.WINDOWS if sys.platform.startswith("win") else Platform.POSIX


def platform_from_name(name: Optional[str]) -> Platform:
    """
    Parse a platform name as accepted by PATHVIEW_PLATFORM and the API.

    Parameters
    ----------
    name : str | None
        "windows", "posix", "auto" or None. Case-insensitive.

    Returns
    -------
    Platform
        The named platform; "auto" and None resolve to ``detect_platform()``.

    Raises
    ------
    ValueError
        If the name is not recognised.
    """
    if name is None:
        return detect_platform()
    if not isinstance(name, str):
        raise TypeError(f"platform name must be str, got {type(name).__name__}")
    key = name.strip().lower()
    if key not in PLATFORM_NAMES:
        raise ValueError(
            f"Unknown platform '{name}'. Allowed values: {list(PLATFORM_NAMES)}"
        )
    if key == PLATFORM_AUTO:
        return detect_platform()
    return Platform(key)


def current_flavor() -> PathFlavor:
    """
    Flavor in effect for this call.

    Reads ``config.PATH_PLATFORM`` every time; "auto" follows sys.platform.
    """
    platform = platform_from_name(config.PATH_PLATFORM)
    logger.debug("Using %s path flavor", platform.value)
    return _FLAVORS[platform]


def resolve_flavor(flavor: Optional[PathFlavor] = None) -> PathFlavor:
    return flavor if flavor is not None else current_flavor()
