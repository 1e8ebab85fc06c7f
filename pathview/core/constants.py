"""
Constants
Centralised storage for separator conventions and reserved path prefixes.
"""
POSIX_SEP = "/"
WINDOWS_SEP = "\\"

# Win32 "verbatim path" marker. Paths starting with it must not be reinterpreted.
EXTENDED_LENGTH_PREFIX = "\\\\?\\"

PLATFORM_AUTO = "auto"
PLATFORM_WINDOWS = "windows"
PLATFORM_POSIX = "posix"
PLATFORM_NAMES = (PLATFORM_AUTO, PLATFORM_WINDOWS, PLATFORM_POSIX)
