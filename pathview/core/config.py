"""
Configuration
=============
Loads environment variables from .env file using python-dotenv.

Environment Variables:
    PATHVIEW_PLATFORM        — Path conventions to apply: auto / windows / posix (default: auto)
    PATHVIEW_DEFAULT_BASE    — Fallback base directory when no workspace root is known
                               (default: process working directory at startup)
    PATHVIEW_ABSOLUTE_BASES  — os.pathsep-separated directories under which paths are
                               always shown in absolute form (default: ~/Desktop)
    LOG_LEVEL                — Root log level name (default: INFO)
    LOG_TO_FILE              — Also write logs/pathview_YYYYMMDD.log (default: false)
    LOG_DIR                  — Directory for file logs (default: logs)
    CORS_ORIGINS             — Comma-separated origins allowed to call the API

Platform Philosophy:
    "auto" follows the interpreter's sys.platform. The value is read by
    pathview.core.platform.current_flavor() on every call, so tests and
    hosts can patch PATH_PLATFORM on this module without restarting.
"""
import os
from dotenv import load_dotenv

load_dotenv()

PATH_PLATFORM = os.getenv("PATHVIEW_PLATFORM", "auto").strip().lower()

DEFAULT_BASE = os.getenv("PATHVIEW_DEFAULT_BASE") or os.getcwd()

_absolute_bases_raw = os.getenv(
    "PATHVIEW_ABSOLUTE_BASES",
    os.path.join(os.path.expanduser("~"), "Desktop"),
)
ABSOLUTE_BASES: list[str] = [
    os.path.expanduser(p.strip())
    for p in _absolute_bases_raw.split(os.pathsep)
    if p.strip()
]

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "false").lower() == "true"
LOG_DIR = os.getenv("LOG_DIR", "logs")

# API
CORS_ORIGINS: list[str] = [
    o.strip()
    for o in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000,http://localhost:8000",
    ).split(",")
    if o.strip()
]
