import logging
import sys
import os
from datetime import datetime
from typing import Optional, Union

from pathview.core import config


class ColoredFormatter(logging.Formatter):
    """Level-coloured console output."""

    cyan = "\x1b[36m"
    green = "\x1b[32m"
    yellow = "\x1b[33m"
    red = "\x1b[31m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"

    format_str = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d - %(message)s"

    FORMATS = {
        logging.DEBUG: cyan + format_str + reset,
        logging.INFO: green + format_str + reset,
        logging.WARNING: yellow + format_str + reset,
        logging.ERROR: red + format_str + reset,
        logging.CRITICAL: bold_red + format_str + reset
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno)
        # Custom levels fall back to the plain format
        if not log_fmt:
            log_fmt = self.format_str
        formatter = logging.Formatter(log_fmt, datefmt="%Y-%m-%d %H:%M:%S")
        return formatter.format(record)


def setup_logging(level: Optional[Union[int, str]] = None, log_to_file: Optional[bool] = None):
    """
    Configure the root logger for the service.

    Defaults come from LOG_LEVEL / LOG_TO_FILE in pathview.core.config.
    Safe to call more than once: existing root handlers are replaced.
    """
    if level is None:
        level = config.LOG_LEVEL
    if log_to_file is None:
        log_to_file = config.LOG_TO_FILE

    root_logger = logging.getLogger()

    # Clear existing handlers to prevent duplicate logs
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.setLevel(level)

    # Console handler (stderr for uvicorn compatibility)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ColoredFormatter())
    root_logger.addHandler(console_handler)

    if log_to_file:
        os.makedirs(config.LOG_DIR, exist_ok=True)
        file_handler = logging.FileHandler(
            os.path.join(config.LOG_DIR, f"pathview_{datetime.now().strftime('%Y%m%d')}.log")
        )
        file_handler.setFormatter(logging.Formatter(ColoredFormatter.format_str, datefmt="%Y-%m-%d %H:%M:%S"))
        root_logger.addHandler(file_handler)

    for logger_name in ["pathview", "uvicorn", "uvicorn.error", "uvicorn.access", "main"]:
        named = logging.getLogger(logger_name)
        named.setLevel(level)
        named.propagate = True

    root_logger.info(
        "Logging initialized (level=%s, file=%s)",
        logging.getLevelName(root_logger.level),
        "on" if log_to_file else "off",
    )
