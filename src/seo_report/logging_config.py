"""Logging configuration for the SEO report engine."""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Chatty at DEBUG; apparent_encoding runs charset_normalizer on every page
QUIET_LOGGERS = ("urllib3", "charset_normalizer")


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure root logging for a report run.

    Console output goes to stderr so JSON, CSV and HTML reports printed
    to stdout stay machine-readable.

    Args:
        level: Log level name; unknown names fall back to INFO
        log_file: Optional log file path, parent directories are created
    """
    handlers = [logging.StreamHandler(sys.stderr)]

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
