from __future__ import annotations

import logging
import os
from typing import Optional

FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def _has_file_handler(log: logging.Logger, log_file: str) -> bool:
    target = os.path.abspath(log_file)
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == target for h in log.handlers
    )


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach console (and optionally file) handlers to the package logger.
    Library modules only call logging.getLogger("gradfit.<area>"); entry points call this.
    Repeated calls update the level and add a file handler for a new log_file.
    """
    log = logging.getLogger("gradfit")
    lvl = getattr(logging, level.upper(), logging.INFO)
    log.setLevel(lvl)
    fmt = logging.Formatter(FORMAT)
    for h in log.handlers:
        h.setLevel(lvl)
    # Avoid adding multiple console handlers on repeated runs
    if not any(type(h) is logging.StreamHandler for h in log.handlers):
        ch = logging.StreamHandler()
        ch.setLevel(lvl)
        ch.setFormatter(fmt)
        log.addHandler(ch)
    if log_file and not _has_file_handler(log, log_file):
        fh = logging.FileHandler(log_file)
        fh.setLevel(lvl)
        fh.setFormatter(fmt)
        log.addHandler(fh)
    return log
