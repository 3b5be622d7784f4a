"""Append-only, timestamped log files (one per component)."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

DEFAULT_FORMAT = "%(asctime)s - %(message)s"


def log_filename(name: str, log_dir: Union[str, Path] = "logs") -> Path:
    return Path(log_dir) / f"{name}.log"


def configure_logging(
    name: str = "textscrape",
    log_dir: Union[str, Path] = "logs",
    *,
    level: Union[int, str] = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
) -> Path:
    """Attach a file handler for the ``textscrape`` logger tree.

    Re-configuring with the same file is a no-op, so repeated CLI runs inside
    one process do not duplicate lines.
    """
    path = log_filename(name, log_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    root = logging.getLogger("textscrape")
    root.setLevel(level)
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == os.path.abspath(path):
            return path
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(fmt))
    root.addHandler(handler)
    return path
