"""Source loaders (path -> decoded text) and format detection."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from ..errors import SourceNotFoundError, SourceReadError, UnsupportedFormatError


def read_source_text(path: Path, *, encoding: str = "utf-8") -> str:
    """Read a whole file into a string."""
    path = Path(path)
    try:
        return path.read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise SourceNotFoundError(path, f"File not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(path, f"Error reading file {path}: {exc}") from exc


def detect_format(path: Path, extensions: Mapping[str, str]) -> str:
    suffix = Path(path).suffix.lower()
    fmt = extensions.get(suffix)
    if fmt is None:
        raise UnsupportedFormatError(f"Cannot infer format from extension {suffix!r} of {path}")
    return fmt
