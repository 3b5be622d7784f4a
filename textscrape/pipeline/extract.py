"""Flat key/value extraction from JSON-like, XML-like and CSV text.

These are scrapers, not parsers: nothing here tracks nesting, quoting or
escapes. Each call works on its own copy of state and returns a new mapping.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, Mapping, Optional, Tuple

from ..config import load_config
from ..errors import UnsupportedFormatError
from ..io.loaders import detect_format, read_source_text
from ..regex.engine import JSON_PAIR_RULE, XML_ELEMENT_RULE, ScanRule, iter_pairs, run_rules
from .schemas import FORMATS, ExtractedRecord, ExtractionResult

LOGGER = logging.getLogger("textscrape.extract")

Pair = Tuple[str, str]

_CLOSERS = {"}": "{", "]": "["}


def _trim_closers(value: str) -> str:
    # Drop closing brackets the value never opened, e.g. the `}` ending a one-line object.
    value = value.rstrip()
    while value and value[-1] in _CLOSERS:
        closer = value[-1]
        if value.count(closer) <= value.count(_CLOSERS[closer]):
            break
        value = value[:-1].rstrip()
    return value


def _iter_json_pairs(text: str) -> Iterator[Pair]:
    for key, value in iter_pairs(text, JSON_PAIR_RULE):
        yield key, _trim_closers(value)


def _iter_xml_pairs(text: str) -> Iterator[Pair]:
    return iter_pairs(text, XML_ELEMENT_RULE)


def _iter_csv_pairs(text: str) -> Iterator[Pair]:
    for line in text.splitlines():
        if not line:
            continue
        key, sep, value = line.partition(",")
        if not sep:
            continue
        yield key, value


_SCANNERS: Dict[str, Callable[[str], Iterator[Pair]]] = {
    "json": _iter_json_pairs,
    "xml": _iter_xml_pairs,
    "csv": _iter_csv_pairs,
}


def extract_json(text: str) -> ExtractedRecord:
    """Collect ``"key": value`` pairs; the value runs to the next comma or line break."""
    return extract_text(text, "json").record


def extract_xml(text: str) -> ExtractedRecord:
    """Collect ``<tag>value</tag>`` elements whose value contains no markup."""
    return extract_text(text, "xml").record


def extract_csv(text: str) -> ExtractedRecord:
    """Collect ``key,value`` lines, splitting at the first comma only."""
    return extract_text(text, "csv").record


def extract_text(
    text: str,
    fmt: str,
    *,
    source: Optional[str] = None,
    rules: Optional[Iterable[ScanRule]] = None,
) -> ExtractionResult:
    """Extract a record from in-memory text without ever raising on bad input.

    Extra ``rules`` run after the built-in scan and may overwrite its keys.
    Internal failures are logged and reported through ``ExtractionResult.error``
    together with the pairs collected before the failure.
    """
    fmt = fmt.lower()
    scanner = _SCANNERS.get(fmt)
    if scanner is None:
        raise UnsupportedFormatError(f"Unsupported format: {fmt!r} (expected one of {', '.join(FORMATS)})")

    record: ExtractedRecord = {}
    try:
        for key, value in scanner(text):
            record[key] = value
        if rules:
            record.update(run_rules(text, rules))
    except Exception as exc:
        LOGGER.error("Error parsing %s: %s", fmt.upper(), exc)
        return ExtractionResult(format=fmt, record=record, error=str(exc), source=source)

    LOGGER.info("%s text parsed successfully", fmt.upper())
    return ExtractionResult(format=fmt, record=record, source=source)


def extract_file(
    path: Path,
    fmt: Optional[str] = None,
    *,
    encoding: Optional[str] = None,
    extensions: Optional[Mapping[str, str]] = None,
    rules: Optional[Iterable[ScanRule]] = None,
) -> ExtractionResult:
    """Read a file and extract a record from it.

    Read failures (missing file, I/O or decode error) propagate; they are the
    only errors that abort an extraction.
    """
    if encoding is None or (fmt is None and extensions is None):
        io_cfg = load_config().get("io", {})
        encoding = encoding or io_cfg.get("encoding", "utf-8")
        if extensions is None:
            extensions = io_cfg.get("extensions", {})
    if fmt is None:
        fmt = detect_format(path, extensions or {})
    text = read_source_text(Path(path), encoding=encoding)
    return extract_text(text, fmt, source=str(path), rules=rules)
