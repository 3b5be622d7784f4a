"""Output writers (JSON, CSV, combined summary)."""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping

from ..pipeline.schemas import ExtractionResult

SUMMARY_SECTIONS = (
    ("json", "Parsed JSON Data:", "Key"),
    ("csv", "Parsed CSV Data:", "Key"),
    ("xml", "Parsed XML Data:", "Tag"),
)


def write_json(path: Path, data: Any, *, indent: int = 2) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False, indent=indent))


def write_csv(path: Path, rows: List[Dict[str, Any]], *, fieldnames: List[str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)


def write_record_csv(path: Path, record: Mapping[str, str]) -> None:
    rows = [{"key": key, "value": value} for key, value in record.items()]
    write_csv(path, rows, fieldnames=["key", "value"])


def render_summary(results: Iterable[ExtractionResult]) -> str:
    """Render results grouped by format, in JSON, CSV, XML order."""
    results = list(results)
    blocks = []
    for fmt, title, label in SUMMARY_SECTIONS:
        lines = [title]
        for result in results:
            if result.format != fmt:
                continue
            for key, value in result.record.items():
                lines.append(f"{label}: {key}, Value: {value}")
        blocks.append("\n".join(lines) + "\n")
    return "\n".join(blocks)


def write_summary(path: Path, results: Iterable[ExtractionResult]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_summary(results), encoding="utf-8")
