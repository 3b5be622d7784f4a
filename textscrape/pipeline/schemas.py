"""Canonical output schemas for extraction results."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, Optional

FORMATS = ("json", "xml", "csv")

ExtractedRecord = Dict[str, str]


@dataclass
class ExtractionResult:
    format: str
    record: ExtractedRecord = field(default_factory=dict)
    error: Optional[str] = None
    source: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["ok"] = self.ok
        return data
