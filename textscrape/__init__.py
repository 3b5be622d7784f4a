from .errors import (
    SourceNotFoundError,
    SourceReadError,
    TextscrapeError,
    UnsupportedFormatError,
    UpstreamReadError,
)
from .pipeline.extract import extract_csv, extract_file, extract_json, extract_text, extract_xml
from .pipeline.schemas import ExtractionResult

__version__ = "0.1.0"

__all__ = [
    "ExtractionResult",
    "extract_json",
    "extract_xml",
    "extract_csv",
    "extract_text",
    "extract_file",
    "TextscrapeError",
    "UnsupportedFormatError",
    "UpstreamReadError",
    "SourceNotFoundError",
    "SourceReadError",
]
