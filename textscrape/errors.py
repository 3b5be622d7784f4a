"""Exception types raised outside the extraction path."""

from __future__ import annotations


class TextscrapeError(Exception):
    """Base class for textscrape errors."""


class UnsupportedFormatError(TextscrapeError, ValueError):
    """Raised when a format discriminator or file extension is not recognised."""


class UpstreamReadError(TextscrapeError):
    """The source text could not be obtained."""

    def __init__(self, path, message: str) -> None:
        super().__init__(message)
        self.path = path


class SourceNotFoundError(UpstreamReadError):
    pass


class SourceReadError(UpstreamReadError):
    pass
