"""Shared typed models for the scraping pipeline."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class AuthorRecord:
    """Citation metrics scraped from one author profile page."""

    name: str
    total: int
    h_index: int
    i10_index: int
    # Accepts a mapping or (year, count) pairs; stored as a read-only mapping.
    yearly_citations: Mapping[int, int] | Iterable[tuple[int, int]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only view, ascending by year. A repeated year keeps the last value.
        ordered = dict(sorted(dict(self.yearly_citations).items()))
        object.__setattr__(self, "yearly_citations", MappingProxyType(ordered))

    def __hash__(self) -> int:
        return hash((self.name, self.total, self.h_index, self.i10_index, tuple(self.yearly_citations.items())))


class ScrapeError(Exception):
    """Base class for every way a profile page can fail to match expectations."""

    message = "Scrape failed"

    def __init__(self) -> None:
        super().__init__(self.message)


class InvalidIdentifier(ScrapeError):
    message = "Website not found. Check the ID."


class TableNotFound(ScrapeError):
    message = "Failed to find the citation table on the website"


class NameNotFound(ScrapeError):
    message = "Failed to find the name on the website"


class _TextError(ScrapeError):
    """Error carrying the raw element text that failed to parse."""

    def __init__(self, text: str) -> None:
        self.text = text
        Exception.__init__(self, self.message.format(text))


class ParseError(_TextError):
    message = "Failed to parse value: {}"


class YearParseError(_TextError):
    message = "Failed to parse year: {}"


class CitationParseError(_TextError):
    message = "Failed to parse citation count: {}"


class InsufficientData(ScrapeError):
    message = "Insufficient data: expected 3 values, found {}"

    def __init__(self, count: int) -> None:
        self.count = count
        Exception.__init__(self, self.message.format(count))
