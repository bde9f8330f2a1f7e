"""Assemble an AuthorRecord from a parsed Scholar profile page."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from field_parser import parse_numeric
from models import AuthorRecord, CitationParseError, InsufficientData, YearParseError
from page_rules import (
    AUTHOR_NAME,
    HISTOGRAM,
    HISTOGRAM_COUNTS,
    HISTOGRAM_YEARS,
    SUMMARY_TABLE,
    SUMMARY_VALUE_CELLS,
    locate,
    select_all,
)

MIN_SUMMARY_VALUES = 3

LOGGER = logging.getLogger(__name__)


def extract_summary(document: BeautifulSoup) -> tuple[str, int, int, int]:
    """Return (name, total citations, h-index, i10-index).

    Values are taken positionally from the second column of the summary
    table: the first three are total, h-index and i10-index, in that order.
    Row labels are not consulted.

    Raises:
        TableNotFound: No summary table on the page.
        ParseError: A value cell is not a plain integer.
        InsufficientData: Fewer than three value cells.
        NameNotFound: No name element on the page.
    """
    table = locate(document, SUMMARY_TABLE)
    values = [parse_numeric(cell.get_text()) for cell in select_all(table, SUMMARY_VALUE_CELLS)]

    if len(values) < MIN_SUMMARY_VALUES:
        raise InsufficientData(len(values))

    name = locate(document, AUTHOR_NAME).get_text()
    total, h_index, i10_index = values[:MIN_SUMMARY_VALUES]
    LOGGER.info(
        "Summary parsed: name=%r total=%s h_index=%s i10_index=%s cells=%s",
        name,
        total,
        h_index,
        i10_index,
        len(values),
    )
    return name, total, h_index, i10_index


def extract_histogram(document: BeautifulSoup) -> dict[int, int]:
    """Return yearly citation counts from the citations-per-year chart.

    Year labels and count bars are selected separately and paired by
    position. If the two sequences differ in length the extra items are
    dropped without error.

    Raises:
        TableNotFound: No histogram container on the page.
        YearParseError: A year label is not a plain integer.
        CitationParseError: A count label is not a plain integer.
    """
    chart = locate(document, HISTOGRAM)
    years = select_all(chart, HISTOGRAM_YEARS)
    counts = select_all(chart, HISTOGRAM_COUNTS)

    if len(years) != len(counts):
        LOGGER.info(
            "Histogram length mismatch: years=%s counts=%s, truncating to %s",
            len(years),
            len(counts),
            min(len(years), len(counts)),
        )

    yearly: dict[int, int] = {}
    for year_el, count_el in zip(years, counts):
        year = parse_numeric(year_el.get_text(), YearParseError)
        yearly[year] = parse_numeric(count_el.get_text(), CitationParseError)

    LOGGER.info("Histogram parsed: years=%s", len(yearly))
    return yearly


def assemble_record(document: BeautifulSoup) -> AuthorRecord:
    """Build a complete AuthorRecord, or raise the first ScrapeError met."""
    name, total, h_index, i10_index = extract_summary(document)
    yearly_citations = extract_histogram(document)
    return AuthorRecord(
        name=name,
        total=total,
        h_index=h_index,
        i10_index=i10_index,
        yearly_citations=yearly_citations,
    )
