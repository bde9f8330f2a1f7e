"""Named lookup rules describing the shape of a Scholar profile page.

The selectors here are the whole contract with the page layout. Extraction
code refers to rules by name only, so a layout change is a change to this
module and nothing else.
"""

from __future__ import annotations

from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from models import NameNotFound, ScrapeError, TableNotFound


@dataclass(frozen=True, slots=True)
class PageRule:
    """A CSS selector plus the error raised when nothing matches it."""

    name: str
    selector: str
    missing_error: type[ScrapeError]


SUMMARY_TABLE = PageRule("summary_table", "table#gsc_rsb_st", TableNotFound)
AUTHOR_NAME = PageRule("author_name", "div#gsc_prf_in", NameNotFound)
# A missing histogram means the page shape is not recognised, same as the table.
HISTOGRAM = PageRule("histogram", "div.gsc_md_hist_w > div.gsc_md_hist_b", TableNotFound)

# Selectors applied inside a located region.
SUMMARY_VALUE_CELLS = "tr > td:nth-child(2)"
HISTOGRAM_YEARS = "span.gsc_g_t"
HISTOGRAM_COUNTS = "a.gsc_g_a > span.gsc_g_al"


def locate(document: BeautifulSoup | Tag, rule: PageRule) -> Tag:
    """Return the first element matching ``rule`` in document order."""
    element = document.select_one(rule.selector)
    if element is None:
        raise rule.missing_error()
    return element


def select_all(region: Tag, selector: str) -> list[Tag]:
    """Return every element under ``region`` matching ``selector``, in document order."""
    return list(region.select(selector))
