"""Numeric field parsing for scraped element text."""

from __future__ import annotations

import re

from models import ParseError, ScrapeError

# ASCII digits only: no sign, separators, padding or unicode digits.
_DIGITS = re.compile(r"[0-9]+")

# Unsigned 64-bit ceiling; anything larger is malformed page content.
MAX_FIELD_VALUE = 2**64 - 1
_MAX_SIGNIFICANT_DIGITS = len(str(MAX_FIELD_VALUE))


def parse_numeric(raw_text: str, error_cls: type[ScrapeError] = ParseError) -> int:
    """Parse ``raw_text`` as a base-10 non-negative integer.

    Raises ``error_cls(raw_text)`` when the text is anything else, including
    values above ``MAX_FIELD_VALUE``. Callers pass ``YearParseError`` or
    ``CitationParseError`` to say which half of a histogram pair was
    malformed.
    """
    if not _DIGITS.fullmatch(raw_text):
        raise error_cls(raw_text)
    # Length check first so huge digit runs never reach int().
    if len(raw_text.lstrip("0")) > _MAX_SIGNIFICANT_DIGITS:
        raise error_cls(raw_text)

    value = int(raw_text)
    if value > MAX_FIELD_VALUE:
        raise error_cls(raw_text)
    return value
