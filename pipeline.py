"""Fetch -> extract -> serialize, for one author identifier per call."""

from __future__ import annotations

import logging

import requests

from citation_extract import assemble_record
from models import AuthorRecord, ScrapeError
from scholar_page import fetch_page
from serializer import serialize_record

LOGGER = logging.getLogger(__name__)


def scrape_author(author_id: str) -> AuthorRecord:
    """Fetch and assemble one author's record.

    Errors are raised as-is so callers can branch on the failure kind.
    """
    document = fetch_page(author_id)
    return assemble_record(document)


def fetch_info(author_id: str) -> str:
    """Return the author's record as YAML, or the error message as plain text.

    Never raises for scrape or transport failures.
    """
    try:
        record = scrape_author(author_id)
    except (ScrapeError, requests.RequestException) as exc:
        LOGGER.warning("Scrape failed for author_id=%s: %s", author_id, exc)
        return str(exc)
    return serialize_record(record)
