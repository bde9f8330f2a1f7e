"""Google Scholar profile page retrieval."""

from __future__ import annotations

import logging
import math
import os

import requests
from bs4 import BeautifulSoup

from models import InvalidIdentifier

SCHOLAR_PROFILE_URL = "https://scholar.google.com/citations"

LOGGER = logging.getLogger(__name__)


def build_profile_url(author_id: str) -> str:
    """Return the profile URL for an author identifier.

    The identifier is embedded as-is; it is an opaque token, not a query string.
    """
    return f"{SCHOLAR_PROFILE_URL}?user={author_id}"


def fetch_page(author_id: str) -> BeautifulSoup:
    """Fetch an author's profile page and parse it into a document tree.

    Issues exactly one GET with no retries. Parsing is lenient, so malformed
    markup still yields a (possibly empty) tree; whether the page holds the
    expected regions is decided later by the page rules.

    Raises:
        InvalidIdentifier: The server answered with a non-2xx status.
        requests.RequestException: The request itself failed (DNS, TLS, ...).
    """
    url = build_profile_url(author_id)
    response = requests.get(url, **_request_options())
    LOGGER.info("Scholar fetch: url=%s status=%s", url, response.status_code)

    if not 200 <= response.status_code < 300:
        raise InvalidIdentifier()

    return BeautifulSoup(response.text, "html.parser")


def _request_options() -> dict:
    options: dict = {}

    timeout = _timeout_from_env()
    if timeout is not None:
        options["timeout"] = timeout

    user_agent = os.getenv("SCHOLAR_USER_AGENT")
    if user_agent:
        options["headers"] = {"User-Agent": user_agent}

    return options


def _timeout_from_env() -> float | None:
    raw = os.getenv("SCHOLAR_REQUEST_TIMEOUT")
    if not raw:
        return None

    try:
        timeout = float(raw)
    except ValueError:
        timeout = None
    if timeout is None or not math.isfinite(timeout) or timeout <= 0:
        LOGGER.warning("Ignoring invalid SCHOLAR_REQUEST_TIMEOUT=%r, using transport default", raw)
        return None
    return timeout
