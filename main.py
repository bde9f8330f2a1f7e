"""CLI entrypoint for the Scholar citation scraper."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

import requests
from dotenv import load_dotenv

from models import ScrapeError
from pipeline import fetch_info, scrape_author
from serializer import serialize_record

DEFAULT_AUTHOR_ID = "H7sOPf8AAAAJ"
DOCUMENT_SEPARATOR = "---\n"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags."""
    parser = argparse.ArgumentParser(description="Extract citation metrics from Google Scholar profiles")
    parser.add_argument(
        "author_ids",
        nargs="*",
        metavar="AUTHOR_ID",
        help="Scholar profile identifier(s). Defaults to SCHOLAR_AUTHOR_ID or a built-in example.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Report failures on stderr and exit non-zero instead of printing the message as output",
    )
    parser.add_argument("--output", type=Path, default=None, help="Write the YAML to this file instead of stdout")
    return parser.parse_args(argv)


def run(author_ids: list[str], strict: bool) -> tuple[list[str], int]:
    """Scrape each identifier independently.

    Returns the rendered documents and the number of failures. Failures are
    only counted in strict mode; otherwise the error text is the document.
    """
    documents: list[str] = []
    failed = 0

    for author_id in author_ids:
        logging.info("Scraping author_id=%s", author_id)
        if not strict:
            documents.append(fetch_info(author_id))
            continue

        try:
            record = scrape_author(author_id)
        except (ScrapeError, requests.RequestException) as exc:
            failed += 1
            logging.error("author_id=%s failed with %s: %s", author_id, type(exc).__name__, exc)
            print(f"{author_id}: {exc}", file=sys.stderr)
            continue
        documents.append(serialize_record(record))

    logging.info("Run complete. requested=%s written=%s failed=%s", len(author_ids), len(documents), failed)
    return documents, failed


def main(argv: list[str] | None = None) -> int:
    """Initialize config and execute the scraper."""
    load_dotenv()
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    args = parse_args(argv)

    author_ids = args.author_ids or [os.getenv("SCHOLAR_AUTHOR_ID", DEFAULT_AUTHOR_ID)]
    documents, failed = run(author_ids, strict=args.strict)

    text = DOCUMENT_SEPARATOR.join(_terminated(doc) for doc in documents)
    if args.output is not None:
        args.output.write_text(text, encoding="utf-8")
        logging.info("Wrote %s document(s) to %s", len(documents), args.output)
    else:
        sys.stdout.write(text)

    return 1 if failed else 0


def _terminated(document: str) -> str:
    return document if document.endswith("\n") else f"{document}\n"


if __name__ == "__main__":
    sys.exit(main())
