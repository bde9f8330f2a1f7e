"""YAML rendering of scraped author records."""

from __future__ import annotations

from typing import Any

import yaml

from models import AuthorRecord


def record_to_dict(record: AuthorRecord) -> dict[str, Any]:
    """Plain-dict form of a record with a fixed key order."""
    return {
        "name": record.name,
        "total": record.total,
        "h_index": record.h_index,
        "i10_index": record.i10_index,
        "years": dict(sorted(record.yearly_citations.items())),
    }


def serialize_record(record: AuthorRecord) -> str:
    """Render a record as a block-style YAML document."""
    return yaml.safe_dump(
        record_to_dict(record),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
