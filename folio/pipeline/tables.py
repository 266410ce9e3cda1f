"""Merge per-page JSON table payloads into one ordered table list."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from pydantic import BaseModel, ValidationError

from folio.pipeline.models import Table

logger = logging.getLogger(__name__)


class _TablesPayload(BaseModel):
    tables: list[Table]


@dataclass(frozen=True)
class ParsedTables:
    tables: list[Table]


@dataclass(frozen=True)
class Unparseable:
    reason: str


PageTables = ParsedTables | Unparseable


def parse_page_tables(raw: str) -> PageTables:
    """Parse one page's raw model output into tables without ever raising."""
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        return Unparseable(f"invalid JSON: {e}")

    if not isinstance(data, dict):
        return Unparseable(f"expected an object, got {type(data).__name__}")

    try:
        payload = _TablesPayload.model_validate(data)
    except ValidationError as e:
        return Unparseable(f"shape mismatch: {e.error_count()} error(s)")
    return ParsedTables(payload.tables)


def assemble_tables(results: Sequence[str]) -> list[Table]:
    """Flatten all pages' tables in page order.

    A malformed page contributes zero tables and never aborts the rest.
    """
    tables: list[Table] = []
    for page_number, raw in enumerate(results, start=1):
        parsed = parse_page_tables(raw)
        if isinstance(parsed, Unparseable):
            logger.debug("page %d: no tables (%s)", page_number, parsed.reason)
            continue
        tables.extend(parsed.tables)
    return tables
