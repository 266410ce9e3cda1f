"""Conversion pipeline: per-page orchestration and result assembly."""

from folio.pipeline.document import (
    PAGE_SEPARATOR,
    PLACEHOLDER_TEXT,
    assemble_document,
    join_pages,
    parse_blocks,
)
from folio.pipeline.models import (
    Blank,
    Block,
    BulletItem,
    ConversionResult,
    ConversionStatus,
    ConversionTarget,
    DocumentResult,
    Heading,
    Page,
    Paragraph,
    Table,
    TableResult,
)
from folio.pipeline.pipeline import ConversionPipeline, ProgressCallback, assemble, page_progress
from folio.pipeline.tables import ParsedTables, Unparseable, assemble_tables, parse_page_tables

__all__ = [
    "Blank",
    "Block",
    "BulletItem",
    "ConversionPipeline",
    "ConversionResult",
    "ConversionStatus",
    "ConversionTarget",
    "DocumentResult",
    "Heading",
    "PAGE_SEPARATOR",
    "PLACEHOLDER_TEXT",
    "Page",
    "Paragraph",
    "ParsedTables",
    "ProgressCallback",
    "Table",
    "TableResult",
    "Unparseable",
    "assemble",
    "assemble_document",
    "assemble_tables",
    "join_pages",
    "page_progress",
    "parse_blocks",
    "parse_page_tables",
]
