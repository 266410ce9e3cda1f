"""Serialize assembled results into .xlsx / .docx bytes."""

from __future__ import annotations

import io
from collections.abc import Sequence
from pathlib import Path

from docx import Document
from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from folio.pipeline.models import (
    Blank,
    Block,
    BulletItem,
    ConversionResult,
    ConversionTarget,
    DocumentResult,
    Heading,
    Paragraph,
    Table,
)

EMPTY_SHEET_TITLE = "Info"
EMPTY_SHEET_MESSAGE = "No tables found"


def _clean(value):
    """Drop control characters that neither OOXML format can store."""
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    return value


class SpreadsheetEmitter:
    """One worksheet per table, named by ordinal position."""

    def emit(self, tables: Sequence[Table]) -> bytes:
        wb = Workbook()
        default = wb.active

        if not tables:
            default.title = EMPTY_SHEET_TITLE
            default["A1"] = EMPTY_SHEET_MESSAGE
        else:
            wb.remove(default)
            for number, table in enumerate(tables, start=1):
                ws = wb.create_sheet(title=f"Table {number}")
                ws.append([_clean(h) for h in table.headers])
                for row in table.rows:
                    ws.append([_clean(cell) for cell in row])

        buffer = io.BytesIO()
        wb.save(buffer)
        return buffer.getvalue()


class DocumentEmitter:
    """Maps blocks onto Word paragraph styles."""

    def emit(self, blocks: Sequence[Block]) -> bytes:
        doc = Document()
        for block in blocks:
            if isinstance(block, Heading):
                doc.add_heading(_clean(block.text), level=block.level)
            elif isinstance(block, BulletItem):
                doc.add_paragraph(_clean(block.text), style="List Bullet")
            elif isinstance(block, Paragraph):
                doc.add_paragraph(_clean(block.text))
            elif isinstance(block, Blank):
                doc.add_paragraph()

        buffer = io.BytesIO()
        doc.save(buffer)
        return buffer.getvalue()


def emit_result(result: ConversionResult) -> bytes:
    if isinstance(result, DocumentResult):
        return DocumentEmitter().emit(result.blocks)
    return SpreadsheetEmitter().emit(result.tables)


def output_filename(source_name: str, target: ConversionTarget) -> str:
    """`report.pdf` → `report.xlsx` / `report.docx`."""
    return Path(source_name).stem + target.extension
