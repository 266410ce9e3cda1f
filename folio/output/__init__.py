"""Output subsystem: serializes results and writes them to disk."""

from folio.output.emitters import (
    DocumentEmitter,
    SpreadsheetEmitter,
    emit_result,
    output_filename,
)
from folio.output.writer import OutputWriter

__all__ = [
    "DocumentEmitter",
    "OutputWriter",
    "SpreadsheetEmitter",
    "emit_result",
    "output_filename",
]
