"""Pydantic models for the converter subsystem."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from folio.pipeline.models import ConversionResult, ConversionTarget


class ConversionOutcome(BaseModel):
    """Result of converting one source file into an artifact."""

    source_path: str
    output_path: Path
    target: ConversionTarget
    page_count: int
    result: ConversionResult
    written: bool = True  # False on dry runs
