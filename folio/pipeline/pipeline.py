"""ConversionPipeline: sequential per-page inference and final assembly."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from folio.errors import ConversionCancelled, EmptyInputError
from folio.pipeline.document import assemble_document
from folio.pipeline.models import (
    ConversionResult,
    ConversionStatus,
    ConversionTarget,
    DocumentResult,
    Page,
    TableResult,
)
from folio.pipeline.tables import assemble_tables

if TYPE_CHECKING:
    from folio.llm.base import VisionProvider

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[ConversionStatus], None]

INIT_PROGRESS = 5
PAGES_SPAN = 85
FINALIZE_PROGRESS = 95


def page_progress(i: int, total: int) -> int:
    """Progress reported before dispatching the i-th (0-based) of `total` pages."""
    return INIT_PROGRESS + (i * PAGES_SPAN) // total


class ConversionPipeline:
    """Runs one inference call per page, strictly in order, then assembles.

    Pipeline:
        pages → provider.infer (one at a time) → raw results → strategy → result

    Any inference failure aborts the run immediately; nothing is assembled
    and later pages are never dispatched.
    """

    def __init__(self, provider: VisionProvider) -> None:
        self.provider = provider

    async def convert(
        self,
        pages: Sequence[Page],
        target: ConversionTarget,
        on_progress: ProgressCallback | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ConversionResult:
        report = on_progress or (lambda _: None)
        if not pages:
            raise EmptyInputError("No pages to convert")

        total = len(pages)
        start = time.perf_counter()
        report(
            ConversionStatus(
                step=f"Initializing {target.value} conversion...",
                progress=INIT_PROGRESS,
                running=True,
            )
        )

        results: list[str] = []
        for i, page in enumerate(pages):
            if cancel is not None and cancel.is_set():
                raise ConversionCancelled(f"Conversion cancelled before page {i + 1} of {total}")
            report(
                ConversionStatus(
                    step=f"Processing page {i + 1} of {total}...",
                    progress=page_progress(i, total),
                    running=True,
                )
            )
            logger.debug("dispatching page %d (%d bytes)", page.index, len(page.image))
            results.append(await self.provider.infer(page, target))

        report(ConversionStatus(step="Finalizing document...", progress=FINALIZE_PROGRESS, running=True))
        result = assemble(results, target)
        logger.info(
            "converted %d page(s) to %s in %.2fs",
            total,
            target.value,
            time.perf_counter() - start,
        )
        report(ConversionStatus(step="Conversion complete", progress=100, running=False))
        return result


def assemble(results: Sequence[str], target: ConversionTarget) -> ConversionResult:
    """Pick the assembly strategy for `target` and run it."""
    if target is ConversionTarget.TABULAR:
        return TableResult(tables=assemble_tables(results))
    return DocumentResult(blocks=assemble_document(results))
