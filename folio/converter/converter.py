"""End-to-end conversion: render → per-page inference → assemble → emit → write."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path

from folio.config.models import FolioConfig
from folio.converter.models import ConversionOutcome
from folio.errors import FolioError
from folio.llm.base import VisionProvider
from folio.output import OutputWriter, emit_result, output_filename
from folio.pipeline import ConversionPipeline, ConversionStatus, ConversionTarget, Page, ProgressCallback
from folio.render import PageRenderer

logger = logging.getLogger(__name__)


class DocumentConverter:
    """Owns one conversion run from source file to written artifact.

    The caller owns the status: every ConversionStatus goes to `on_progress`.
    A failed run ends with an error status, re-raises, and writes nothing.
    """

    def __init__(self, config: FolioConfig, provider: VisionProvider) -> None:
        self._config = config
        self._renderer = PageRenderer(config.render)
        self._pipeline = ConversionPipeline(provider)
        self._writer = OutputWriter(config.output)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def convert_file(
        self,
        file_path: str | Path,
        target: ConversionTarget,
        *,
        on_progress: ProgressCallback | None = None,
        cancel: asyncio.Event | None = None,
        dry_run: bool = False,
    ) -> ConversionOutcome:
        path = Path(file_path)
        return await self._run(
            lambda: self._renderer.render(path),
            source_name=path.name,
            source_path=str(path),
            target=target,
            on_progress=on_progress,
            cancel=cancel,
            dry_run=dry_run,
        )

    async def convert_bytes(
        self,
        data: bytes,
        filename: str,
        target: ConversionTarget,
        *,
        on_progress: ProgressCallback | None = None,
        cancel: asyncio.Event | None = None,
        dry_run: bool = False,
    ) -> ConversionOutcome:
        """Convert an in-memory upload; `filename` names the source and the artifact."""
        return await self._run(
            lambda: self._renderer.render_bytes(data, filename),
            source_name=filename,
            source_path=filename,
            target=target,
            on_progress=on_progress,
            cancel=cancel,
            dry_run=dry_run,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _run(
        self,
        render: Callable[[], list[Page]],
        *,
        source_name: str,
        source_path: str,
        target: ConversionTarget,
        on_progress: ProgressCallback | None,
        cancel: asyncio.Event | None,
        dry_run: bool,
    ) -> ConversionOutcome:
        report = on_progress or (lambda _: None)
        report(ConversionStatus(step="Rendering pages...", progress=0, running=True))

        try:
            # PyMuPDF rendering is synchronous.
            pages = await asyncio.to_thread(render)
            result = await self._pipeline.convert(pages, target, report, cancel)
            data = emit_result(result)
            output_path = self._writer.write(
                data, output_filename(source_name, target), dry_run=dry_run
            )
        except (FolioError, OSError) as e:
            logger.error("conversion of %s failed: %s", source_name, e)
            report(
                ConversionStatus(
                    step="Error occurred",
                    progress=0,
                    running=False,
                    error=str(e) or e.__class__.__name__,
                )
            )
            raise

        return ConversionOutcome(
            source_path=source_path,
            output_path=output_path,
            target=target,
            page_count=len(pages),
            result=result,
            written=not dry_run,
        )
