"""Turn PDFs and images into ordered page images with PyMuPDF."""

from __future__ import annotations

import logging
from pathlib import Path

import pymupdf

from folio.config.models import RenderConfig
from folio.errors import RenderError, UnsupportedFormatError
from folio.pipeline.models import Page

logger = logging.getLogger(__name__)


DOCUMENT_EXTENSIONS: set[str] = {".pdf"}

# Formats every supported vision API accepts as-is.
IMAGE_MIME_TYPES: dict[str, str] = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".webp": "image/webp",
    ".gif": "image/gif",
}

# Decodable by PyMuPDF but re-encoded to PNG before upload.
CONVERTED_IMAGE_EXTENSIONS: set[str] = {".bmp", ".tif", ".tiff"}

IMAGE_EXTENSIONS: set[str] = set(IMAGE_MIME_TYPES) | CONVERTED_IMAGE_EXTENSIONS


def is_supported(file_path: str | Path) -> bool:
    ext = Path(file_path).suffix.lower()
    return ext in DOCUMENT_EXTENSIONS or ext in IMAGE_EXTENSIONS


class PageRenderer:
    """Renders a source file into `Page`s, capped at `config.max_pages`."""

    def __init__(self, config: RenderConfig) -> None:
        self._config = config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, file_path: str | Path) -> list[Page]:
        path = Path(file_path)
        self._check_extension(path.name)

        if not path.is_file():
            raise RenderError(f"File not found: {path}")

        size_mb = path.stat().st_size / (1024 * 1024)
        if size_mb > self._config.max_file_size_mb:
            raise RenderError(
                f"File too large ({size_mb:.1f} MB, limit {self._config.max_file_size_mb} MB): {path.name}"
            )

        return self.render_bytes(path.read_bytes(), path.name)

    def render_bytes(self, data: bytes, filename: str) -> list[Page]:
        """Render an in-memory file; `filename` only supplies the extension."""
        ext = self._check_extension(filename)
        if not data:
            raise RenderError(f"Empty file: {filename}")

        if ext in DOCUMENT_EXTENSIONS:
            return self._render_pdf(data, filename)
        return [self._image_page(data, ext, filename)]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _check_extension(filename: str) -> str:
        ext = Path(filename).suffix.lower()
        if ext not in DOCUMENT_EXTENSIONS and ext not in IMAGE_EXTENSIONS:
            raise UnsupportedFormatError(
                f"Unsupported file type {ext or '<none>'!r} for {filename}"
            )
        return ext

    def _render_pdf(self, data: bytes, filename: str) -> list[Page]:
        try:
            doc = pymupdf.open(stream=data, filetype="pdf")
        except (pymupdf.FileDataError, RuntimeError) as e:
            raise RenderError(f"Cannot open PDF {filename}: {e}") from e

        with doc:
            total = doc.page_count
            count = min(total, self._config.max_pages)
            if total > count:
                logger.info(
                    "%s has %d pages; rendering the first %d", filename, total, count
                )
            matrix = pymupdf.Matrix(self._config.scale, self._config.scale)
            pages: list[Page] = []
            for number in range(count):
                try:
                    pix = doc[number].get_pixmap(matrix=matrix)
                    png = pix.tobytes("png")
                except RuntimeError as e:
                    raise RenderError(f"Cannot render page {number + 1} of {filename}: {e}") from e
                pages.append(Page(index=number + 1, image=png, mime_type="image/png"))

        logger.debug("rendered %d page(s) from %s", len(pages), filename)
        return pages

    @staticmethod
    def _image_page(data: bytes, ext: str, filename: str) -> Page:
        if ext in IMAGE_MIME_TYPES:
            return Page(index=1, image=data, mime_type=IMAGE_MIME_TYPES[ext])
        try:
            png = pymupdf.Pixmap(data).tobytes("png")
        except (ValueError, RuntimeError) as e:
            raise RenderError(f"Cannot decode image {filename}: {e}") from e
        return Page(index=1, image=png, mime_type="image/png")
