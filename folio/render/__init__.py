"""Page source: renders PDFs and images into page images."""

from folio.render.renderer import (
    DOCUMENT_EXTENSIONS,
    IMAGE_EXTENSIONS,
    PageRenderer,
    is_supported,
)

__all__ = [
    "DOCUMENT_EXTENSIONS",
    "IMAGE_EXTENSIONS",
    "PageRenderer",
    "is_supported",
]
