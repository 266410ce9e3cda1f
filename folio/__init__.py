"""Folio: turn PDF pages and images into spreadsheets or Word documents with a vision model."""

from folio.config import FolioConfig, load_config
from folio.converter import ConversionOutcome, DocumentConverter
from folio.errors import (
    ConversionCancelled,
    EmptyInputError,
    FolioError,
    InferenceError,
    RenderError,
    UnsupportedFormatError,
)
from folio.llm import VisionProvider, create_llm_provider
from folio.pipeline import ConversionPipeline, ConversionTarget, assemble_document, assemble_tables
from folio.render import PageRenderer

__version__ = "0.1.0"

__all__ = [
    "ConversionCancelled",
    "ConversionOutcome",
    "ConversionPipeline",
    "ConversionTarget",
    "DocumentConverter",
    "EmptyInputError",
    "FolioConfig",
    "FolioError",
    "InferenceError",
    "PageRenderer",
    "RenderError",
    "UnsupportedFormatError",
    "VisionProvider",
    "assemble_document",
    "assemble_tables",
    "create_llm_provider",
    "load_config",
]
