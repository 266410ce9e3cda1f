"""Document conversion subsystem: one source file in, one artifact out."""

from folio.converter.converter import DocumentConverter
from folio.converter.models import ConversionOutcome

__all__ = [
    "ConversionOutcome",
    "DocumentConverter",
]
