"""Exception hierarchy for Folio."""

from __future__ import annotations


class FolioError(Exception):
    """Base class for every error a conversion run can surface."""


class UnsupportedFormatError(FolioError):
    """The source file type cannot be turned into page images."""


class RenderError(FolioError):
    """The source file could not be rasterized into pages."""


class EmptyInputError(FolioError):
    """A conversion run was started with zero pages."""


class ConversionCancelled(FolioError):
    """The caller cancelled the run between two pages."""


class InferenceError(FolioError):
    """Wraps provider-specific exceptions with context."""

    def __init__(
        self, provider: str, operation: str, cause: Exception, retryable: bool = False
    ) -> None:
        self.provider = provider
        self.operation = operation
        self.retryable = retryable
        super().__init__(f"{provider} {operation} failed: {cause}")
        self.__cause__ = cause
