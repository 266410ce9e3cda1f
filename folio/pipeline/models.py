"""Pydantic models for pages, tables, blocks and run status."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConversionTarget(str, Enum):
    TABULAR = "tabular"
    DOCUMENT = "document"

    @property
    def extension(self) -> str:
        return ".xlsx" if self is ConversionTarget.TABULAR else ".docx"

    @classmethod
    def parse(cls, value: str) -> ConversionTarget:
        """Resolve a user-facing name (excel, xlsx, word, docx, ...) to a target."""
        key = value.strip().lower()
        aliases = {
            "tabular": cls.TABULAR,
            "excel": cls.TABULAR,
            "xlsx": cls.TABULAR,
            "document": cls.DOCUMENT,
            "word": cls.DOCUMENT,
            "docx": cls.DOCUMENT,
        }
        if key not in aliases:
            raise ValueError(
                f"Unknown conversion target {value!r}. "
                f"Supported: {', '.join(sorted(aliases))}"
            )
        return aliases[key]


class Page(BaseModel):
    """One rendered page image, 1-based index matching the source ordering."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=1)
    image: bytes
    mime_type: str = "image/png"


Cell = str | int | float | bool | None


class Table(BaseModel):
    """A table as returned for one page. Rows may be ragged."""

    headers: list[str]
    rows: list[list[Cell]]

    @field_validator("headers", mode="before")
    @classmethod
    def _scalar_headers_as_text(cls, value):
        # scalar headers become text, null becomes ""
        if isinstance(value, list):
            return [
                "" if h is None else str(h) if isinstance(h, (int, float, bool)) else h
                for h in value
            ]
        return value


# -- document blocks -------------------------------------------------------


class Heading(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["heading"] = "heading"
    level: Literal[1, 2, 3]
    text: str


class BulletItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["bullet"] = "bullet"
    text: str


class Paragraph(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["paragraph"] = "paragraph"
    text: str


class Blank(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["blank"] = "blank"


Block = Annotated[Union[Heading, BulletItem, Paragraph, Blank], Field(discriminator="kind")]


# -- results ---------------------------------------------------------------


class TableResult(BaseModel):
    kind: Literal["tables"] = "tables"
    tables: list[Table] = Field(default_factory=list)


class DocumentResult(BaseModel):
    kind: Literal["document"] = "document"
    blocks: list[Block] = Field(default_factory=list)


ConversionResult = Annotated[Union[TableResult, DocumentResult], Field(discriminator="kind")]


class ConversionStatus(BaseModel):
    """Snapshot of a run, handed to the caller's progress callback."""

    step: str
    progress: int = Field(default=0, ge=0, le=100)
    running: bool = False
    error: str | None = None
