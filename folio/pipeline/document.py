"""Join per-page markdown and classify it into flat document blocks."""

from __future__ import annotations

from collections.abc import Sequence

from folio.pipeline.models import Blank, Block, BulletItem, Heading, Paragraph

PAGE_SEPARATOR = "\n\n--- PAGE BREAK ---\n\n"
PLACEHOLDER_TEXT = "Document converted by Folio"

_HEADING_PREFIXES: tuple[tuple[str, int], ...] = (("# ", 1), ("## ", 2), ("### ", 3))
_BULLET_PREFIXES = ("- ", "* ")


def join_pages(results: Sequence[str]) -> str:
    return PAGE_SEPARATOR.join(results)


def classify_line(line: str, has_content: bool) -> Block | None:
    """Map one line to a block. Returns None for a dropped leading blank line."""
    if not line.strip():
        return Blank() if has_content else None

    for prefix, level in _HEADING_PREFIXES:
        if line.startswith(prefix):
            return Heading(level=level, text=line[len(prefix):])

    if line.startswith(_BULLET_PREFIXES):
        return BulletItem(text=line[2:])

    return Paragraph(text=line)


def parse_blocks(markdown: str) -> list[Block]:
    """Single pass, one block per line, no nesting.

    Every blank line after the first real block yields its own Blank.
    """
    blocks: list[Block] = []
    for line in markdown.split("\n"):
        block = classify_line(line, has_content=bool(blocks))
        if block is not None:
            blocks.append(block)
    return blocks


def assemble_document(results: Sequence[str]) -> list[Block]:
    blocks = parse_blocks(join_pages(results))
    if not blocks:
        return [Paragraph(text=PLACEHOLDER_TEXT)]
    return blocks
