"""Page prompts and the JSON schema requested for table extraction."""

from __future__ import annotations

import json
from typing import Any

from folio.pipeline.models import ConversionTarget

TABLES_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "tables": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "headers": {"type": "array", "items": {"type": "string"}},
                    "rows": {
                        "type": "array",
                        "items": {"type": "array", "items": {"type": "string"}},
                    },
                },
                "required": ["headers", "rows"],
            },
        }
    },
    "required": ["tables"],
}

TABULAR_PROMPT = """\
Analyze this document page and extract all tabular data as JSON.
Return a single object of the form {"tables": [...]} where each table has
"headers" (array of strings) and "rows" (array of arrays of strings).
If the page contains no tables, return {"tables": []}.
Focus on accuracy for numbers and financial data.
Respond with JSON only, matching this schema:
"""

DOCUMENT_PROMPT = """\
Perform a high-fidelity OCR on this document page.
Preserve the structure, headers, bullet points, and formatting in Markdown syntax.
Use "# ", "## " and "### " for headings and "- " for bullet points.
Include all text content. Focus on maintaining the logical flow of the document.
Respond with the Markdown only, without code fences or commentary.
"""


def build_prompt(target: ConversionTarget) -> str:
    if target is ConversionTarget.TABULAR:
        return TABULAR_PROMPT + json.dumps(TABLES_SCHEMA)
    return DOCUMENT_PROMPT


def response_schema(target: ConversionTarget) -> dict[str, Any] | None:
    """JSON schema to enforce for `target`, or None for free-form markdown."""
    return TABLES_SCHEMA if target is ConversionTarget.TABULAR else None
