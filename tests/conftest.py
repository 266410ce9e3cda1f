"""Shared test fixtures for Folio."""

import pymupdf
import pytest
from unittest.mock import AsyncMock, MagicMock

from folio.config.models import FolioConfig, OutputConfig
from folio.llm.base import VisionProvider
from folio.llm.models import LLMConfig
from folio.pipeline.models import Page


def _write_pdf(path, page_texts):
    """Write a small PDF with one text line per page."""
    doc = pymupdf.open()
    for text in page_texts:
        page = doc.new_page(width=200, height=200)
        page.insert_text((20, 40), text)
    doc.save(str(path))
    doc.close()
    return path


@pytest.fixture
def sample_pages():
    return [Page(index=i, image=f"page-{i}".encode()) for i in (1, 2, 3)]


@pytest.fixture
def mock_vision_provider():
    """A provider whose infer() echoes the page index as markdown."""
    provider = MagicMock(spec=VisionProvider)
    provider.config = LLMConfig(provider="google", model="test-model")

    async def _fake_infer(page, target):
        return f"# Page {page.index}"

    provider.infer = AsyncMock(side_effect=_fake_infer)
    return provider


@pytest.fixture
def sample_config(tmp_path):
    return FolioConfig(output=OutputConfig(base_dir=str(tmp_path / "out")))


@pytest.fixture
def sample_pdf(tmp_path):
    return _write_pdf(tmp_path / "report.pdf", ["Quarterly report", "Revenue table", "Appendix"])


@pytest.fixture
def make_pdf():
    return _write_pdf
