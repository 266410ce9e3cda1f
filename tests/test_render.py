"""Tests for PageRenderer: PDF rasterization, image passthrough, and limits."""

import struct

import pymupdf
import pytest

from folio.config.models import RenderConfig
from folio.errors import RenderError, UnsupportedFormatError
from folio.render import PageRenderer, is_supported

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _png_bytes(width=8, height=8):
    pix = pymupdf.Pixmap(pymupdf.csRGB, pymupdf.IRect(0, 0, width, height), False)
    pix.clear_with(255)
    return pix.tobytes("png")


def _bmp_bytes():
    """A 1x1 white 24-bit BMP."""
    pixels = b"\xff\xff\xff\x00"
    header = b"BM" + struct.pack("<IHHI", 14 + 40 + len(pixels), 0, 0, 54)
    info = struct.pack("<IiiHHIIiiII", 40, 1, 1, 1, 24, 0, len(pixels), 2835, 2835, 0, 0)
    return header + info + pixels


@pytest.fixture
def renderer():
    return PageRenderer(RenderConfig())


# ---------------------------------------------------------------------------
# PDF
# ---------------------------------------------------------------------------


class TestRenderPdf:
    def test_pages_in_order(self, renderer, sample_pdf):
        pages = renderer.render(sample_pdf)
        assert [p.index for p in pages] == [1, 2, 3]
        assert all(p.mime_type == "image/png" for p in pages)
        assert all(p.image.startswith(PNG_SIGNATURE) for p in pages)

    def test_scale_sets_resolution(self, tmp_path, make_pdf):
        path = make_pdf(tmp_path / "one.pdf", ["x"])
        page = PageRenderer(RenderConfig(scale=1.0)).render(path)[0]
        pix = pymupdf.Pixmap(page.image)
        assert (pix.width, pix.height) == (200, 200)

        page = PageRenderer(RenderConfig(scale=2.0)).render(path)[0]
        pix = pymupdf.Pixmap(page.image)
        assert (pix.width, pix.height) == (400, 400)

    def test_max_pages_cap(self, tmp_path, make_pdf):
        path = make_pdf(tmp_path / "long.pdf", [f"page {n}" for n in range(12)])
        pages = PageRenderer(RenderConfig(max_pages=10)).render(path)
        assert len(pages) == 10
        assert pages[-1].index == 10

    def test_render_bytes(self, renderer, sample_pdf):
        pages = renderer.render_bytes(sample_pdf.read_bytes(), "upload.pdf")
        assert len(pages) == 3

    def test_corrupt_pdf(self, renderer):
        with pytest.raises(RenderError, match="Cannot open PDF"):
            renderer.render_bytes(b"definitely not a pdf", "broken.pdf")


# ---------------------------------------------------------------------------
# Images
# ---------------------------------------------------------------------------


class TestRenderImage:
    def test_native_format_passthrough(self, renderer, tmp_path):
        data = _png_bytes()
        path = tmp_path / "scan.png"
        path.write_bytes(data)

        pages = renderer.render(path)
        assert len(pages) == 1
        assert pages[0].index == 1
        assert pages[0].image == data
        assert pages[0].mime_type == "image/png"

    def test_jpeg_mime_type(self, renderer):
        page = renderer.render_bytes(b"\xff\xd8\xff fake jpeg", "photo.JPG")[0]
        assert page.mime_type == "image/jpeg"

    def test_bmp_converted_to_png(self, renderer, tmp_path):
        path = tmp_path / "scan.bmp"
        path.write_bytes(_bmp_bytes())

        page = renderer.render(path)[0]
        assert page.mime_type == "image/png"
        assert page.image.startswith(PNG_SIGNATURE)


# ---------------------------------------------------------------------------
# Errors and limits
# ---------------------------------------------------------------------------


class TestRenderErrors:
    def test_unsupported_extension(self, renderer, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello")
        with pytest.raises(UnsupportedFormatError):
            renderer.render(path)

    def test_unsupported_checked_before_existence(self, renderer, tmp_path):
        with pytest.raises(UnsupportedFormatError):
            renderer.render(tmp_path / "missing.docx")

    def test_missing_file(self, renderer, tmp_path):
        with pytest.raises(RenderError, match="File not found"):
            renderer.render(tmp_path / "missing.pdf")

    def test_empty_bytes(self, renderer):
        with pytest.raises(RenderError, match="Empty file"):
            renderer.render_bytes(b"", "blank.png")

    def test_file_too_large(self, tmp_path):
        path = tmp_path / "big.png"
        path.write_bytes(b"\0" * (1024 * 1024 + 1))
        with pytest.raises(RenderError, match="File too large"):
            PageRenderer(RenderConfig(max_file_size_mb=1)).render(path)

    @pytest.mark.parametrize(
        "name,expected",
        [("a.pdf", True), ("a.PNG", True), ("a.tiff", True), ("a.docx", False), ("a", False)],
    )
    def test_is_supported(self, name, expected):
        assert is_supported(name) is expected


def test_renderer_uses_pymupdf_module_name():
    import folio.render.renderer as renderer_module

    assert renderer_module.pymupdf.__name__ == "pymupdf"
    assert not hasattr(renderer_module, "fitz")
