"""Tests for PDF text extraction."""

import io

import pytest
from pypdf import PdfWriter

from careermentor.errors import ExtractionError
from careermentor.extractor import PdfExtractor


def blank_pdf() -> bytes:
    writer = PdfWriter()
    writer.add_blank_page(width=200, height=200)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def test_blank_pdf_gives_empty_text():
    assert PdfExtractor().extract_text(blank_pdf()) == ""


def test_garbage_raises_extraction_error():
    with pytest.raises(ExtractionError):
        PdfExtractor().extract_text(b"this is not a pdf")


def test_unexpected_parser_errors_become_extraction_errors(monkeypatch):
    class BrokenReader:
        def __init__(self, stream):
            raise AttributeError("'NumberObject' object has no attribute 'items'")

    monkeypatch.setattr("careermentor.extractor.PdfReader", BrokenReader)

    with pytest.raises(ExtractionError, match="AttributeError"):
        PdfExtractor().extract_text(blank_pdf())
