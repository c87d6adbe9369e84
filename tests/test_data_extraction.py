"""Tests for resume text extraction."""

import asyncio
import io

import pytest

from keyword_fit.data_extraction import (
    extract_text,
    extract_text_async,
    extract_text_from_pdf,
    load_resume_text,
)
from keyword_fit.errors import DocumentParseError


def test_extract_text_joins_pages(fake_pdf):
    opened = fake_pdf("Page one", None, "Page three")

    assert extract_text(b"%PDF-fake") == "Page one Page three"
    assert isinstance(opened[0], io.BytesIO)


def test_extract_text_rejects_empty_document():
    with pytest.raises(DocumentParseError):
        extract_text(b"")


def test_extract_text_rejects_invalid_pdf():
    with pytest.raises(DocumentParseError):
        extract_text(b"this is not a pdf document")


def test_extract_text_wraps_library_errors(monkeypatch):
    def broken_open(stream, *args, **kwargs):
        raise ValueError("bad xref")

    monkeypatch.setattr("keyword_fit.data_extraction.pdfplumber.open", broken_open)

    with pytest.raises(DocumentParseError) as exc_info:
        extract_text(b"%PDF-1.4")

    assert isinstance(exc_info.value.__cause__, ValueError)


def test_extract_text_async(fake_pdf):
    fake_pdf("Async page")

    assert asyncio.run(extract_text_async(b"%PDF-fake")) == "Async page"


def test_extract_text_from_pdf_path(tmp_path, fake_pdf):
    fake_pdf("From file")
    path = tmp_path / "resume.pdf"
    path.write_bytes(b"%PDF-fake")

    assert extract_text_from_pdf(path) == "From file"


def test_extract_text_from_pdf_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        extract_text_from_pdf(tmp_path / "missing.pdf")


def test_extract_text_from_pdf_wrong_suffix(tmp_path):
    path = tmp_path / "resume.docx"
    path.write_bytes(b"PK")

    with pytest.raises(DocumentParseError):
        extract_text_from_pdf(path)


def test_load_resume_text_plain_text(tmp_path):
    path = tmp_path / "resume.md"
    path.write_text("# Jane\nPython, SQL Server", encoding="utf-8")

    assert load_resume_text(path) == "# Jane\nPython, SQL Server"


def test_load_resume_text_pdf(tmp_path, fake_pdf):
    fake_pdf("PDF resume")
    path = tmp_path / "Resume.PDF"
    path.write_bytes(b"%PDF-fake")

    assert load_resume_text(path) == "PDF resume"


def test_load_resume_text_unsupported_format(tmp_path):
    path = tmp_path / "resume.docx"
    path.write_bytes(b"PK")

    with pytest.raises(DocumentParseError):
        load_resume_text(path)


def test_load_resume_text_invalid_utf8(tmp_path):
    path = tmp_path / "resume.txt"
    path.write_bytes(b"\xff\xfe\x00bad")

    with pytest.raises(DocumentParseError):
        load_resume_text(path)
