"""
Data Extraction Module.

Provides functionality to extract text from PDF resumes and to load
plain-text resumes and job descriptions from disk.
"""

import asyncio
import io
import logging
from pathlib import Path

import pdfplumber

from keyword_fit.errors import DocumentParseError

logger = logging.getLogger("keyword_fit.data_extraction")

TEXT_SUFFIXES = {".txt", ".md"}


def extract_text(document: bytes) -> str:
    """
    Extract text content from PDF bytes.

    Args:
        document: Raw bytes of a PDF file.

    Returns:
        Text of all pages joined by spaces.

    Raises:
        DocumentParseError: If the bytes are not a parseable PDF.
    """
    if not document:
        raise DocumentParseError("Document is empty")

    text_content = []

    try:
        with pdfplumber.open(io.BytesIO(document)) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text_content.append(page_text)
    except Exception as e:
        logger.warning("PDF parsing failed bytes=%s error=%s", len(document), e)
        raise DocumentParseError(f"Could not read PDF: {e}") from e

    return " ".join(text_content)


async def extract_text_async(document: bytes) -> str:
    """Extract PDF text in a worker thread."""
    return await asyncio.to_thread(extract_text, document)


def extract_text_from_pdf(pdf_path: str | Path) -> str:
    """
    Extract text content from a PDF file.

    Args:
        pdf_path: Path to the PDF file.

    Returns:
        Extracted text content as a single string.

    Raises:
        FileNotFoundError: If the PDF file does not exist.
        DocumentParseError: If the file is not a valid PDF.
    """
    pdf_path = Path(pdf_path)

    if not pdf_path.exists():
        raise FileNotFoundError(f"PDF file not found: {pdf_path}")

    if pdf_path.suffix.lower() != ".pdf":
        raise DocumentParseError(f"File is not a PDF: {pdf_path}")

    return extract_text(pdf_path.read_bytes())


def read_text_file(path: str | Path) -> str:
    """
    Read a UTF-8 text file.

    Raises:
        FileNotFoundError: If the file does not exist.
        DocumentParseError: If the file is not valid UTF-8.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise DocumentParseError(f"File is not UTF-8 text: {path}") from e


def load_resume_text(resume_path: str | Path) -> str:
    """
    Load resume text from a PDF or plain-text file.

    Args:
        resume_path: Path to a .pdf, .txt or .md resume.

    Returns:
        Raw resume text.

    Raises:
        FileNotFoundError: If the file does not exist.
        DocumentParseError: If the file type is unsupported or unreadable.
    """
    resume_path = Path(resume_path)
    suffix = resume_path.suffix.lower()

    if suffix == ".pdf":
        return extract_text_from_pdf(resume_path)

    if suffix in TEXT_SUFFIXES:
        return read_text_file(resume_path)

    raise DocumentParseError(
        f"Unsupported resume format {suffix or '(none)'}: expected .pdf, .txt or .md"
    )
