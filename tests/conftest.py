"""Shared fixtures for the keyword fit test suite."""

from __future__ import annotations

import pytest

from keyword_fit.config import MatchConfig


@pytest.fixture(autouse=True)
def _isolate_runtime_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear local runtime env that can leak into tests on developer machines."""
    for key in (
        "KEYWORD_FIT_PHRASES_FILE",
        "KEYWORD_FIT_MIN_TOKEN_LENGTH",
        "KEYWORD_FIT_REMOVE_ALL_PHRASES",
        "KEYWORD_FIT_MAX_UPLOAD_BYTES",
        "KEYWORD_FIT_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def config() -> MatchConfig:
    return MatchConfig()


class FakePage:
    def __init__(self, text):
        self._text = text

    def extract_text(self):
        return self._text


class FakePDF:
    def __init__(self, page_texts):
        self.pages = [FakePage(text) for text in page_texts]

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


@pytest.fixture
def fake_pdf(monkeypatch: pytest.MonkeyPatch):
    """Make pdfplumber return the given page texts for any input."""

    def install(*page_texts):
        opened = []

        def fake_open(stream, *args, **kwargs):
            opened.append(stream)
            return FakePDF(page_texts)

        monkeypatch.setattr("keyword_fit.data_extraction.pdfplumber.open", fake_open)
        return opened

    return install


JOB_DESCRIPTION = """
Data Scientist (Python / SQL Server)

We need experience with SQL Server and machine learning. You will own
data analysis for our product team and use Visual Studio daily.
Nice to have: deep learning, C++ and C#.
"""

RESUME = """
Jane Smith - Data Scientist

Built machine learning models in Python and C++.
Led data analysis projects; five years of SQL Server administration.
"""


@pytest.fixture
def job_description() -> str:
    return JOB_DESCRIPTION


@pytest.fixture
def resume_text() -> str:
    return RESUME
