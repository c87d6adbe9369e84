"""
Analysis Pipeline.

Runs one resume against one job description:
normalize -> extract keywords (job only) -> match -> score.
"""

import logging
import time
from typing import Optional

from pydantic import BaseModel, ConfigDict

from keyword_fit.config import MatchConfig
from keyword_fit.data_extraction import extract_text, extract_text_async
from keyword_fit.errors import EmptyInputError
from keyword_fit.keyword_engine import extract_keywords
from keyword_fit.matcher import MatchResult, match
from keyword_fit.normalizer import normalize
from keyword_fit.scoring import ScoreReport, build_report

logger = logging.getLogger("keyword_fit.pipeline")


class AnalysisResult(BaseModel):
    """Outcome of a single resume / job description analysis."""

    model_config = ConfigDict(frozen=True)

    keywords: list[str]
    match: MatchResult
    report: ScoreReport


def require_job_description(text: Optional[str]) -> str:
    """
    Reject a blank job description.

    The pipeline itself accepts empty text and scores it 0; CLI and API
    call this first so the user gets a clear message instead.

    Raises:
        EmptyInputError: If the text is empty or whitespace only.
    """
    if text is None or not text.strip():
        raise EmptyInputError("Job description cannot be empty")
    return text


def analyze(
    resume_text: str,
    jd_text: str,
    config: Optional[MatchConfig] = None,
) -> AnalysisResult:
    """
    Score a resume against a job description.

    Args:
        resume_text: Raw resume text.
        jd_text: Raw job description text.
        config: Phrase list and extraction options.

    Returns:
        AnalysisResult with keywords, match partition and score report.
    """
    start = time.perf_counter()

    resume_clean = normalize(resume_text)
    jd_clean = normalize(jd_text)

    keywords = extract_keywords(jd_clean, config)
    match_result = match(resume_clean, keywords)
    report = build_report(match_result)

    logger.info(
        "Analyze complete keywords=%s present=%s missing=%s score=%s duration=%.3fs",
        report.total_keywords,
        report.present_count,
        report.missing_count,
        report.score,
        time.perf_counter() - start,
    )

    return AnalysisResult(keywords=keywords, match=match_result, report=report)


def analyze_document(
    document: bytes,
    jd_text: str,
    config: Optional[MatchConfig] = None,
) -> AnalysisResult:
    """
    Score a PDF resume against a job description.

    Raises:
        DocumentParseError: If the PDF cannot be read. No partial result
            is produced.
    """
    resume_text = extract_text(document)
    logger.info("Resume extracted bytes=%s chars=%s", len(document), len(resume_text))
    return analyze(resume_text, jd_text, config)


async def analyze_document_async(
    document: bytes,
    jd_text: str,
    config: Optional[MatchConfig] = None,
) -> AnalysisResult:
    """
    Score a PDF resume against a job description (async).

    Only the text extraction runs off the event loop; the scoring itself
    is cheap and synchronous.
    """
    resume_text = await extract_text_async(document)
    logger.info("Resume extracted async bytes=%s chars=%s", len(document), len(resume_text))
    return analyze(resume_text, jd_text, config)
