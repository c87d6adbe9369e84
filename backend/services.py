"""
Business Logic Services for the Resume Keyword Fit API.
"""

import logging
import os
import time
from typing import Optional

from backend.schemas import AnalyzeResponse
from keyword_fit.config import MatchConfig, load_config
from keyword_fit.keyword_engine import extract_keywords
from keyword_fit.normalizer import normalize
from keyword_fit.pipeline import AnalysisResult, analyze, analyze_document_async
from keyword_fit.tips import Seniority, build_tips

# * Module logger
logger = logging.getLogger("keyword_fit.services")

MAX_UPLOAD_BYTES_ENV = "KEYWORD_FIT_MAX_UPLOAD_BYTES"
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024


def max_upload_bytes() -> int:
    """Upload size limit from the environment."""
    raw = os.getenv(MAX_UPLOAD_BYTES_ENV)
    if not raw:
        return DEFAULT_MAX_UPLOAD_BYTES
    try:
        return max(1, int(raw))
    except ValueError:
        logger.warning("Ignoring invalid %s=%r", MAX_UPLOAD_BYTES_ENV, raw)
        return DEFAULT_MAX_UPLOAD_BYTES


class KeywordFitService:
    """Service for scoring resumes against job descriptions."""

    def __init__(self, config: Optional[MatchConfig] = None):
        """
        Initialize the service.

        Args:
            config: Matching configuration. Loaded from the environment
                on first use when omitted.
        """
        self._config = config

    @property
    def config(self) -> MatchConfig:
        """Lazy-load configuration."""
        if self._config is None:
            self._config = load_config()
        return self._config

    def phrases(self) -> list[str]:
        return list(self.config.known_phrases)

    def keywords(self, job_description: str) -> list[str]:
        return extract_keywords(normalize(job_description), self.config)

    def analyze(
        self,
        resume_text: str,
        job_description: str,
        seniority: Optional[Seniority] = None,
    ) -> AnalyzeResponse:
        """
        Analyze plain resume text against a job description.

        Args:
            resume_text: Resume text.
            job_description: Job description text.
            seniority: Target role seniority for tips.

        Returns:
            AnalyzeResponse with score, keyword lists and tips.
        """
        logger.info(
            "Analyze start resume_chars=%s job_chars=%s",
            len(resume_text),
            len(job_description),
        )
        result = analyze(resume_text, job_description, self.config)
        return self._build_response(result, seniority)

    async def analyze_pdf(
        self,
        document: bytes,
        job_description: str,
        seniority: Optional[Seniority] = None,
    ) -> AnalyzeResponse:
        """
        Analyze a PDF resume against a job description.

        Raises:
            DocumentParseError: If the upload is not a readable PDF.
        """
        start = time.perf_counter()
        logger.info(
            "Analyze pdf start bytes=%s job_chars=%s",
            len(document),
            len(job_description),
        )
        result = await analyze_document_async(document, job_description, self.config)
        logger.info("Analyze pdf complete duration=%.3fs", time.perf_counter() - start)
        return self._build_response(result, seniority)

    def _build_response(
        self,
        result: AnalysisResult,
        seniority: Optional[Seniority],
    ) -> AnalyzeResponse:
        report = result.report

        return AnalyzeResponse(
            score=report.score,
            total_keywords=report.total_keywords,
            present_count=report.present_count,
            missing_count=report.missing_count,
            keywords=result.keywords,
            present=result.match.present,
            missing=result.match.missing,
            tips=build_tips(report.score, report.missing_count, seniority),
        )


# * Global service instance
keyword_fit_service = KeywordFitService()
