"""
Keyword Matching Module.

Checks which job description keywords appear in a resume using
whole-word / whole-phrase matching on normalized text.
"""

import re
from collections.abc import Iterable
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from keyword_fit.normalizer import normalize


class MatchResult(BaseModel):
    """Keywords partitioned into those found in the resume and the rest."""

    model_config = ConfigDict(frozen=True)

    present: tuple[str, ...] = Field(default=(), description="Keywords found in the resume")
    missing: tuple[str, ...] = Field(default=(), description="Keywords not found in the resume")

    @property
    def total(self) -> int:
        return len(self.present) + len(self.missing)


@lru_cache(maxsize=4096)
def _boundary_pattern(keyword: str) -> re.Pattern:
    """Pattern for a normalized keyword not touching another letter or digit."""
    return re.compile(r"(?<![a-z0-9])" + re.escape(keyword) + r"(?![a-z0-9])")


class ResumeIndex:
    """
    Boundary-aware lookup over a normalized resume.

    A keyword is present when it occurs in the normalized resume with no
    letter or digit directly before or after it. ``+`` and ``#`` are not
    boundaries themselves, so ``c++`` matches "C++" but not "c++11", while
    ``css`` matches "html+css" and ``sql`` does not match "mysql".
    """

    def __init__(self, resume_text: str):
        """
        Initialize the index.

        Args:
            resume_text: Resume text, normalized or raw.
        """
        self.text = normalize(resume_text)
        self.tokens = set(self.text.split())

    def contains(self, keyword: str) -> bool:
        """
        Check whether a keyword occurs in the resume on word boundaries.

        Args:
            keyword: Single token or multi-word phrase.

        Returns:
            True if the normalized keyword is found between boundaries.
        """
        key = normalize(keyword)
        if not key:
            return False

        # * Whole-token hit needs no scan
        if key in self.tokens:
            return True

        return _boundary_pattern(key).search(self.text) is not None


def match(resume_normalized: str, keywords: Iterable[str]) -> MatchResult:
    """
    Split keywords into those present in the resume and those missing.

    Args:
        resume_normalized: Normalized resume text.
        keywords: Keywords extracted from the job description.

    Returns:
        MatchResult with sorted, disjoint present and missing tuples.
    """
    index = ResumeIndex(resume_normalized)

    present = []
    missing = []

    for keyword in sorted(set(keywords)):
        if index.contains(keyword):
            present.append(keyword)
        else:
            missing.append(keyword)

    return MatchResult(present=tuple(present), missing=tuple(missing))
