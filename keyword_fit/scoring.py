"""
Match Scoring Module.

Turns a keyword match into a percentage score.
"""

from pydantic import BaseModel, ConfigDict, Field

from keyword_fit.matcher import MatchResult


class ScoreReport(BaseModel):
    """Read-only summary of a keyword match."""

    model_config = ConfigDict(frozen=True)

    score: float = Field(..., ge=0, le=100, description="Match percentage, two decimals")
    total_keywords: int = Field(..., ge=0)
    present_count: int = Field(..., ge=0)
    missing_count: int = Field(..., ge=0)


def score(present_count: int, total_count: int) -> float:
    """
    Compute the match percentage rounded half-up to two decimals.

    Args:
        present_count: Number of keywords found in the resume.
        total_count: Number of keywords extracted from the job description.

    Returns:
        Percentage in [0, 100]. A job description without keywords scores 0.
    """
    total = max(1, total_count)
    present = max(0, min(present_count, total))

    # * round(present / total * 10000) half-up, in integer arithmetic
    scaled = (present * 20000 + total) // (2 * total)

    return scaled / 100


def build_report(match_result: MatchResult) -> ScoreReport:
    """
    Summarize a match result.

    Args:
        match_result: Present / missing keyword partition.

    Returns:
        ScoreReport with the score and keyword counts.
    """
    present_count = len(match_result.present)
    missing_count = len(match_result.missing)
    total = present_count + missing_count

    return ScoreReport(
        score=score(present_count, total),
        total_keywords=total,
        present_count=present_count,
        missing_count=missing_count,
    )
