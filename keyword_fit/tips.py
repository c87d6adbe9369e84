"""
Resume improvement tips chosen from the score, the number of missing
keywords and the seniority of the target role.
"""

from enum import Enum
from typing import Optional

LOW_SCORE_THRESHOLD = 40
DECENT_SCORE_THRESHOLD = 70


class Seniority(str, Enum):
    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"


LOW_SCORE_TIP = (
    "Your match score is low. Re-read the job description and add skills you actually have."
)
DECENT_SCORE_TIP = (
    "Your match score is decent. Try to naturally include a few more missing keywords."
)
STRONG_SCORE_TIP = "Your match score is strong. Focus on clarity and achievements."
MISSING_KEYWORDS_TIP = (
    "Pick 3 to 5 missing keywords that genuinely describe you and add them to your bullet points."
)
SENIORITY_TIPS = {
    Seniority.JUNIOR: (
        "For junior roles, highlight projects and coursework that use these technologies."
    ),
    Seniority.SENIOR: (
        "For senior roles, emphasize leadership, ownership, and impact, not just tools."
    ),
}


def build_tips(
    score: float,
    missing_count: int,
    seniority: Optional[Seniority | str] = None,
) -> list[str]:
    """
    Build advice for improving the resume.

    Args:
        score: Match percentage.
        missing_count: Number of job keywords missing from the resume.
        seniority: Target role seniority, if known.

    Returns:
        Tips in display order.
    """
    tips = []

    if score < LOW_SCORE_THRESHOLD:
        tips.append(LOW_SCORE_TIP)
    elif score < DECENT_SCORE_THRESHOLD:
        tips.append(DECENT_SCORE_TIP)
    else:
        tips.append(STRONG_SCORE_TIP)

    if missing_count > 0:
        tips.append(MISSING_KEYWORDS_TIP)

    if seniority is not None:
        tip = SENIORITY_TIPS.get(Seniority(seniority))
        if tip:
            tips.append(tip)

    return tips
