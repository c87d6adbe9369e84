"""
Pydantic Schemas for API Request/Response Models.
"""

from typing import Optional

from pydantic import BaseModel, Field

from keyword_fit.tips import Seniority


class AnalyzeRequest(BaseModel):
    """Request body for the analyze endpoint."""

    resume_text: str = Field(..., description="Plain resume text")
    job_description: str = Field(..., description="The job description text to analyze")
    seniority: Optional[Seniority] = Field(default=None, description="Seniority of the target role")


class KeywordsRequest(BaseModel):
    """Request body for the keywords endpoint."""

    job_description: str = Field(..., description="The job description text")


class KeywordsResponse(BaseModel):
    """Keywords extracted from a job description."""

    keywords: list[str]
    count: int


class PhrasesResponse(BaseModel):
    """Configured multi-word phrases."""

    phrases: list[str]
    count: int


class AnalyzeResponse(BaseModel):
    """Response from the analyze endpoints."""

    score: float = Field(..., ge=0, le=100, description="Match percentage, two decimals")
    total_keywords: int = Field(..., ge=0, description="Keywords extracted from the job")
    present_count: int = Field(..., ge=0)
    missing_count: int = Field(..., ge=0)
    keywords: list[str] = Field(default=[], description="All job keywords, sorted")
    present: list[str] = Field(default=[], description="Job keywords found in the resume")
    missing: list[str] = Field(default=[], description="Job keywords not found in the resume")
    tips: list[str] = Field(default=[], description="Suggestions for improving the resume")
