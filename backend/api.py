"""
FastAPI Backend for Resume Keyword Fit.

Provides REST API endpoints for:
- Listing the configured multi-word phrases
- Extracting keywords from job descriptions
- Scoring plain-text and PDF resumes against a job description
"""

import logging
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware

from backend.schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    KeywordsRequest,
    KeywordsResponse,
    PhrasesResponse,
)
from backend.services import keyword_fit_service, max_upload_bytes
from keyword_fit import __version__
from keyword_fit.errors import ConfigError, DocumentParseError, EmptyInputError
from keyword_fit.logging_config import configure_logging
from keyword_fit.pipeline import require_job_description
from keyword_fit.tips import Seniority

# * Load environment variables
load_dotenv()
configure_logging()

logger = logging.getLogger("keyword_fit.api")

UPLOAD_CHUNK_SIZE = 64 * 1024

# * Create FastAPI app
app = FastAPI(
    title="Resume Keyword Fit API",
    description="API for scoring how well a resume covers the keywords of a job description",
    version=__version__,
)

# * Configure CORS for a browser frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _check_job_description(job_description: Optional[str]) -> str:
    try:
        return require_job_description(job_description)
    except EmptyInputError as e:
        raise HTTPException(status_code=400, detail=str(e))


async def _read_upload(file: UploadFile, max_bytes: int) -> bytes:
    """Read an upload, failing as soon as it exceeds the size limit."""
    chunks: list[bytes] = []
    total = 0

    while True:
        chunk = await file.read(UPLOAD_CHUNK_SIZE)
        if not chunk:
            break
        total += len(chunk)
        if total > max_bytes:
            raise HTTPException(
                status_code=413,
                detail=f"Uploaded file exceeds size limit of {max_bytes} bytes",
            )
        chunks.append(chunk)

    return b"".join(chunks)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "Resume Keyword Fit API", "version": __version__}


@app.get("/api/phrases", response_model=PhrasesResponse)
async def list_phrases():
    """
    List the multi-word phrases recognized as single keywords.
    """
    try:
        phrases = keyword_fit_service.phrases()
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
    return PhrasesResponse(phrases=phrases, count=len(phrases))


@app.post("/api/keywords", response_model=KeywordsResponse)
async def job_keywords(request: KeywordsRequest):
    """
    Extract the keyword set of a job description.
    """
    _check_job_description(request.job_description)

    try:
        keywords = keyword_fit_service.keywords(request.job_description)
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
    return KeywordsResponse(keywords=keywords, count=len(keywords))


@app.post("/api/analyze", response_model=AnalyzeResponse)
async def analyze_text(request: AnalyzeRequest):
    """
    Score plain resume text against a job description.
    """
    _check_job_description(request.job_description)

    try:
        return keyword_fit_service.analyze(
            resume_text=request.resume_text,
            job_description=request.job_description,
            seniority=request.seniority,
        )
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/api/analyze-pdf", response_model=AnalyzeResponse)
async def analyze_pdf(
    file: UploadFile = File(...),
    job_description: str = Form(""),
    seniority: Optional[Seniority] = Form(None),
):
    """
    Score an uploaded PDF resume against a job description.
    """
    _check_job_description(job_description)

    document = await _read_upload(file, max_upload_bytes())

    try:
        return await keyword_fit_service.analyze_pdf(
            document=document,
            job_description=job_description,
            seniority=seniority,
        )
    except DocumentParseError as e:
        logger.warning("Rejected upload filename=%s error=%s", file.filename, e)
        raise HTTPException(status_code=422, detail=str(e))
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


# * Run with: uvicorn backend.api:app --reload --port 8000
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
