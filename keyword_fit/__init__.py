"""
Resume Keyword Fit - Source Package.

This package contains modules for:
- Text normalization of resumes and job descriptions
- Keyword extraction with known multi-word phrases
- Keyword matching and percentage scoring
- Text extraction from PDF resumes
"""

__version__ = "1.0.0"
