"""
Exception types raised by the keyword fit package.
"""


class KeywordFitError(Exception):
    """Base class for all package errors."""


class DocumentParseError(KeywordFitError):
    """Raised when a resume document cannot be turned into text."""


class EmptyInputError(KeywordFitError):
    """Raised by callers that reject a blank job description upfront."""


class ConfigError(KeywordFitError):
    """Raised for invalid configuration values or unreadable phrase files."""
