"""
Matching Configuration.

Holds the known multi-word phrase list and keyword extraction options.
Configuration is immutable and passed explicitly to the extractor so tests
and callers can substitute their own phrase lists.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from keyword_fit.errors import ConfigError
from keyword_fit.normalizer import normalize

logger = logging.getLogger("keyword_fit.config")

# * Environment variables
PHRASES_FILE_ENV = "KEYWORD_FIT_PHRASES_FILE"
MIN_TOKEN_LENGTH_ENV = "KEYWORD_FIT_MIN_TOKEN_LENGTH"
REMOVE_ALL_PHRASES_ENV = "KEYWORD_FIT_REMOVE_ALL_PHRASES"

DEFAULT_KNOWN_PHRASES: tuple[str, ...] = (
    "machine learning",
    "deep learning",
    "data analysis",
    "project management",
    "natural language processing",
    "sql server",
    "visual studio",
)

# * Tokens shorter than this are dropped ("and" is kept, "to" is not)
DEFAULT_MIN_TOKEN_LENGTH = 3

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class MatchConfig(BaseModel):
    """Options controlling keyword extraction."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    known_phrases: tuple[str, ...] = Field(
        default=DEFAULT_KNOWN_PHRASES,
        description="Multi-word phrases kept as single keywords",
    )
    min_token_length: int = Field(
        default=DEFAULT_MIN_TOKEN_LENGTH,
        ge=1,
        description="Minimum length of a single-token keyword",
    )
    remove_all_phrase_occurrences: bool = Field(
        default=False,
        description="Strip every occurrence of a found phrase instead of the first one",
    )

    @field_validator("known_phrases", mode="before")
    @classmethod
    def _normalize_phrases(cls, value):
        if isinstance(value, str):
            value = [value]

        phrases: list[str] = []
        for phrase in value:
            cleaned = normalize(str(phrase))
            if cleaned and cleaned not in phrases:
                phrases.append(cleaned)

        return tuple(phrases)


def read_phrases_file(path: str | Path) -> list[str]:
    """
    Read known phrases from a text file, one phrase per line.

    Blank lines and lines starting with ``#`` are ignored.

    Raises:
        ConfigError: If the file cannot be read.
    """
    path = Path(path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read phrases file {path}: {e}") from e

    phrases = []
    for line in lines:
        line = line.strip()
        if line and not line.startswith("#"):
            phrases.append(line)

    return phrases


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be true or false, got {raw!r}")


def load_config(phrases_file: Optional[str | Path] = None) -> MatchConfig:
    """
    Build a MatchConfig from the environment.

    Args:
        phrases_file: Optional phrase file; takes precedence over
            ``KEYWORD_FIT_PHRASES_FILE``.

    Returns:
        The resulting configuration.

    Raises:
        ConfigError: If any value is invalid.
    """
    load_dotenv()

    options: dict = {}

    phrases_path = phrases_file or os.getenv(PHRASES_FILE_ENV)
    if phrases_path:
        options["known_phrases"] = read_phrases_file(phrases_path)

    raw_min_length = os.getenv(MIN_TOKEN_LENGTH_ENV)
    if raw_min_length:
        try:
            options["min_token_length"] = int(raw_min_length)
        except ValueError as e:
            raise ConfigError(
                f"{MIN_TOKEN_LENGTH_ENV} must be an integer, got {raw_min_length!r}"
            ) from e

    raw_remove_all = os.getenv(REMOVE_ALL_PHRASES_ENV)
    if raw_remove_all:
        options["remove_all_phrase_occurrences"] = _parse_bool(
            REMOVE_ALL_PHRASES_ENV, raw_remove_all
        )

    try:
        config = MatchConfig(**options)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    logger.debug(
        "Config loaded phrases=%s min_token_length=%s remove_all=%s",
        len(config.known_phrases),
        config.min_token_length,
        config.remove_all_phrase_occurrences,
    )
    return config
