"""
Keyword Extraction Engine.

Extracts the keyword set from a job description. Known multi-word phrases
are recognized first and kept as single keywords; the remaining text is
split into single-token keywords.
"""

from typing import Optional

from keyword_fit.config import MatchConfig
from keyword_fit.normalizer import normalize

_DEFAULT_CONFIG = MatchConfig()


def find_known_phrases(text: str, known_phrases: tuple[str, ...]) -> list[str]:
    """
    Find known phrases contained in the text.

    Containment is a plain substring test, so "sql servers" contains
    "sql server". Every phrase is tested against the full text, so
    overlapping phrases are all reported.

    Args:
        text: Normalized text.
        known_phrases: Normalized phrases in configured order.

    Returns:
        Found phrases in configured order.
    """
    return [phrase for phrase in known_phrases if phrase in text]


def strip_phrases(text: str, phrases: list[str], remove_all: bool = False) -> str:
    """
    Blank out found phrases so their words are not re-added as tokens.

    Args:
        text: Normalized text.
        phrases: Phrases to remove, applied in order.
        remove_all: Remove every occurrence instead of only the first.

    Returns:
        Text with the phrase occurrences replaced by a space.
    """
    count = -1 if remove_all else 1

    for phrase in phrases:
        text = text.replace(phrase, " ", count)

    return text


def extract_keywords(
    jd_normalized: str,
    config: Optional[MatchConfig] = None,
) -> list[str]:
    """
    Extract keywords from a job description.

    Args:
        jd_normalized: Normalized job description text. Raw text is
            accepted too since normalization is idempotent.
        config: Phrase list and extraction options.

    Returns:
        Sorted list of unique keywords (single tokens and phrases).
    """
    config = config or _DEFAULT_CONFIG
    text = normalize(jd_normalized)

    if not text:
        return []

    # * 1. Recognize phrases before tokenizing
    found_phrases = find_known_phrases(text, config.known_phrases)

    # * 2. Remove phrase occurrences from the working text
    remaining = strip_phrases(
        text,
        found_phrases,
        remove_all=config.remove_all_phrase_occurrences,
    )

    # * 3. Split and keep long enough tokens
    keywords = {
        token for token in remaining.split(" ")
        if len(token) >= config.min_token_length
    }

    # * 4. Union with phrases
    keywords.update(found_phrases)

    return sorted(keywords)
