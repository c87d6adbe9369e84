"""
Text Normalization Module.

Turns raw resume and job description text into a canonical form:
lowercase, only ``[a-z0-9+#]`` characters, single spaces between tokens.
"""

import re

# * Everything outside the token alphabet collapses into one space
_NON_TOKEN_CHARS = re.compile(r"[^a-z0-9+#]+")


def normalize(text: str) -> str:
    """
    Normalize raw text for keyword extraction and matching.

    Args:
        text: Raw text from a parsed document or user input.

    Returns:
        Lowercase text restricted to ``[a-z0-9+#]`` tokens separated by
        single spaces, with no leading or trailing space.
    """
    if not text:
        return ""

    return _NON_TOKEN_CHARS.sub(" ", text.lower()).strip()
