"""Tests for job description keyword extraction."""

import pytest

from keyword_fit.config import DEFAULT_KNOWN_PHRASES, MatchConfig
from keyword_fit.keyword_engine import extract_keywords, find_known_phrases, strip_phrases
from keyword_fit.normalizer import normalize


def test_empty_job_description_yields_no_keywords():
    assert extract_keywords("") == []


def test_whitespace_only_job_description_yields_no_keywords():
    assert extract_keywords("   ") == []


def test_phrases_are_kept_and_their_words_not_repeated():
    jd = normalize("Experience with SQL Server and machine learning required.")

    assert extract_keywords(jd) == [
        "and",
        "experience",
        "machine learning",
        "required",
        "sql server",
        "with",
    ]


def test_short_tokens_are_dropped():
    keywords = extract_keywords(normalize("Go to AI or ML on a Mac"))

    assert keywords == ["mac"]


def test_keywords_are_sorted_and_unique():
    keywords = extract_keywords(normalize("python Python PYTHON django python"))

    assert keywords == ["django", "python"]
    assert len(keywords) == len(set(keywords))


def test_symbols_stay_part_of_tokens():
    keywords = extract_keywords(normalize("C++, C# and F# developers"))

    assert "c++" in keywords
    assert "developers" in keywords
    # * "c#" and "f#" are two characters long
    assert "c#" not in keywords


@pytest.mark.parametrize("phrase", DEFAULT_KNOWN_PHRASES)
def test_every_contained_known_phrase_is_extracted(phrase):
    jd = normalize(f"We value {phrase} skills.")

    assert phrase in extract_keywords(jd)


def test_phrase_containment_is_plain_substring():
    keywords = extract_keywords(normalize("Administer SQL Servers"))

    # * "sql server" is a substring of "sql servers"; the leftover "s" is too short
    assert keywords == ["administer", "sql server"]


def test_only_first_phrase_occurrence_is_removed_by_default():
    jd = normalize("Machine learning first, then more machine learning.")

    keywords = extract_keywords(jd)

    # * Known limitation: the second occurrence still yields single tokens
    assert "machine learning" in keywords
    assert "machine" in keywords
    assert "learning" in keywords


def test_remove_all_phrase_occurrences_option():
    jd = normalize("Machine learning first, then more machine learning.")
    config = MatchConfig(remove_all_phrase_occurrences=True)

    keywords = extract_keywords(jd, config)

    assert keywords == ["first", "machine learning", "more", "then"]


def test_overlapping_phrases_are_each_tested_against_full_text():
    config = MatchConfig(known_phrases=("deep learning", "learning systems"))

    keywords = extract_keywords(normalize("Deep learning systems"), config)

    assert keywords == ["deep learning", "learning systems", "systems"]


def test_custom_phrase_list_replaces_defaults():
    config = MatchConfig(known_phrases=("ci cd", "unit testing"))

    keywords = extract_keywords(normalize("CI/CD, unit testing and machine learning"), config)

    assert "ci cd" in keywords
    assert "unit testing" in keywords
    assert "machine learning" not in keywords
    assert "machine" in keywords


def test_min_token_length_option():
    config = MatchConfig(min_token_length=5)

    keywords = extract_keywords(normalize("Python and Java or Rust"), config)

    assert keywords == ["python"]


def test_raw_text_is_normalized_first():
    assert extract_keywords("SQL-Server!") == extract_keywords("sql server")


def test_find_known_phrases_keeps_configured_order():
    found = find_known_phrases("visual studio and sql server", ("sql server", "visual studio"))

    assert found == ["sql server", "visual studio"]


def test_strip_phrases_first_occurrence_only():
    assert strip_phrases("a b x a b", ["a b"]) == "  x a b"


def test_strip_phrases_all_occurrences():
    assert strip_phrases("a b x a b", ["a b"], remove_all=True) == "  x  "
