"""Tests for final description cleanup."""

from saydone.services.cleaner import clean_description


def test_removes_stop_words_and_capitalises(vocabulary) -> None:
    """Test that stop words go and the first letter is capitalised."""
    assert clean_description("email the client", vocabulary) == "Email client"


def test_removes_timing_words(vocabulary) -> None:
    """Test that leftover timing words are dropped from the description."""
    assert clean_description("wash car on saturday morning", vocabulary) == "Wash car saturday"
    assert clean_description("finish essay this week", vocabulary) == "Finish essay"


def test_removes_duration_phrases(vocabulary) -> None:
    """Test that vague duration phrases are dropped."""
    assert clean_description("before it's late fix roof", vocabulary) == "Late fix roof"


def test_strips_edge_punctuation(vocabulary) -> None:
    """Test that punctuation left at either end is trimmed."""
    assert clean_description(": fix production bug -", vocabulary) == "Fix production bug"


def test_falls_back_to_uncleaned_text(vocabulary) -> None:
    """Test that a too-short result falls back to the text before cleaning."""
    assert clean_description("to do", vocabulary, fallback="to do tomorrow") == "To do"


def test_falls_back_to_original_clause(vocabulary) -> None:
    """Test that the original clause is used when everything else is too short."""
    assert clean_description("", vocabulary, fallback="eod") == "Eod"
