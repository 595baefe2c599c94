"""Tests for utterance normalization and clause segmentation."""

from saydone.config import ParserVocabulary
from saydone.services.normalizer import normalize
from saydone.services.segmenter import segment


def test_normalize_expands_shorthand_and_removes_filler(vocabulary) -> None:
    """Test that shorthand is expanded and filler removed."""
    assert normalize("  Remind me to call Mom  ", vocabulary) == "call mother"


def test_normalize_expansion_is_whole_word(vocabulary) -> None:
    """Test that shorthand inside a longer word is left alone."""
    assert normalize("check tmwx logs", vocabulary) == "check tmwx logs"
    assert normalize("pay rent tmw", vocabulary) == "pay rent tomorrow"


def test_normalize_collapses_whitespace(vocabulary) -> None:
    """Test that runs of whitespace become single spaces."""
    assert normalize("please   buy \t milk", vocabulary) == "buy milk"


def test_normalize_empty_input(vocabulary) -> None:
    """Test that empty input stays empty."""
    assert normalize("", vocabulary) == ""
    assert normalize("   ", vocabulary) == ""


def test_normalize_expands_before_removing_filler() -> None:
    """Test that an expansion can produce filler that is then removed."""
    vocabulary = ParserVocabulary(expansions=(("plz", "please"),), filler_phrases=("please",))
    assert normalize("plz send report", vocabulary) == "send report"


def test_segment_splits_on_words_and_punctuation() -> None:
    """Test splitting on 'and', 'then' and commas."""
    clauses = list(segment("call mother and email boss, then book flight"))
    assert clauses == ["call mother", "email boss", "book flight"]


def test_segment_comma_before_boundary_word_is_one_boundary() -> None:
    """Test that ', also' splits once and leaves no 'also' behind."""
    assert list(segment("call mother tonight, also email the client")) == [
        "call mother tonight",
        "email the client",
    ]


def test_segment_overlapping_markers_leave_no_empty_clause() -> None:
    """Test that adjacent markers do not produce empty clauses."""
    assert list(segment("buy milk. and call bob")) == ["buy milk", "call bob"]


def test_segment_drops_short_pieces() -> None:
    """Test that pieces of two characters or fewer are dropped."""
    assert list(segment("go, ok, buy bread")) == ["buy bread"]


def test_segment_splits_on_newlines() -> None:
    """Test that newlines separate clauses."""
    assert list(segment("buy milk\ncall bob")) == ["buy milk", "call bob"]


def test_segment_ignores_boundary_words_inside_words() -> None:
    """Test that 'and' inside a word is not a boundary."""
    assert list(segment("fix android app")) == ["fix android app"]


def test_segment_is_case_insensitive() -> None:
    """Test that boundary words match in any case."""
    assert list(segment("buy milk AND call bob")) == ["buy milk", "call bob"]


def test_segment_is_lazy_and_handles_empty_text() -> None:
    """Test that segment returns a generator and yields nothing for empty text."""
    clauses = segment("")
    assert iter(clauses) is clauses
    assert list(clauses) == []
