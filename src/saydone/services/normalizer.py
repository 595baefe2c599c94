"""Utterance normalization: shorthand expansion and filler removal."""

from ..config import ParserVocabulary
from .matching import collapse_whitespace, keyword_pattern


def normalize(text: str, vocabulary: ParserVocabulary) -> str:
    """
    Prepare a raw utterance for segmentation.

    Shorthands are expanded before filler phrases are removed, so an
    expansion can itself be dropped as filler.

    Args:
        text: Raw transcribed or typed input
        vocabulary: Expansion table and filler phrases

    Returns:
        Normalized text (empty for empty or whitespace-only input)
    """
    normalized = text.strip()

    for short_form, expanded in vocabulary.expansions:
        normalized = keyword_pattern(short_form).sub(expanded, normalized)

    for phrase in vocabulary.filler_phrases:
        normalized = keyword_pattern(phrase).sub("", normalized)

    return collapse_whitespace(normalized)
