"""Clause segmentation of normalized utterances."""

import re
from typing import Iterator

# A comma or period directly before a boundary word counts as one boundary.
_BOUNDARY = re.compile(
    r"[,.]?\s+(?:and|also|then)\s+|[.,]\s+|\n+",
    re.IGNORECASE,
)

MIN_CLAUSE_LENGTH = 3


def segment(text: str) -> Iterator[str]:
    """Yield the clauses of a normalized utterance, left to right.

    Pieces shorter than three characters (including the empty pieces
    left by adjacent markers) are dropped.
    """
    for piece in _BOUNDARY.split(text):
        clause = piece.strip()
        if len(clause) >= MIN_CLAUSE_LENGTH:
            yield clause
