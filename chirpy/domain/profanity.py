"""Domain helpers for chirp body validation and profanity masking."""
from __future__ import annotations

from typing import Iterable

MAX_CHIRP_LENGTH = 140
MASK = "****"
PROFANE_WORDS = frozenset({"kerfuffle", "sharbert", "fornax"})


def is_valid_body(value: str | None, max_length: int = MAX_CHIRP_LENGTH) -> bool:
    """Return True when the body fits within the allowed length."""
    if value is None:
        return False
    return len(value) <= max_length


def clean_body(value: str, words: Iterable[str] = PROFANE_WORDS) -> str:
    """Replace whole words found in the blocklist (case-insensitive) with a mask.

    Splits on single spaces only, so "Kerfuffle!" keeps its punctuation and is
    left untouched.
    """
    blocked = {w.lower() for w in words}
    return " ".join(MASK if token.lower() in blocked else token for token in value.split(" "))
