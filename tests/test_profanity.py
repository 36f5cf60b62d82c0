from __future__ import annotations

from chirpy.domain.profanity import MAX_CHIRP_LENGTH, clean_body, is_valid_body


def test_profane_words_are_masked_case_insensitively():
    assert clean_body("This is a kerfuffle opinion I need to share with the world") == (
        "This is a **** opinion I need to share with the world"
    )
    assert clean_body("I hear Mastodon is better than Chirpy. sharbert I need to migrate") == (
        "I hear Mastodon is better than Chirpy. **** I need to migrate"
    )
    assert clean_body("I really need a KERFUFFLE to go to bed sooner, Fornax !") == (
        "I really need a **** to go to bed sooner, **** !"
    )


def test_punctuation_attached_words_are_kept():
    assert clean_body("Sharbert! is fine") == "Sharbert! is fine"


def test_length_limit():
    assert is_valid_body("x" * MAX_CHIRP_LENGTH)
    assert not is_valid_body("x" * (MAX_CHIRP_LENGTH + 1))
    assert not is_valid_body(None)
