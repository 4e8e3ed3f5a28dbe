import pytest

from chirpy.utils.profanity import clean_body, validate_chirp_body
from chirpy.utils.exceptions import ChirpTooLongException


@pytest.mark.parametrize("body, expected", [
    ("this is kerfuffle and SHARBERT", "this is **** and ****"),
    ("I hear Mastodon is better than Chirpy. sharbert I need to migrate",
     "I hear Mastodon is better than Chirpy. **** I need to migrate"),
    ("I really need a kerfuffle to go to bed sooner, Fornax !",
     "I really need a **** to go to bed sooner, **** !"),
    # punctuation glued to a word keeps it from matching
    ("what a Kerfuffle!", "what a Kerfuffle!"),
    ("kerfufflesharbert", "kerfufflesharbert"),
    # only single spaces split words, and spacing survives the round trip
    ("fornax  fornax", "****  ****"),
    ("", ""),
])
def test_clean_body(body, expected):
    assert clean_body(body) == expected


def test_140_characters_is_allowed():
    body = "a" * 140
    assert validate_chirp_body(body) == body


def test_too_long_is_rejected_before_filtering():
    # 141 characters that would shrink below the limit once filtered
    body = " ".join(["kerfuffle"] * 14) + "xx"
    assert len(body) == 141
    assert len(clean_body(body)) <= 140
    with pytest.raises(ChirpTooLongException) as exc_info:
        validate_chirp_body(body)
    assert exc_info.value.status_code == 400
