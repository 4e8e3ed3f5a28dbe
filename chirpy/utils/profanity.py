from chirpy.utils.exceptions import ChirpTooLongException

MAX_CHIRP_LENGTH = 140
BANNED_WORDS = frozenset({"kerfuffle", "sharbert", "fornax"})
MASK = "****"


def clean_body(body: str) -> str:
    """
    Mask banned words in a chirp body.

    Words are the pieces between single spaces; a word is masked only when its
    lowercase form is exactly a banned word (no stripping of punctuation).
    """
    words = body.split(" ")
    return " ".join(MASK if word.lower() in BANNED_WORDS else word for word in words)


def validate_chirp_body(body: str) -> str:
    """Reject over-long bodies, then return the cleaned body."""
    if len(body) > MAX_CHIRP_LENGTH:
        raise ChirpTooLongException()
    return clean_body(body)
