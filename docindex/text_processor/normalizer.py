# docindex/text_processor/normalizer.py
import string

# Only a-z are folded; non-ASCII letters pass through unchanged.
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def normalize(token: str) -> str:
    """Map a raw token to its term: the token with ASCII letters upper-cased."""
    return token.translate(_ASCII_UPPER)
