# docindex/text_processor/term_frequency.py
"""
Per-Document Term Frequencies

Folds the token stream of one document into a term -> count table, and wraps
the extract -> tokenize -> normalize -> count pipeline for a single document in
an explicit success/failure result. ``process_document`` is module level so that
worker processes can run it.
"""
import logging
from collections import Counter
from typing import Callable, Dict, NamedTuple, Optional

from docindex.text_processor.extractor import ExtractionError
from docindex.text_processor.lexer import Lexer
from docindex.text_processor.normalizer import normalize

logger = logging.getLogger('docindex.term_frequency')


class DocumentResult(NamedTuple):
    """Outcome of processing one document: a term table or an error, never both."""
    path: str
    term_freqs: Optional[Dict[str, int]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_term_freqs(text: str) -> Counter:
    """
    Count the normalized terms of a text.

    Args:
        text (str): Raw text of one document

    Returns:
        Counter: Term frequency table (empty if the text has no tokens)
    """
    term_freqs = Counter()
    for token in Lexer(text):
        term_freqs[normalize(token)] += 1
    return term_freqs


def process_document(path: str, extractor: Callable[[str], str]) -> DocumentResult:
    """
    Extract, tokenize and count one document.

    Failures are returned rather than raised so that one bad document never
    stops the others.

    Args:
        path (str): Document key, passed to the extractor
        extractor (Callable[[str], str]): Function returning the raw text of a document

    Returns:
        DocumentResult: The term table, or the error that prevented building it
    """
    try:
        text = extractor(path)
        return DocumentResult(path, term_freqs=dict(build_term_freqs(text)))
    except ExtractionError as e:
        return DocumentResult(path, error=e.reason)
    except Exception as e:
        logger.exception(f"Unexpected error processing {path}")
        return DocumentResult(path, error=f"{type(e).__name__}: {e}")
