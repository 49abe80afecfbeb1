# docindex/index/storage.py
"""
Index Persistence

The persisted index is one JSON object mapping each document key to an object
of term -> count:

    {"docs/glClear.xhtml": {"GLCLEAR": 12, "BUFFER": 4}, "docs/empty.xhtml": {}}

This file is the only artifact handed to downstream query and ranking code.
"""
import json
import logging
from typing import Dict

logger = logging.getLogger('docindex.storage')


class IndexFormatError(ValueError):
    """Raised when a well-formed JSON file does not hold a term frequency index."""


def save_index(index: Dict[str, Dict[str, int]], filepath: str) -> None:
    """
    Write a global index to a JSON file.

    Args:
        index (dict): Mapping of document key to term frequency table
        filepath (str): Destination file

    Raises:
        OSError: If the destination cannot be written
        TypeError, ValueError: If the index cannot be encoded as JSON
    """
    # Fully encoded before the destination is opened (and truncated).
    # ASCII escapes keep surrogate-escaped filenames from os.scandir intact.
    payload = json.dumps({doc: dict(term_freqs) for doc, term_freqs in index.items()},
                         ensure_ascii=True).encode('ascii')
    with open(filepath, 'wb') as f:
        f.write(payload)
    logger.info(f"Saved {len(index)} documents to {filepath}")


def load_index(filepath: str) -> Dict[str, Dict[str, int]]:
    """
    Read a global index written by save_index.

    Args:
        filepath (str): Source file

    Returns:
        dict: Mapping of document key to term frequency table

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file is not well-formed JSON
        IndexFormatError: If the JSON does not have the index structure
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise IndexFormatError(f"{filepath}: expected a JSON object, got {type(data).__name__}")

    for doc, term_freqs in data.items():
        if not isinstance(term_freqs, dict):
            raise IndexFormatError(f"{filepath}: entry for {doc!r} is not an object")
        for term, count in term_freqs.items():
            if not term:
                raise IndexFormatError(f"{filepath}: empty term in {doc!r}")
            # bool is an int subclass
            if isinstance(count, bool) or not isinstance(count, int) or count < 1:
                raise IndexFormatError(
                    f"{filepath}: count for term {term!r} in {doc!r} is not a positive integer")

    logger.info(f"Loaded {len(data)} documents from {filepath}")
    return data
