# docindex/index/standard_index.py
"""
Standard Document Index

Sequential global index builder. Every document in the collection is extracted,
tokenized, normalized and counted, and its term frequency table is stored under
the document's path:

    {path: {term: count}}

Documents whose extraction fails are recorded in ``failures`` and, depending on
``on_error``, either left out of the index ('skip') or stored with an empty
table ('empty'). One failing document never stops the rest of the run.
"""
import heapq
import logging
import os
from collections import Counter
from functools import partial
from threading import Lock
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Tuple

from docindex.index.base import BaseIndex
from docindex.index.storage import load_index, save_index
from docindex.text_processor import DocumentResult, extract_text, process_document

logger = logging.getLogger('docindex.index')


class DocumentFailure(NamedTuple):
    path: str
    error: str


def accepts_filename(filename: str, file_extensions) -> bool:
    """True if the file has one of the extensions, or if no extensions are given."""
    if not file_extensions:
        return True
    return filename.lower().endswith(tuple(ext.lower() for ext in file_extensions))


class StandardIndex(BaseIndex):
    def __init__(self, documents_dir=None, extractor=None, profiler=None, on_error='skip',
                 file_extensions=None, markup_parser='html.parser'):
        if extractor is None:
            extractor = partial(extract_text, parser=markup_parser)
        super().__init__(documents_dir, extractor, profiler, on_error)

        # Empty means every regular file in the directory
        self.file_extensions = tuple(ext.lower() for ext in (file_extensions or ()))

        self.doc_term_freqs: Dict[str, Dict[str, int]] = {}  # path -> {term -> freq}
        self.failures: List[DocumentFailure] = []
        self._lock = Lock()

    def _list_documents(self) -> List[str]:
        try:
            with os.scandir(self.documents_dir) as entries:
                filepaths = [entry.path for entry in entries
                             if entry.is_file() and self._accepts(entry.name)]
        except OSError as e:
            logger.error(f"Cannot read document directory {self.documents_dir}: {e}")
            raise
        return sorted(filepaths)

    def _accepts(self, filename: str) -> bool:
        return accepts_filename(filename, self.file_extensions)

    def _process_single_file(self, filepath: str) -> DocumentResult:
        return process_document(filepath, self.extractor)

    def _record_result(self, result: DocumentResult) -> None:
        if result.ok:
            logger.debug(f"Indexed {result.path}: {len(result.term_freqs)} unique terms")
            self.add_document(result.term_freqs, result.path)
            return

        logger.warning(f"Failed to index {result.path}: {result.error}")
        with self._lock:
            self.failures.append(DocumentFailure(result.path, result.error))
        if self.on_error == 'empty':
            self.add_document({}, result.path)

    def build_index(self):
        if not self.documents_dir:
            raise ValueError("Cannot build index: documents_dir not specified")

        filepaths = self._list_documents()
        logger.info(f"Found {len(filepaths)} documents in {self.documents_dir}")
        return self.index_documents(filepaths)

    def index_documents(self, paths: Iterable[str]):
        """
        Index the given documents one after another.

        Args:
            paths (Iterable[str]): Document keys, each passed to the extractor

        Returns:
            StandardIndex: The index instance (self)
        """
        if self.profiler:
            with self.profiler.timer("Sequential Index Building"):
                self._index_sequential(paths)
        else:
            self._index_sequential(paths)

        if self.failures:
            logger.warning(f"{len(self.failures)} documents could not be indexed")
        return self

    def _index_sequential(self, paths: Iterable[str]) -> None:
        for path in paths:
            logger.info(f"Indexing {path}...")
            self._record_result(self._process_single_file(path))

    @property
    def doc_count(self) -> int:
        return len(self.doc_term_freqs)

    @property
    def vocab_size(self) -> int:
        return len(self.get_term_totals())

    @property
    def documents(self) -> List[str]:
        return list(self.doc_term_freqs)

    def add_document(self, term_freqs: dict, path: str) -> None:
        # Last write for a key wins; entries are never merged
        with self._lock:
            self.doc_term_freqs[path] = dict(term_freqs)

    def get_term_freqs(self, path: str) -> Optional[Dict[str, int]]:
        return self.doc_term_freqs.get(path)

    def get_term_freq(self, term: str, path: str) -> int:
        return self.doc_term_freqs.get(path, {}).get(term, 0)

    def get_term_totals(self) -> Counter:
        """Total count of each term across the whole collection."""
        totals = Counter()
        for term_freqs in self.doc_term_freqs.values():
            totals.update(term_freqs)
        return totals

    def get_most_frequent_terms(self, n: int = 10) -> List[Tuple[str, int]]:
        return heapq.nlargest(n, self.get_term_totals().items(), key=lambda x: x[1])

    def get_document_lengths(self):
        """
        Get the length of each document and the average document length.

        Returns:
            Tuple[Dict[str, int], float]: Document lengths dictionary and average length
        """
        doc_lengths = {
            path: sum(term_freqs.values())
            for path, term_freqs in self.doc_term_freqs.items()
        }

        avg_length = sum(doc_lengths.values()) / max(len(doc_lengths), 1)

        return doc_lengths, avg_length

    def save(self, filepath: str) -> None:
        """
        Save the index to a JSON file.

        Args:
            filepath (str): Path where the index should be saved
        """
        save_index(self.doc_term_freqs, filepath)

    @classmethod
    def load(cls, filepath: str):
        index = cls()
        index.doc_term_freqs = load_index(filepath)
        return index

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get comprehensive statistics about the index.

        Returns:
            Dict[str, Any]: Dictionary containing various statistics about the index
        """
        doc_lengths, avg_doc_length = self.get_document_lengths()
        lengths = list(doc_lengths.values())
        unique_counts = [len(term_freqs) for term_freqs in self.doc_term_freqs.values()]

        term_totals = self.get_term_totals()
        if term_totals:
            avg_term_freq = sum(term_totals.values()) / len(term_totals)
            max_term_freq = max(term_totals.values())
        else:
            avg_term_freq = max_term_freq = 0

        return {
            "document_count": self.doc_count,
            "vocabulary_size": len(term_totals),
            "total_tokens": sum(lengths),
            "avg_doc_length": avg_doc_length,
            "max_doc_length": max(lengths) if lengths else 0,
            "min_doc_length": min(lengths) if lengths else 0,
            "empty_documents": sum(1 for n in lengths if n == 0),
            "avg_unique_terms": sum(unique_counts) / max(1, len(unique_counts)),
            "avg_term_freq": avg_term_freq,
            "max_term_freq": max_term_freq,
            "failed_documents": len(self.failures),
        }
