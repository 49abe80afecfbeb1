# docindex/index/base.py
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Tuple

from docindex.text_processor import DocumentResult

ON_ERROR_POLICIES = ('skip', 'empty')


class BaseIndex(ABC):
    def __init__(self, documents_dir=None, extractor=None, profiler=None, on_error='skip'):
        if on_error not in ON_ERROR_POLICIES:
            raise ValueError(f"on_error must be one of {ON_ERROR_POLICIES}, got {on_error!r}")
        self.documents_dir = documents_dir
        self.extractor = extractor
        self.profiler = profiler
        self.on_error = on_error

    @property
    @abstractmethod
    def doc_count(self) -> int: ...

    @property
    @abstractmethod
    def vocab_size(self) -> int: ...

    @abstractmethod
    def build_index(self): ...

    @abstractmethod
    def index_documents(self, paths: Iterable[str]): ...

    @abstractmethod
    def add_document(self, term_freqs: dict, path: str) -> None: ...

    @abstractmethod
    def _process_single_file(self, filepath: str) -> DocumentResult: ...

    @abstractmethod
    def get_term_freq(self, term: str, path: str) -> int: ...

    @abstractmethod
    def get_most_frequent_terms(self, n: int = 10) -> List[Tuple[str, int]]: ...

    @abstractmethod
    def save(self, filepath: str) -> None: ...

    @classmethod
    @abstractmethod
    def load(cls, filepath: str): ...

    @abstractmethod
    def get_statistics(self) -> Dict[str, Any]: ...

    @abstractmethod
    def get_term_freqs(self, path: str) -> Optional[Dict[str, int]]: ...
