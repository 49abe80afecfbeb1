# docindex/index/__init__.py
from .base import BaseIndex
from .storage import IndexFormatError, load_index, save_index
from .standard_index import DocumentFailure, StandardIndex
from .parallel_index import ParallelIndex
from .factory import IndexFactory
