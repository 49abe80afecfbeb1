# docindex/index/factory.py
"""
Index Factory

This module implements a factory pattern for creating appropriate document index
implementations based on document count, available system resources, and user preferences.
"""
import importlib
import logging
import os

from docindex.utils import check_multiprocessing

logger = logging.getLogger('docindex.factory')


class IndexFactory:
    """
    Factory class for creating document index implementations.

    Class Attributes:
        DEFAULT_PARALLEL_DOC_THRESHOLD (int): Document count threshold for switching
                                             from StandardIndex to ParallelIndex
        INDEX_CLASSES (dict): Mapping of implementation names to class paths
    """

    DEFAULT_PARALLEL_DOC_THRESHOLD = 5000

    INDEX_CLASSES = {
        "parallel": "parallel_index.ParallelIndex",  # Process pool, large collections
        "standard": "standard_index.StandardIndex"   # Single process
    }

    @staticmethod
    def _log(profiler, message, level=logging.INFO):
        if profiler:
            profiler.log_message(message)
        else:
            logger.log(level, message)

    @staticmethod
    def create_index(documents_dir=None, extractor=None, profiler=None, mode='auto',
                     doc_count=None, parallel_threshold=None, on_error='skip',
                     file_extensions=None, markup_parser='html.parser'):
        """
        Create and return the appropriate document index implementation.

        Args:
            documents_dir (str, optional): Directory containing documents to index
            extractor (Callable, optional): Text extraction function (defaults to extract_text)
            profiler (Profiler, optional): Performance profiler for timing operations
            mode (str): Index implementation to use ('auto', 'standard', or 'parallel')
            doc_count (int, optional): Known document count (if available)
            parallel_threshold (int, optional): Document count at which 'auto' picks
                                              ParallelIndex over StandardIndex
            on_error (str): Failure policy passed to the index, 'skip' or 'empty'
            file_extensions (list, optional): Only index files with these extensions
            markup_parser (str): BeautifulSoup parser used by the default extractor

        Returns:
            BaseIndex: An instance of the selected index implementation
        """
        from docindex.index.standard_index import StandardIndex, accepts_filename

        options = dict(extractor=extractor, profiler=profiler, on_error=on_error,
                       file_extensions=file_extensions, markup_parser=markup_parser)

        if parallel_threshold is None:
            parallel_threshold = IndexFactory.DEFAULT_PARALLEL_DOC_THRESHOLD

        if mode not in ('auto', *IndexFactory.INDEX_CLASSES):
            raise ValueError(f"Unknown index mode: {mode!r}")

        # The index raises on build; nothing to gain from a parallel one here
        if not documents_dir or not os.path.isdir(documents_dir):
            IndexFactory._log(profiler, f"Warning: Document directory '{documents_dir}' not found. "
                                        "Defaulting to StandardIndex.", logging.WARNING)
            return StandardIndex(documents_dir, **options)

        has_multiprocessing = check_multiprocessing()

        if doc_count is None and mode == 'auto':
            try:
                with os.scandir(documents_dir) as entries:
                    doc_count = sum(1 for entry in entries
                                    if entry.is_file() and accepts_filename(entry.name, file_extensions))
                IndexFactory._log(profiler, f"Counted {doc_count} documents in {documents_dir}")
            except OSError as e:
                IndexFactory._log(profiler, f"Warning: Could not count files in {documents_dir}: {e}",
                                  logging.WARNING)
                return StandardIndex(documents_dir, **options)

        original_mode = mode

        if mode == 'auto':
            if has_multiprocessing and doc_count and doc_count >= parallel_threshold:
                mode = 'parallel'
            else:
                mode = 'standard'

            IndexFactory._log(profiler, f"Auto-selected index mode: {mode} "
                                        f"(doc_count={doc_count}, threshold={parallel_threshold}, "
                                        f"multiprocessing={'available' if has_multiprocessing else 'unavailable'})")

        if mode == 'parallel' and not has_multiprocessing:
            IndexFactory._log(profiler, "Warning: Parallel index requested but multiprocessing not "
                                        "available. Using standard index.", logging.WARNING)
            mode = 'standard'

        if original_mode != 'auto':
            IndexFactory._log(profiler, f"Using explicitly requested index mode: {mode}")

        module_name, class_name = IndexFactory.INDEX_CLASSES[mode].rsplit(".", 1)
        module = importlib.import_module(f"docindex.index.{module_name}")
        IndexFactory._log(profiler, f"Created index implementation: {module_name}.{class_name}")

        return getattr(module, class_name)(documents_dir, **options)
