# docindex/index/parallel_index.py
"""
Parallel Document Index

This module implements a parallelized version of the document index. Each worker
process owns one document at a time, from extraction through counting, and shares
no state with the others. The parent process is the single consumer of the
results and inserts them into the global index one by one, so the final index is
identical to the one StandardIndex builds.
"""
import logging
from multiprocessing import Pool, cpu_count
from typing import List, Tuple

from docindex.index.standard_index import StandardIndex
from docindex.text_processor import DocumentResult, process_document

logger = logging.getLogger('docindex.index')


class ParallelIndex(StandardIndex):
    """
    Parallel implementation of a document index.

    Attributes:
        num_workers (int): Number of worker processes to use
        chunk_size (int): Number of documents handed to a worker at a time
    """
    def __init__(self, documents_dir=None, extractor=None, profiler=None, on_error='skip',
                 file_extensions=None, markup_parser='html.parser',
                 num_workers=None, chunk_size=None):
        """
        Initialize the ParallelIndex.

        Args:
            documents_dir (str, optional): Directory containing documents to index
            extractor (Callable, optional): Text extraction function; must be picklable
            profiler (Profiler, optional): Performance profiler for timing operations
            on_error (str): Failure policy, 'skip' or 'empty'
            file_extensions (list, optional): Only index files with these extensions
            markup_parser (str): BeautifulSoup parser used by the default extractor
            num_workers (int, optional): Number of worker processes to use
                                        If None, will be determined automatically
            chunk_size (int, optional): Number of documents per worker chunk
                                       If None, will be calculated dynamically
        """
        super().__init__(documents_dir, extractor, profiler, on_error,
                         file_extensions, markup_parser)
        self.num_workers = num_workers or self.get_optimal_num_workers()
        self.chunk_size = chunk_size

    def index_documents(self, paths):
        """
        Index the given documents using a pool of worker processes.

        Returns:
            ParallelIndex: The index instance (self)
        """
        paths = list(paths)
        timer_label = f"Parallel Index Building ({self.num_workers} workers)"

        if self.profiler:
            with self.profiler.timer(timer_label):
                self._parallel_index(paths)
        else:
            self._parallel_index(paths)

        if self.failures:
            logger.warning(f"{len(self.failures)} documents could not be indexed")
        return self

    def _parallel_index(self, paths: List[str]) -> None:
        # Not worth the process start-up cost for a handful of files
        if len(paths) <= self.num_workers:
            self._index_sequential(paths)
            return

        chunk_size = self.chunk_size
        if chunk_size is None:
            chunk_size = max(1, min(100, len(paths) // (self.num_workers * 2)))

        args_list = [(path, self.extractor) for path in paths]
        try:
            with Pool(processes=self.num_workers) as pool:
                results = pool.map(ParallelIndex._process_file_static, args_list,
                                   chunksize=chunk_size)
        except Exception as e:
            message = f"Error in parallel processing: {e}. Falling back to sequential."
            logger.warning(message)
            if self.profiler:
                self.profiler.log_message(message)
            self._index_sequential(paths)
            return

        logger.info(f"Processed {len(results)} documents with {self.num_workers} workers")
        for result in results:
            self._record_result(result)

    @staticmethod
    def _process_file_static(args: Tuple) -> DocumentResult:
        """
        Process one document in a worker process.

        Args:
            args (Tuple): (path, extractor)

        Returns:
            DocumentResult: The document's term table or its failure
        """
        path, extractor = args
        return process_document(path, extractor)

    @staticmethod
    def get_optimal_num_workers() -> int:
        """
        Determine the number of worker processes based on system resources.

        Returns:
            int: Number of worker processes
        """
        num_cores = cpu_count()
        return min(max(1, num_cores - 1), 16)  # Reserve one core for the parent
