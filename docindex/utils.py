# docindex/utils.py
"""
Utility Functions

This module provides utility functions for loading and saving configuration,
setting up logging, checking multiprocessing support and displaying index
statistics on the console.
"""
import json
import logging
import os
import time
from typing import Dict

# Define a single default configuration dictionary
DEFAULT_CONFIG = {
    "documents_dir": "documents",
    "index_file": "index.json",
    "index_mode": "auto",
    "parallel_index_threshold": 5000,
    "on_error": "skip",
    "file_extensions": [],
    "markup_parser": "html.parser",
    "log_dir": "logs",
    "log_level": "INFO",
    "top_n": 10
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger('docindex.utils')


def load_config(config_file='config.json') -> Dict:
    """
    Load configuration from a JSON file, falling back to defaults if not found or invalid.

    Args:
        config_file (str): Path to the configuration file

    Returns:
        dict: The loaded or default configuration
    """
    if not os.path.exists(config_file):
        return _create_default_config(config_file)

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config = json.load(f)
        if not isinstance(config, dict):
            raise ValueError("configuration must be a JSON object")

        # Merge with defaults to ensure all keys exist
        return {**DEFAULT_CONFIG, **config}
    except (OSError, ValueError) as e:
        logger.warning(f"Error loading config file {config_file}: {e}. Using default configuration.")
        return dict(DEFAULT_CONFIG)


def save_config(config: Dict, config_file='config.json'):
    """
    Save the current configuration to a JSON file.

    Args:
        config (dict): The configuration to save
        config_file (str): Path to the configuration file
    """
    with open(config_file, 'w', encoding='utf-8') as f:
        json.dump(config, f, indent=2)


def _create_default_config(config_file='config.json') -> Dict:
    """
    Create a default configuration file if it doesn't exist.

    Args:
        config_file (str): Path to the configuration file

    Returns:
        dict: The default configuration
    """
    try:
        save_config(DEFAULT_CONFIG, config_file)
        logger.info(f"Created default configuration file: {config_file}")
    except OSError as e:
        logger.warning(f"Could not create default configuration file: {e}")

    return dict(DEFAULT_CONFIG)


def setup_logging(log_dir=None, level='INFO'):
    """
    Configure the 'docindex' loggers to write to the console and, if log_dir is
    given, to a timestamped log file.

    Args:
        log_dir (str, optional): Directory for log files
        level (str): Logging level name

    Returns:
        logging.Logger: The package root logger
    """
    handlers = [logging.StreamHandler()]
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, f"docindex_{time.strftime('%Y%m%d_%H%M%S')}.log")
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    root = logging.getLogger('docindex')
    root.setLevel(level.upper())
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return root


def check_multiprocessing() -> bool:
    """
    Check if multiprocessing is available and functional on the system.

    Returns:
        bool: True if multiprocessing is available and functional, False otherwise
    """
    try:
        import multiprocessing
        with multiprocessing.Pool(1) as _:
            pass
        return True
    except (ImportError, OSError, ValueError):
        return False


def display_banner():
    """Display the program banner."""
    print("=" * 55)
    print("=" * 14 + " Document Term Frequency Index " + "=" * 10)
    print("=" * 55)


def display_top_terms(term_freqs, n=10, title=None):
    """
    Display the n most frequent terms of a term -> count mapping.

    Args:
        term_freqs (dict): Term frequency table
        n (int): Number of terms to display
        title (str, optional): Heading line
    """
    if title:
        print(title)
    ranked = sorted(term_freqs.items(), key=lambda x: x[1], reverse=True)
    for term, freq in ranked[:n]:
        print(f"    {term} => {freq}")


def display_vocabulary_statistics(index, n=10):
    """
    Display vocabulary statistics including count and most frequent terms.

    Args:
        index: The document index object with vocabulary information
        n (int): Number of top terms to show
    """
    print(f"The number of unique terms is: {index.vocab_size}")
    print(f"The top {n} most frequent terms are:")
    for i, (term, freq) in enumerate(index.get_most_frequent_terms(n=n), 1):
        print(f"    {i}. {term} ({freq:,})")
    print("=" * 55)


def display_document_summary(index):
    """
    Display the number of unique terms of each indexed document.

    Args:
        index: The document index object
    """
    for path in sorted(index.documents):
        print(f"{path} has {len(index.get_term_freqs(path))} unique tokens")


def display_detailed_statistics(index):
    """
    Display detailed statistics about the index.

    Args:
        index (BaseIndex): The index instance to analyze
    """
    stats = index.get_statistics()

    print("\n=== Index Statistics ===")
    print(f"Total Documents: {stats['document_count']:,}")
    print(f"Empty Documents: {stats['empty_documents']:,}")
    print(f"Failed Documents: {stats['failed_documents']:,}")
    print(f"Vocabulary Size: {stats['vocabulary_size']:,}")
    print(f"Total Tokens: {stats['total_tokens']:,}")
    print(f"Average Document Length: {stats['avg_doc_length']:.2f} terms")
    print(f"Max Document Length: {stats['max_doc_length']:,} terms")
    print(f"Min Document Length: {stats['min_doc_length']:,} terms")
    print(f"Average Unique Terms per Document: {stats['avg_unique_terms']:.2f}")
    print(f"Average Term Frequency: {stats['avg_term_freq']:.2f}")
    print(f"Max Term Frequency: {stats['max_term_freq']:,}")

    print("\n" + "=" * 56)
