# docindex/main.py
"""
Document Term Frequency Indexer

Builds a term frequency index for a directory of XHTML/HTML/XML documents and
saves it as JSON, or loads an existing index and reports on it.

    python main.py --documents_dir docs.gl/gl4 --index_file index.json
    python main.py --use_existing --index_file index.json --stats
    python main.py --inspect docs.gl/gl4/glClear.xhtml
"""
import argparse
import logging
import os
import sys
from functools import partial

from docindex.index import IndexFactory, StandardIndex
from docindex.index.base import ON_ERROR_POLICIES
from docindex.profiler import Profiler
from docindex.text_processor import ExtractionError, build_term_freqs, extract_text
from docindex.utils import (display_banner,
                            display_detailed_statistics,
                            display_document_summary,
                            display_top_terms,
                            display_vocabulary_statistics,
                            load_config,
                            setup_logging)

logger = logging.getLogger('docindex.main')


def parse_arguments(argv=None):
    """
    Parse command-line arguments, using the configuration file for defaults.

    Args:
        argv (list, optional): Arguments to parse instead of sys.argv[1:]

    Returns:
        argparse.Namespace: The parsed arguments
    """
    # The config file supplies the defaults, so it has to be found first
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument('--config', default='config.json')
    known, _ = pre_parser.parse_known_args(argv)
    config = load_config(known.config)

    parser = argparse.ArgumentParser(
        description='Build a term frequency index from a directory of markup documents.',
        parents=[pre_parser])

    # General Options
    parser.add_argument('--documents_dir', default=config['documents_dir'],
                        help=f"Directory containing documents to index (default: {config['documents_dir']})")
    parser.add_argument('--index_file', default=config['index_file'],
                        help=f"Path to save/load the index (default: {config['index_file']})")
    parser.add_argument('--use_existing', action='store_true',
                        help='Load the existing index instead of building a new one')
    parser.add_argument('--inspect', metavar='FILE', default=None,
                        help='Extract a single document and show its most frequent terms')
    parser.add_argument('--top_n', type=int, default=config['top_n'],
                        help=f"Number of most frequent terms to display (default: {config['top_n']})")
    parser.add_argument('--list_documents', action='store_true',
                        help='Show the number of unique terms of every document')
    parser.add_argument('--stats', action='store_true',
                        help='Display detailed index statistics')
    parser.add_argument('--report', default=None,
                        help='Write the performance report to this file')

    # Indexing Options
    parser.add_argument('--index_mode', choices=['auto', 'standard', 'parallel'], default=config['index_mode'],
                        help=f"Index implementation to use (default: {config['index_mode']})")
    parser.add_argument('--parallel_index_threshold', type=int, default=config['parallel_index_threshold'],
                        help=f"Document threshold for parallel index (default: {config['parallel_index_threshold']})")
    parser.add_argument('--on_error', choices=ON_ERROR_POLICIES, default=config['on_error'],
                        help=f"What to do with documents that fail to extract (default: {config['on_error']})")
    parser.add_argument('--file_extensions', nargs='*', default=config['file_extensions'],
                        help='Only index files with these extensions (default: all files)')
    parser.add_argument('--markup_parser', default=config['markup_parser'],
                        help=f"BeautifulSoup parser (default: {config['markup_parser']})")

    # Logging Options
    parser.add_argument('--log_dir', default=config['log_dir'],
                        help=f"Directory for log files (default: {config['log_dir']})")
    parser.add_argument('--log_level', default=config['log_level'],
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help=f"Logging level (default: {config['log_level']})")

    return parser.parse_args(argv)


def inspect_document(filepath, markup_parser, top_n):
    """
    Show the most frequent terms of a single document.

    Returns:
        int: Process exit status
    """
    try:
        text = extract_text(filepath, parser=markup_parser)
    except ExtractionError as e:
        logger.error(str(e))
        return 1

    term_freqs = build_term_freqs(text)
    display_top_terms(term_freqs, n=top_n,
                      title=f"{filepath}: {sum(term_freqs.values())} tokens, {len(term_freqs)} unique terms")
    return 0


def load_existing_index(index_file, profiler):
    with profiler.timer("Index Loading"):
        try:
            index = StandardIndex.load(index_file)
        except (OSError, ValueError) as e:
            logger.error(f"Could not load index from {index_file}: {e}")
            return None
    print(f"{index_file} contains {index.doc_count} files")
    return index


def build_new_index(args, profiler):
    index = IndexFactory.create_index(
        documents_dir=args.documents_dir,
        extractor=partial(extract_text, parser=args.markup_parser),
        profiler=profiler,
        mode=args.index_mode,
        parallel_threshold=args.parallel_index_threshold,
        on_error=args.on_error,
        file_extensions=args.file_extensions
    )
    try:
        index.build_index()
    except (OSError, ValueError) as e:
        logger.error(f"Indexing aborted: {e}")
        return None

    for failure in index.failures:
        print(f"Failed: {failure.path} ({failure.error})")

    with profiler.timer("Index Saving"):
        try:
            index.save(args.index_file)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Could not save index to {args.index_file}: {e}")
            return None
    print(f"Saved {index.doc_count} documents to {args.index_file}")
    return index


def main(argv=None):
    """
    Main function to build or load the index and report on it.

    Returns:
        int: Process exit status
    """
    args = parse_arguments(argv)
    setup_logging(args.log_dir, args.log_level)

    display_banner()

    if args.inspect:
        return inspect_document(args.inspect, args.markup_parser, args.top_n)

    profiler = Profiler()
    profiler.start_global_timer()

    if args.use_existing:
        if not os.path.exists(args.index_file):
            logger.error(f"Index file {args.index_file} does not exist")
            return 1
        index = load_existing_index(args.index_file, profiler)
    else:
        index = build_new_index(args, profiler)

    if index is None:
        return 1

    if args.list_documents:
        display_document_summary(index)

    display_vocabulary_statistics(index, n=args.top_n)

    if args.stats:
        display_detailed_statistics(index)

    print("\n" + profiler.generate_report(
        doc_count=index.doc_count,
        vocab_size=index.vocab_size,
        filename=args.report
    ))
    return 0


if __name__ == "__main__":
    sys.exit(main())
