# docindex/text_processor/__init__.py
from .lexer import Lexer
from .normalizer import normalize
from .extractor import ExtractionError, extract_text
from .term_frequency import DocumentResult, build_term_freqs, process_document
