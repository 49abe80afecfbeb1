# docindex/text_processor/extractor.py
"""
Markup Text Extraction

Reads an XHTML/HTML/XML document and returns its character data as one string,
each fragment followed by a single space. Parsing is delegated to BeautifulSoup.
"""
import logging
import warnings

from bs4 import (BeautifulSoup, MarkupResemblesLocatorWarning, ParserRejectedMarkup,
                 XMLParsedAsHTMLWarning)
from bs4.element import PreformattedString

logger = logging.getLogger('docindex.extractor')


class ExtractionError(Exception):
    """
    Raised when a document cannot be read or parsed.

    Attributes:
        path (str): The document that failed
        reason (str): Description of the underlying cause
    """
    def __init__(self, path, reason):
        super().__init__(path, reason)
        self.path = path
        self.reason = reason

    def __str__(self):
        return f"could not extract text from {self.path}: {self.reason}"


def soup_from_markup(markup, parser='html.parser'):
    """
    Create a BeautifulSoup object, suppressing the XML-as-HTML and locator warnings
    that .xhtml documents trigger under the HTML parsers.
    """
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
        warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)
        return BeautifulSoup(markup, parser)


def iter_text_fragments(soup):
    """
    Yield the character-data fragments of a parsed document in document order.

    Comments, CDATA sections, doctypes, declarations and processing instructions
    are skipped, as are fragments made only of whitespace.
    """
    for fragment in soup.find_all(string=True):
        if isinstance(fragment, PreformattedString):
            continue
        if not fragment or fragment.isspace():
            continue
        yield str(fragment)


def extract_text(filepath: str, parser: str = 'html.parser') -> str:
    """
    Extract the plain text of a markup document.

    Args:
        filepath (str): Path to the document
        parser (str): BeautifulSoup tree builder to use ('html.parser', 'lxml', 'xml', ...)

    Returns:
        str: Every text fragment followed by one space ("" for a document without text)

    Raises:
        ExtractionError: If the file cannot be read as UTF-8 or the parser rejects it
    """
    logger.debug(f"Extracting text from {filepath}")
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            markup = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ExtractionError(filepath, f"{type(e).__name__}: {e}") from e

    try:
        soup = soup_from_markup(markup, parser)
    except ParserRejectedMarkup as e:
        raise ExtractionError(filepath, f"{type(e).__name__}: {e}") from e

    return ''.join(f"{fragment} " for fragment in iter_text_fragments(soup))
