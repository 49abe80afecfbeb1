# docindex/text_processor/lexer.py
"""
Character-Classification Lexer

This module splits a buffer of characters into raw tokens. Each call to
``next()`` skips leading whitespace and then consumes one of:

    - a maximal run of numeric characters ("2025", but "3.14" is 3, ".", 14)
    - a maximal run of alphanumeric characters starting with a letter ("gl4")
    - any other single character (punctuation, symbols)

Character classes are the Unicode White_Space, Numeric (general category N) and
Alphabetic properties, so combining vowel signs stay inside words ("हिन्दी") and
CJK ideographs such as "一" are letters, not numbers.

Tokens are slices of the original buffer; the lexer only moves a cursor over it.
"""
from typing import Iterator

import regex

WHITESPACE_RUN = regex.compile(r'\p{White_Space}+')
NUMERIC_RUN = regex.compile(r'\p{N}+')
ALPHABETIC = regex.compile(r'\p{Alphabetic}')
ALPHANUMERIC_RUN = regex.compile(r'[\p{Alphabetic}\p{N}]+')


class Lexer:
    """
    Single-use token producer over one text buffer.

    The lexer is its own iterator and cannot be restarted: once exhausted it
    stays exhausted. To scan the same text again, create a new Lexer.

    Attributes:
        content (str): The buffer being tokenized (never modified)
        position (int): Number of characters consumed so far
    """
    def __init__(self, content: str):
        self.content = content
        self.position = 0

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def _trim_left(self):
        match = WHITESPACE_RUN.match(self.content, self.position)
        if match:
            self.position = match.end()

    def _chop(self, n: int) -> str:
        start = self.position
        self.position += n
        return self.content[start:self.position]

    def _chop_run(self, pattern) -> str:
        match = pattern.match(self.content, self.position)
        return self._chop(match.end() - self.position)

    def next_token(self):
        """
        Return the next token, or None once the buffer is exhausted.
        """
        self._trim_left()
        if self.position >= len(self.content):
            return None

        numeric = NUMERIC_RUN.match(self.content, self.position)
        if numeric:
            return self._chop(numeric.end() - self.position)
        if ALPHABETIC.match(self.content, self.position):
            return self._chop_run(ALPHANUMERIC_RUN)
        return self._chop(1)
