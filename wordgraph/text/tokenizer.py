# Word Tokenizer
"""
Tokenizer interfaces for word graph construction.

Text is normalized to lowercase ASCII words: every character that is not an
ASCII letter or a space is dropped, then the remainder is split on whitespace.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

# ASCII letters and the literal space survive normalization
_NON_WORD_PATTERN = re.compile(r"[^a-zA-Z ]")


class Tokenizer(ABC):
    """Tokenizer Abstract Base Class."""

    @abstractmethod
    def tokenize(self, text: str) -> list[str]:
        """Split a piece of text into normalized words.

        Args
        ----
            text (str): The input text.

        Returns
        -------
            list[str]: The words in order of appearance.
        """
        msg = "The tokenize method must be implemented by subclasses."
        raise NotImplementedError(msg)

    def tokenize_lines(self, lines: Iterable[str]) -> Iterator[str]:
        """Tokenize lines as one continuous word stream.

        The last word of a line is followed directly by the first word of the
        next line; line breaks carry no meaning of their own.

        Args
        ----
            lines (Iterable[str]): Lines of text, e.g. an open file.

        Yields
        ------
            str: The words of every line, in order.
        """
        for line in lines:
            yield from self.tokenize(line)


class WordTokenizer(Tokenizer):
    """Letters-only, lowercase word tokenizer."""

    def tokenize(self, text: str) -> list[str]:
        """Normalize the text and split it into words.

        Tabs and other non-space whitespace are removed along with
        punctuation and digits, so ``"new\\tworlds"`` yields ``["newworlds"]``.
        """
        cleaned = _NON_WORD_PATTERN.sub("", text).lower()
        return cleaned.split()


def normalize_word(word: str) -> str:
    """Normalize a single user-supplied word the same way corpus text is.

    Returns an empty string when nothing alphabetic remains.
    """
    return _NON_WORD_PATTERN.sub("", word).replace(" ", "").lower()


def get_tokenizer() -> Tokenizer:
    """Get the default tokenizer instance."""
    return WordTokenizer()
