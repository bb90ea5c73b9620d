# Text Module
"""
Text normalization for word graph construction.
"""

from wordgraph.text.tokenizer import (
    Tokenizer,
    WordTokenizer,
    get_tokenizer,
    normalize_word,
)

__all__ = [
    "Tokenizer",
    "WordTokenizer",
    "get_tokenizer",
    "normalize_word",
]
