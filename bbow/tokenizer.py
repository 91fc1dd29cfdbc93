"""
Tokenizer for the Big Bag Of Words.

Words are separated by whitespace and consist of one or more consecutive
letters (any Unicode code point in the "letter" class) with no internal
punctuation: leading and trailing punctuation are removed.

    "It ain't over untïl it ain't, over."
    -> "it", "over", "untïl", "it", "over"
"""

from __future__ import annotations
import regex
from enum import Enum
from typing import Iterator, Tuple

# --- Regexes ---
# Unicode White_Space / Alphabetic properties
_CANDIDATE_RE = regex.compile(r"\P{White_Space}+")
_EDGE_RE = regex.compile(r"^\P{Alphabetic}+|\P{Alphabetic}+$")
_WORD_RE = regex.compile(r"\p{Alphabetic}+")


class Ownership(Enum):
    """Where a bag key came from."""
    BORROWED = "borrowed"  # verbatim span of the caller's text
    OWNED = "owned"        # new string built by lowercasing


def candidates(text: str) -> Iterator[str]:
    """Lazily yield maximal runs of non-whitespace characters."""
    if not text:
        return
    for m in _CANDIDATE_RE.finditer(text):
        yield m.group(0)


def trim(token: str) -> str:
    """Strip leading/trailing characters that are not alphabetic."""
    return _EDGE_RE.sub("", token)


def is_word(word: str) -> bool:
    return _WORD_RE.fullmatch(word) is not None


def has_uppercase(word: str) -> bool:
    return any(c.isupper() for c in word)


def normalize(word: str) -> Tuple[str, Ownership]:
    """Lowercase `word` if needed and report whether a new string was built."""
    if has_uppercase(word):
        return word.lower(), Ownership.OWNED
    return word, Ownership.BORROWED


def words_with_ownership(text: str) -> Iterator[Tuple[str, Ownership]]:
    for tok in candidates(text):
        trimmed = trim(tok)
        if is_word(trimmed):
            yield normalize(trimmed)


def tokenize(text: str) -> Iterator[str]:
    """Accepted, normalized words of `text` in order of appearance."""
    for word, _ in words_with_ownership(text):
        yield word
