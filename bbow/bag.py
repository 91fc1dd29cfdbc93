"""
Big Bag Of Words

The "Big Bag Of Words" is used in text analysis and machine learning. It
reduces a text to a collection of words, each with a count of the number of
occurrences. Words containing uppercase letters are stored as their lowercase
equivalent.

Quick start:
    bag = Bag().extend_from_text("Hello world.")
    len(bag)                   # 2
    bag.match_count("hello")   # 1
    bag.match_count("Hello")   # 0, queries are not normalized
"""

from __future__ import annotations
import logging
from collections import Counter
from typing import Dict, Iterator, List, Optional, Tuple

from .tokenizer import Ownership, words_with_ownership

log = logging.getLogger(__name__)


class Bag:
    """
    Each key in this bag is a word in some in-memory text document; the value
    is its count of occurrences. Keys iterate in lexicographic order.

    Every key also remembers whether it was taken verbatim from the text it
    first appeared in (`Ownership.BORROWED`) or built by lowercasing
    (`Ownership.OWNED`). See `info()`.
    """

    def __init__(self) -> None:
        self._counts: Counter = Counter()
        self._origin: Dict[str, Ownership] = {}

    # ---- builder ----
    def extend_from_text(self, text: str) -> "Bag":
        """
        Parse `text` and add the sequence of valid words contained in it.

        This is a builder method: calls can be chained to build up a bag
        covering multiple texts.

            bag = Bag().extend_from_text("b b b-banana b")
            bag.match_count("b")   # 3
        """
        if not isinstance(text, str):
            log.debug("Ignoring non-text input of type %s", type(text).__name__)
            return self

        seen = new = 0
        for word, origin in words_with_ownership(text):
            seen += 1
            if word not in self._counts:
                self._origin[word] = origin
                new += 1
            self._counts[word] += 1

        log.debug("Added %d words (%d new) from %d chars", seen, new, len(text))
        return self

    # ---- queries ----
    def match_count(self, keyword: str) -> int:
        """
        Number of occurrences of `keyword`. The keyword should be lowercase
        and free of punctuation, as per the rules of the bag: otherwise it
        will not match and 0 is returned.
        """
        return self._counts[keyword]

    def words(self) -> Iterator[str]:
        return iter(sorted(self._counts))

    def items(self) -> Iterator[Tuple[str, int]]:
        for word in sorted(self._counts):
            yield word, self._counts[word]

    def count(self) -> int:
        """Overall number of words: multiple occurrences count separately."""
        return sum(self._counts.values())

    def is_empty(self) -> bool:
        return not self._counts

    def most_common(self, n: Optional[int] = None) -> List[Tuple[str, int]]:
        """Highest counts first; ties in lexicographic order."""
        ranked = sorted(self._counts.items(), key=lambda x: (-x[1], x[0]))
        return ranked if n is None else ranked[:n]

    def copy(self) -> "Bag":
        other = Bag()
        other._counts = Counter(self._counts)
        other._origin = dict(self._origin)
        return other

    # ---- diagnostics ----
    def ownership(self, word: str) -> Optional[Ownership]:
        return self._origin.get(word)

    def info(self) -> Iterator[Tuple[str, Ownership]]:
        for word in sorted(self._origin):
            yield word, self._origin[word]

    def print_info(self) -> None:
        for word, origin in self.info():
            print(f"This value is {origin.value} <{word}>")

    # ---- dunder ----
    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[str]:
        return self.words()

    def __contains__(self, word: object) -> bool:
        return word in self._counts

    def __repr__(self) -> str:
        body = ", ".join(f"{w!r}: {c}" for w, c in self.items())
        return f"Bag({{{body}}})"
