# src/prefixcomplete/models.py
"""
Data model for the prefix index.

This module defines the Term record and the orderings the search and ranking
code is parameterised by:

- Term: one (word, weight) pair. Natural order is lexicographic by word.
- LexicalOrder: full-word, character-code order (case-sensitive).
- PrefixOrder(r): compares only the first r characters of each word.
- ReverseWeightOrder / WeightOrder: weight descending / ascending.

Orderings are small strategy objects exposing ``compare(a, b) -> int`` and are
callable, so they plug into ``functools.cmp_to_key`` as well as into
``search.first_index_of`` / ``search.last_index_of``.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from numbers import Real
from typing import Protocol

from .errors import InvalidArgumentError, NullArgumentError
from .normalize import truncate


@dataclass(frozen=True, slots=True) # frozen: the store is never mutated after construction
class Term:
    """
    A word and its non-negative weight.

    Attributes
    ----------
    word : str
        The completion text. Compared case-sensitively for ordering.
    weight : float
        Ranking weight, >= 0. Stored as float whatever numeric type was given.
    """
    word: str
    weight: float

    def __post_init__(self) -> None:
        if self.word is None:
            raise NullArgumentError("Term word must not be None")
        if not isinstance(self.word, str):
            raise InvalidArgumentError(f"Term word must be a str, got {type(self.word).__name__}")
        if isinstance(self.weight, bool) or not isinstance(self.weight, Real):
            raise InvalidArgumentError(f"weight for {self.word!r} must be a real number")
        weight = float(self.weight)
        if math.isnan(weight) or weight < 0:
            raise InvalidArgumentError(f"weight for {self.word!r} must be non-negative, got {self.weight!r}")
        object.__setattr__(self, "weight", weight)

    def __lt__(self, other: "Term") -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self.word < other.word


class TermComparator(Protocol):
    def compare(self, a: Term, b: Term) -> int: ...


def _sign(a, b) -> int:
    return (a > b) - (a < b)


class LexicalOrder:
    """Order by the full word, character by character."""

    def compare(self, a: Term, b: Term) -> int:
        return _sign(a.word, b.word)

    __call__ = compare

    def __repr__(self) -> str:
        return "LexicalOrder()"


class PrefixOrder:
    """
    Order by the first ``r`` characters of each word.

    Two terms are equivalent iff both words are at least ``r`` long and share
    their first ``r`` characters. A word shorter than ``r`` is never equivalent
    to such a word; it sorts before every word it is a proper prefix of, which
    keeps this order consistent with LexicalOrder over a sorted store.
    """
    __slots__ = ("r",)

    def __init__(self, r: int) -> None:
        if isinstance(r, bool) or not isinstance(r, int):
            raise InvalidArgumentError(f"prefix length must be an int, got {r!r}")
        if r < 0:
            raise InvalidArgumentError(f"prefix length must be >= 0, got {r}")
        self.r = r

    def compare(self, a: Term, b: Term) -> int:
        c = _sign(truncate(a.word, self.r), truncate(b.word, self.r))
        if c:
            return c
        # same truncation: a short word is a proper prefix of a full-length one
        return (len(a.word) >= self.r) - (len(b.word) >= self.r)

    __call__ = compare

    def __repr__(self) -> str:
        return f"PrefixOrder({self.r})"


class ReverseWeightOrder:
    """Heaviest first. Equal weights compare equal; pair with a stable sort for determinism."""

    def compare(self, a: Term, b: Term) -> int:
        return _sign(b.weight, a.weight)

    __call__ = compare

    def __repr__(self) -> str:
        return "ReverseWeightOrder()"


class WeightOrder:
    """Lightest first."""

    def compare(self, a: Term, b: Term) -> int:
        return _sign(a.weight, b.weight)

    __call__ = compare

    def __repr__(self) -> str:
        return "WeightOrder()"
