# prefixcomplete/engine.py
from __future__ import annotations

import logging
from operator import attrgetter
from typing import Iterable, List, Optional, Protocol, Tuple, runtime_checkable

from . import config as CFG
from .errors import InvalidArgumentError, require
from .models import Term
from .normalize import words_equal_ignore_case
from .rank import resolve_strategy, select_top_k
from .search import prefix_range

log = logging.getLogger(__name__)


@runtime_checkable
class Autocompletor(Protocol):
    def top_matches(self, prefix: str, k: Optional[int] = ...) -> List[str]: ...
    def top_match(self, prefix: str) -> str: ...
    def weight_of(self, word: str) -> float: ...


class BinarySearchAutocomplete:
    """
    Static prefix-completion index over a lexicographically sorted tuple of Terms.

    Public API:
      * top_matches(prefix, k): up to k words starting with prefix, heaviest first
      * top_match(prefix):      the single heaviest word starting with prefix, or ""
      * weight_of(word):        weight of an exact word (case-insensitive), or 0.0

    Every query re-derives its match range with two binary searches
    (O(log n) comparisons) and then works inside that range only. The store is
    built once in __init__ and never mutated, so an instance can be shared
    between threads once construction has returned.
    """

    # ------------- lifecycle -------------

    # /* ~~~ Pair words with weights, validate, sort once, freeze ~~~ */
    def __init__(self, words: Iterable[str], weights: Iterable[float], *, verbose: bool = False) -> None:
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)

        words = list(require(words, "words"))
        weights = list(require(weights, "weights"))
        if len(words) != len(weights):
            raise InvalidArgumentError(
                f"words and weights differ in length: {len(words)} != {len(weights)}"
            )

        terms = [Term(w, wt) for w, wt in zip(words, weights)]
        terms.sort(key=attrgetter("word"))
        self._terms: Tuple[Term, ...] = tuple(terms)
        log.info("Index built: terms=%d", len(self._terms))

    @property
    def terms(self) -> Tuple[Term, ...]:
        """The sorted store (read-only)."""
        return self._terms

    def __len__(self) -> int:
        return len(self._terms)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(terms={len(self._terms)})"

    # ------------- queries -------------

    def top_matches(self, prefix: str, k: Optional[int] = None, *, strategy: Optional[str] = None) -> List[str]:
        """
        Return up to k words starting with prefix, in descending weight order.

        Fewer than k matches -> all of them; none -> []. Equal weights keep
        lexicographic order. ``k`` defaults to config.TOP_K; ``strategy``
        overrides config.TOPK_STRATEGY ("auto", "sort" or "heap").
        """
        require(prefix, "prefix")
        if k is None:
            k = CFG.TOP_K
        if isinstance(k, bool) or not isinstance(k, int):
            raise InvalidArgumentError(f"k must be an int, got {k!r}")
        if k < 0:
            raise InvalidArgumentError(f"k must be >= 0, got {k}")
        strategy = resolve_strategy(strategy)

        rng = prefix_range(self._terms, prefix)
        if rng is None:
            return []
        first, last = rng
        return [t.word for t in select_top_k(self._terms, first, last, k, strategy)]

    def top_match(self, prefix: str) -> str:
        """Heaviest word starting with prefix; the lexicographically first wins a tie. "" if none."""
        require(prefix, "prefix")
        rng = prefix_range(self._terms, prefix)
        if rng is None:
            return ""
        first, last = rng
        best = self._terms[first]
        for i in range(first + 1, last + 1):
            if self._terms[i].weight > best.weight:
                best = self._terms[i]
        return best.word

    def weight_of(self, word: str) -> float:
        """
        Weight of ``word``, or 0.0 if absent.

        The candidate range is located case-sensitively (word used as a
        full-length prefix); only the final equality check ignores case.
        """
        require(word, "word")
        rng = prefix_range(self._terms, word)
        if rng is None:
            return 0.0
        first, last = rng
        for i in range(first, last + 1):
            if words_equal_ignore_case(self._terms[i].word, word):
                return self._terms[i].weight
        return 0.0
