from __future__ import annotations
import heapq
from functools import cmp_to_key
from typing import List, Sequence, Tuple

from . import config as CFG
from .errors import InvalidArgumentError
from .models import ReverseWeightOrder, Term

STRATEGIES = ("auto", "sort", "heap")

_BY_WEIGHT_DESC = cmp_to_key(ReverseWeightOrder())

# Both selectors take the inclusive store range [first, last] produced by
# search.prefix_range() and return up to k terms, heaviest first. Equal
# weights keep store (lexicographic) order, so both always agree.


def top_k_sorted(terms: Sequence[Term], first: int, last: int, k: int) -> List[Term]:
    """O(m log m): stable sort of the whole range, then slice."""
    if k <= 0:
        return []
    matches = sorted(terms[first:last + 1], key=_BY_WEIGHT_DESC)
    return matches[:k]

def top_k_heap(terms: Sequence[Term], first: int, last: int, k: int) -> List[Term]:
    """
    O(m log k): one pass over the range with a bounded min-heap of size k.

    Heap entries are (weight, -position, term). The root is the weakest kept
    term: lowest weight, and among equal weights the latest in store order,
    which is the one that loses a tie.
    """
    if k <= 0:
        return []
    heap: List[Tuple[float, int, Term]] = []
    for pos in range(first, last + 1):
        t = terms[pos]
        entry = (t.weight, -pos, t)
        if len(heap) < k:
            heapq.heappush(heap, entry)
        elif entry[:2] > heap[0][:2]:
            heapq.heapreplace(heap, entry)
    heap.sort(key=lambda e: (-e[0], -e[1]))
    return [t for _, _, t in heap]

def choose_strategy(m: int, k: int) -> str:
    """Pick "heap" when the match count dwarfs k, else "sort"."""
    if k > 0 and m >= CFG.HEAP_MIN_RATIO * k:
        return "heap"
    return "sort"

def resolve_strategy(strategy: str | None) -> str:
    """None means config.TOPK_STRATEGY; anything outside STRATEGIES is rejected."""
    if strategy is None:
        strategy = CFG.TOPK_STRATEGY
    if strategy not in STRATEGIES:
        raise InvalidArgumentError(f"unknown top-k strategy: {strategy!r}")
    return strategy

def select_top_k(terms: Sequence[Term], first: int, last: int, k: int,
                 strategy: str | None = None) -> List[Term]:
    strategy = resolve_strategy(strategy)
    if strategy == "auto":
        strategy = choose_strategy(last - first + 1, k)
    if strategy == "heap":
        return top_k_heap(terms, first, last, k)
    return top_k_sorted(terms, first, last, k)
