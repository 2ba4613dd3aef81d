from __future__ import annotations
import logging
from typing import Callable, Optional, Sequence, Tuple, Union

from .errors import require
from .models import PrefixOrder, Term, TermComparator

log = logging.getLogger(__name__)

Comparator = Union[TermComparator, Callable[[Term, Term], int]]

# Locate the contiguous run of terms a comparator considers equal to a key.
# Both primitives keep a bracket (low, high) and narrow it one probe at a time:
# at most ceil(log2(n)) probes plus one final equivalence test.


def _compare_fn(comparator: Comparator) -> Callable[[Term, Term], int]:
    """Accept either an ordering object (with .compare) or a plain cmp function."""
    fn = getattr(comparator, "compare", None)
    return fn if callable(fn) else comparator  # type: ignore[return-value]

def first_index_of(a: Sequence[Term], key: Term, comparator: Comparator) -> int:
    """
    Return the smallest index i with comparator(a[i], key) == 0, or -1.

    ``a`` must be sorted consistently with ``comparator``. ``low`` is an open
    bound (everything at or below it orders before key); ``high`` is the
    current candidate.
    """
    require(a, "a")
    n = len(a)
    if n == 0:
        return -1
    cmp = _compare_fn(comparator)

    low, high = -1, n - 1
    while high - low > 1:
        mid = (low + high) // 2
        if cmp(a[mid], key) >= 0:
            high = mid
        else:
            low = mid
    return high if cmp(a[high], key) == 0 else -1

def last_index_of(a: Sequence[Term], key: Term, comparator: Comparator) -> int:
    """
    Return the largest index i with comparator(a[i], key) == 0, or -1.

    Mirror image of first_index_of: ``low`` is the candidate, ``high`` an
    open bound (everything at or above it orders after key).
    """
    require(a, "a")
    n = len(a)
    if n == 0:
        return -1
    cmp = _compare_fn(comparator)

    low, high = 0, n
    while high - low > 1:
        mid = (low + high) // 2
        if cmp(a[mid], key) <= 0:
            low = mid
        else:
            high = mid
    return low if cmp(a[low], key) == 0 else -1

def prefix_range(terms: Sequence[Term], prefix: str) -> Optional[Tuple[int, int]]:
    """
    /* ~~~ Inclusive (first, last) index range of terms whose word starts with
       prefix, or None when nothing matches. The empty prefix matches all. ~~~ */
    """
    require(prefix, "prefix")
    probe = Term(prefix, 0)
    order = PrefixOrder(len(prefix))
    first = first_index_of(terms, probe, order)
    if first == -1:
        log.debug("prefix %r: no matches", prefix)
        return None
    last = last_index_of(terms, probe, order)
    if last == -1:  # pragma: no cover - first found implies last found on a sorted store
        return None
    log.debug("prefix %r: range [%d, %d]", prefix, first, last)
    return first, last
