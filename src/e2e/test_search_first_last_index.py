import math
import random
import pytest
from prefixcomplete.errors import NullArgumentError
from prefixcomplete.models import LexicalOrder, PrefixOrder, Term
from prefixcomplete.search import first_index_of, last_index_of, prefix_range


class CountingOrder:
    """Wraps an ordering and counts compare() calls."""
    def __init__(self, inner):
        self.inner = inner
        self.calls = 0

    def compare(self, a, b):
        self.calls += 1
        return self.inner.compare(a, b)


def _store(words):
    return tuple(sorted((Term(w, 1) for w in words), key=lambda t: t.word))

def _random_words(rng: random.Random, n: int, alphabet: str = "abc", max_len: int = 4) -> list[str]:
    return ["".join(rng.choice(alphabet) for _ in range(rng.randint(0, max_len))) for _ in range(n)]


@pytest.mark.e2e
def test_none_array_raises_null_argument():
    key = Term("a", 0)
    with pytest.raises(NullArgumentError):
        first_index_of(None, key, LexicalOrder())
    with pytest.raises(NullArgumentError):
        last_index_of(None, key, LexicalOrder())

@pytest.mark.e2e
def test_empty_array_returns_minus_one_without_comparing():
    order = CountingOrder(LexicalOrder())
    assert first_index_of((), Term("a", 0), order) == -1
    assert last_index_of((), Term("a", 0), order) == -1
    assert order.calls == 0

@pytest.mark.e2e
@pytest.mark.parametrize("word,expected", [("bat", 0), ("cat", -1), ("ant", -1)])
def test_single_element(word, expected):
    store = _store(["bat"])
    key = Term(word, 0)
    assert first_index_of(store, key, LexicalOrder()) == expected
    assert last_index_of(store, key, LexicalOrder()) == expected

@pytest.mark.e2e
def test_runs_of_equal_keys():
    store = _store(["a", "b", "b", "b", "c", "d"])
    key = Term("b", 0)
    assert first_index_of(store, key, LexicalOrder()) == 1
    assert last_index_of(store, key, LexicalOrder()) == 3

@pytest.mark.e2e
def test_whole_array_equivalent():
    store = _store(["ba", "bb", "bc", "bd", "be"])
    key = Term("b", 0)
    assert first_index_of(store, key, PrefixOrder(1)) == 0
    assert last_index_of(store, key, PrefixOrder(1)) == 4

@pytest.mark.e2e
def test_plain_cmp_function_is_accepted():
    store = _store(["air", "bat", "bell", "boy"])
    cmp = PrefixOrder(1).compare
    assert first_index_of(store, Term("b", 0), cmp) == 1
    assert last_index_of(store, Term("b", 0), cmp) == 3

@pytest.mark.e2e
@pytest.mark.parametrize("seed", range(20))
def test_prefix_range_matches_linear_scan(seed):
    rng = random.Random(seed)
    store = _store(_random_words(rng, rng.randint(0, 60)))
    for prefix in ["", "a", "b", "c", "ab", "ba", "cc", "abc", "aaaa", "abcab"]:
        order = PrefixOrder(len(prefix))
        key = Term(prefix, 0)
        f = first_index_of(store, key, order)
        l = last_index_of(store, key, order)
        expected = [i for i, t in enumerate(store) if t.word.startswith(prefix)]
        if not expected:
            assert (f, l) == (-1, -1)
            assert prefix_range(store, prefix) is None
        else:
            assert (f, l) == (expected[0], expected[-1])
            assert expected == list(range(f, l + 1))  # contiguous
            assert prefix_range(store, prefix) == (f, l)

@pytest.mark.e2e
@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 7, 8, 9, 16, 17, 31, 64, 100, 1000])
def test_comparator_call_bound(n):
    rng = random.Random(n)
    store = _store(_random_words(rng, n, alphabet="abcd", max_len=5))
    bound = 1 + math.ceil(math.log2(n))
    for prefix in ["", "a", "b", "d", "ab", "dd", "zz", "abcd"]:
        for search in (first_index_of, last_index_of):
            order = CountingOrder(PrefixOrder(len(prefix)))
            search(store, Term(prefix, 0), order)
            assert order.calls <= bound, (search.__name__, prefix, order.calls, bound)
