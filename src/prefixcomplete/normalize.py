from __future__ import annotations


def _chars_equal_ignore_case(a: str, b: str) -> bool:
    """Single-character comparison: equal as-is, after upper-casing, or after lower-casing."""
    if a == b:
        return True
    up_a, up_b = a.upper(), b.upper()
    if up_a == up_b:
        return True
    # some scripts only agree once folded back down (e.g. Georgian)
    return up_a.lower() == up_b.lower()

def words_equal_ignore_case(a: str, b: str) -> bool:
    """
    Exact-word equality ignoring case.
    Rules:
      * lengths must match (no expansion like 'ß' -> 'SS' is considered)
      * each character pair compares equal under _chars_equal_ignore_case
    """
    if a is b:
        return True
    if len(a) != len(b):
        return False
    return all(_chars_equal_ignore_case(x, y) for x, y in zip(a, b))

def truncate(word: str, r: int) -> str:
    """Return the first r characters of word (the whole word if it is shorter)."""
    return word[:r]
