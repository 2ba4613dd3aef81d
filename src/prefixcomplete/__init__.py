"""
Binary-Search Prefix Autocomplete

This package answers "which words start with this prefix, and which of them
weigh the most?" over a fixed collection of (word, weight) pairs. Instead of a
trie it keeps one lexicographically sorted tuple of terms and locates the
matching run with two binary searches.

The package is split the same way the work is:
- Term and its orderings (models)
- Binary-search range primitives (search)
- Top-k selection by weight (rank)
- The index object tying them together (engine)

Main API:
    BinarySearchAutocomplete(words, weights)
        .top_matches(prefix, k)   -> list of words, heaviest first
        .top_match(prefix)        -> heaviest word, or ""
        .weight_of(word)          -> weight, or 0.0

Example Usage:
    from prefixcomplete import BinarySearchAutocomplete

    index = BinarySearchAutocomplete(["air", "bat", "bell", "boy"], [3, 2, 4, 1])
    index.top_matches("b", 2)     # ['bell', 'bat']
    index.top_match("b")          # 'bell'
    index.weight_of("boy")        # 1.0
"""

# src/prefixcomplete/__init__.py
from .engine import Autocompletor, BinarySearchAutocomplete
from .errors import AutocompleteError, InvalidArgumentError, NullArgumentError
from .models import LexicalOrder, PrefixOrder, ReverseWeightOrder, Term, WeightOrder
from .search import first_index_of, last_index_of, prefix_range

__version__ = "1.0.0"
__all__ = [
    "Autocompletor",
    "BinarySearchAutocomplete",
    "AutocompleteError",
    "InvalidArgumentError",
    "NullArgumentError",
    "Term",
    "LexicalOrder",
    "PrefixOrder",
    "ReverseWeightOrder",
    "WeightOrder",
    "first_index_of",
    "last_index_of",
    "prefix_range",
]
