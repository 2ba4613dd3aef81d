# prefixcomplete/errors.py
"""Exceptions raised at the boundary of every public operation."""
from __future__ import annotations


class AutocompleteError(Exception):
    """Base class for all errors raised by the index."""


class InvalidArgumentError(AutocompleteError, ValueError):
    """Structurally wrong input: negative k, mismatched lengths, bad weight..."""


class NullArgumentError(InvalidArgumentError, TypeError):
    """A required argument was None."""


def require(value, name: str):
    """Return value unchanged, or raise NullArgumentError if it is None."""
    if value is None:
        raise NullArgumentError(f"{name} must not be None")
    return value
