"""Read-only JSON API over a prebuilt BinarySearchAutocomplete (Flask)."""
from __future__ import annotations
from .web import app, attach_index

__all__ = ["app", "attach_index"]
