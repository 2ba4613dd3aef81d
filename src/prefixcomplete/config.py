from __future__ import annotations
import os

# default number of completions returned by top_matches()
TOP_K: int = 5

# /* ~~~ top-k selection strategy: "auto", "sort" or "heap" ~~~ */
TOPK_STRATEGY: str = "auto"

# /* ~~~ "auto" switches to the bounded heap once matches >= ratio * k ~~~ */
HEAP_MIN_RATIO: int = 4

# Progress logging (set AUTOCOMPLETE_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("AUTOCOMPLETE_VERBOSE") == "1"
