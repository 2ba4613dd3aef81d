from __future__ import annotations
import logging
from flask import Flask, request, jsonify
from prefixcomplete import config as CFG
from prefixcomplete.engine import BinarySearchAutocomplete
from prefixcomplete.errors import InvalidArgumentError

log = logging.getLogger(__name__)

app = Flask(__name__)
_index: BinarySearchAutocomplete | None = None


class _NotReady(Exception):
    """No index has been attached to the app yet."""


def attach_index(index: BinarySearchAutocomplete | None) -> None:
    """Publish a fully built index to the request handlers (None detaches)."""
    global _index
    _index = index
    if index is not None:
        log.info("Attached index: terms=%d", len(index))

def _require_index() -> BinarySearchAutocomplete:
    if _index is None:
        raise _NotReady()
    return _index

# ---------- errors ----------
@app.errorhandler(InvalidArgumentError)
def _bad_request(exc: InvalidArgumentError):
    return jsonify({"error": str(exc)}), 400

@app.errorhandler(_NotReady)
def _not_ready(_exc: _NotReady):
    return jsonify({"error": "index not attached"}), 503

# ---------- API ----------
@app.get("/health")
def health():
    if _index is None:
        return jsonify({"ok": False, "terms": 0}), 503
    return jsonify({"ok": True, "terms": len(_index)})

@app.get("/api/top-matches")
def api_top_matches():
    index = _require_index()
    q = request.args.get("q", "", type=str)
    raw_k = request.args.get("k")
    if raw_k is None:
        k = CFG.TOP_K
    else:
        try:
            k = int(raw_k)
        except ValueError:
            raise InvalidArgumentError(f"k must be an integer, got {raw_k!r}")
    return jsonify(index.top_matches(q, k))

@app.get("/api/top-match")
def api_top_match():
    index = _require_index()
    q = request.args.get("q", "", type=str)
    return jsonify({"word": index.top_match(q)})

@app.get("/api/weight")
def api_weight():
    index = _require_index()
    w = request.args.get("w", type=str)
    if w is None:
        raise InvalidArgumentError("missing query parameter 'w'")
    return jsonify({"word": w, "weight": index.weight_of(w)})
