"""
bindings.py — Builds evaluator bindings from raw request data.

Raw values are restricted to the strings "0" and "1"; keys are lowercased so
they match the canonical variable names produced by the tokenizer.
"""
from __future__ import annotations

from typing import Iterable

from contracts import InvalidVariableValueError

_RAW_VALUES = {"1": True, "0": False}


def parse_binding_value(name: str, raw: str) -> bool:
    try:
        return _RAW_VALUES[raw]
    except KeyError:
        raise InvalidVariableValueError(name, raw) from None


def bindings_from_pairs(pairs: Iterable[tuple[str, str]]) -> dict[str, bool]:
    """First value wins when a (case-folded) key repeats; empty keys are ignored."""
    bindings: dict[str, bool] = {}
    for key, raw in pairs:
        if not key:
            continue
        name = key.lower()
        if name in bindings:
            continue
        bindings[name] = parse_binding_value(key, raw)
    return bindings
