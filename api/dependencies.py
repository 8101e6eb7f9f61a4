"""
dependencies.py — FastAPI Dependency Injection.
Every dependency reads its object from Request.app.state or the request itself.
"""
from __future__ import annotations

from fastapi import Request

from api.bindings import bindings_from_pairs
from ports.evaluator import Evaluator


def get_evaluator(request: Request) -> Evaluator:
    return request.app.state.evaluator


def get_bindings(request: Request) -> dict[str, bool]:
    """Query parameters as bindings: ?x=1&Y=0 → {"x": True, "y": False}."""
    return bindings_from_pairs(request.query_params.multi_items())
