"""
schemas.py — FastAPI request/response models.
Kept apart from contracts.py so the API can evolve independently.
"""
from __future__ import annotations

from pydantic import BaseModel, Field

from contracts import ASTNodeRecord, ErrorDetail


# ─────────────────────────── /v1/* ───────────────────────────────

class ExpressionRequest(BaseModel):
    expression: str = Field(..., examples=["(x AND y) OR z"])


# ─────────────────────────── /v1/evaluate ────────────────────────

class EvaluateResponse(BaseModel):
    result: bool


# ─────────────────────────── /v1/parse ───────────────────────────

class ParseResponse(BaseModel):
    """AST as a pre-order node table: nodes[0] is the root."""
    expression: str
    nodes: list[ASTNodeRecord]
    variables: list[str]


# ─────────────────────────── errors ──────────────────────────────

class ErrorResponse(BaseModel):
    error: ErrorDetail


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
