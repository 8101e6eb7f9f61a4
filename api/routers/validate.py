"""
Router: POST /v1/validate
Syntax check only; always 200, the verdict is in the body.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from api.dependencies import get_evaluator
from api.schemas import ExpressionRequest
from contracts import ValidationResult
from ports.evaluator import Evaluator

router = APIRouter(prefix="/v1/validate", tags=["validate"])


@router.post("", response_model=ValidationResult, response_model_exclude_none=True)
async def validate_expression(
    body: ExpressionRequest,
    evaluator: Evaluator = Depends(get_evaluator),
) -> ValidationResult:
    return evaluator.validate(body.expression)
