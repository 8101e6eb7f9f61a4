"""
Router: POST /v1/evaluate
Evaluates the expression from the body; variable bindings come from the query
string (?x=1&y=0). Engine errors are turned into 400 by the app-level handler.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from api.dependencies import get_bindings, get_evaluator
from api.schemas import ErrorResponse, EvaluateResponse, ExpressionRequest
from ports.evaluator import Evaluator

router = APIRouter(prefix="/v1/evaluate", tags=["evaluate"])


@router.post(
    "",
    response_model=EvaluateResponse,
    responses={400: {"model": ErrorResponse}},
)
async def evaluate_expression(
    body: ExpressionRequest,
    bindings: dict[str, bool] = Depends(get_bindings),
    evaluator: Evaluator = Depends(get_evaluator),
) -> EvaluateResponse:
    result = evaluator.evaluate_expression(body.expression, bindings)
    return EvaluateResponse(result=result)
