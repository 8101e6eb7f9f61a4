"""
Router: POST /v1/parse
Returns the AST, as a flat node table, and the variables a caller has to
bind before evaluating.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from adapters.evaluator.binder import collect_variables
from adapters.evaluator.flatten import flatten
from api.dependencies import get_evaluator
from api.schemas import ErrorResponse, ExpressionRequest, ParseResponse
from ports.evaluator import Evaluator

router = APIRouter(prefix="/v1/parse", tags=["parse"])


@router.post(
    "",
    response_model=ParseResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
async def parse_expression(
    body: ExpressionRequest,
    evaluator: Evaluator = Depends(get_evaluator),
) -> ParseResponse:
    ast = evaluator.parse(body.expression)
    return ParseResponse(
        expression=body.expression,
        nodes=flatten(ast),
        variables=sorted(collect_variables(ast)),
    )
