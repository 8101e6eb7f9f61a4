"""
Adapter: BooleanEvaluator
Implements the Evaluator port by composing tokenizer → parser → binder → fold.

The object holds only its (immutable) input limits, so one instance can be
shared freely between threads and requests.
"""
from __future__ import annotations

import logging
from typing import Mapping

from adapters.evaluator.ast_evaluator import evaluate as fold
from adapters.evaluator.binder import bind as bind_variables
from adapters.evaluator.parser import DEFAULT_MAX_DEPTH
from adapters.evaluator.parser import parse as parse_tokens
from adapters.evaluator.tokenizer import tokenize
from config import Settings
from contracts import (
    MAX_NESTING_DEPTH,
    BoundExpression,
    ExpressionError,
    ExpressionTooLongError,
    ExprAST,
    ValidationResult,
)

logger = logging.getLogger("logexp.evaluator")

DEFAULT_MAX_LENGTH = 4096


class BooleanEvaluator:
    """Boolean expression engine: 0/1 literals, variables, AND over OR, grouping."""

    def __init__(
        self,
        max_expression_length: int = DEFAULT_MAX_LENGTH,
        max_nesting_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        if not 1 <= max_nesting_depth <= MAX_NESTING_DEPTH:
            raise ValueError(f"max_nesting_depth must be between 1 and {MAX_NESTING_DEPTH}")
        self._max_length = max_expression_length
        self._max_depth = max_nesting_depth

    @classmethod
    def from_settings(cls, settings: Settings) -> "BooleanEvaluator":
        return cls(
            max_expression_length=settings.max_expression_length,
            max_nesting_depth=settings.max_nesting_depth,
        )

    # -- Evaluator protocol ------------------------------------------------

    def parse(self, text: str) -> ExprAST:
        if self._max_length and len(text) > self._max_length:
            raise ExpressionTooLongError(len(text), self._max_length)
        try:
            return parse_tokens(tokenize(text), self._max_depth)
        except ExpressionError as exc:
            logger.debug("Rejected expression (%s): %s", exc.kind, exc.message)
            raise

    def validate(self, text: str) -> ValidationResult:
        try:
            self.parse(text)
        except ExpressionError as exc:
            return ValidationResult(valid=False, error=exc.to_detail())
        return ValidationResult(valid=True)

    def bind(self, ast: ExprAST, bindings: Mapping[str, bool]) -> BoundExpression:
        return bind_variables(ast, bindings)

    def evaluate(self, ast: ExprAST, bindings: Mapping[str, bool]) -> bool:
        return fold(self.bind(ast, bindings))

    def evaluate_expression(self, text: str, bindings: Mapping[str, bool]) -> bool:
        return self.evaluate(self.parse(text), bindings)
