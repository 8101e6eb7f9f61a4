"""
Port: Evaluator
Responsibility: parse, validate and evaluate boolean expressions (0/1, AND/OR, variables).
"""
from typing import Mapping, Protocol, runtime_checkable

from contracts import BoundExpression, ExprAST, ValidationResult


@runtime_checkable
class Evaluator(Protocol):
    def parse(self, text: str) -> ExprAST:
        """
        Tokenizes and parses an expression into an immutable AST.
        AND binds tighter than OR; variable names are lowercased.
        Raises LexError, ExpressionSyntaxError (or a subclass) and
        ExpressionTooLongError for malformed input.
        """
        ...

    def validate(self, text: str) -> ValidationResult:
        """
        Runs the parse path only; no bindings are needed.
        Never raises for bad input; the failure is encoded in the result.
        """
        ...

    def bind(self, ast: ExprAST, bindings: Mapping[str, bool]) -> BoundExpression:
        """
        Resolves every VariableNode against bindings (keys already lowercase).
        Raises UnboundVariableError listing ALL missing names at once.
        """
        ...

    def evaluate(self, ast: ExprAST, bindings: Mapping[str, bool]) -> bool:
        """
        Binds and folds a parsed AST. The AST is not modified and can be
        evaluated again with different bindings.
        """
        ...

    def evaluate_expression(self, text: str, bindings: Mapping[str, bool]) -> bool:
        """Full pipeline: parse → bind → evaluate."""
        ...
