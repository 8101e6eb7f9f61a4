"""
contracts.py — Single source of truth for every data type in LogExp.
All modules import their tokens, AST nodes, results and errors from here.
"""
from __future__ import annotations

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

CONTRACTS_VERSION = "1.0.0"

# Highest accepted nesting limit. The parser spends four interpreter frames per
# group level, so this keeps the deepest legal input well inside the default
# recursion limit.
MAX_NESTING_DEPTH = 128


# ─────────────────────────── Tokenizer ───────────────────────────────────

class TokenType(str, Enum):
    LITERAL_TRUE = "LITERAL_TRUE"    # "1"
    LITERAL_FALSE = "LITERAL_FALSE"  # "0"
    AND = "AND"
    OR = "OR"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    VARIABLE = "VARIABLE"
    END = "END"                      # end of input, always the last token


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: TokenType
    position: int   # 0-based offset into the source text
    text: str = ""  # lexeme; lowercase name for VARIABLE


# ─────────────────────────── AST ─────────────────────────────────────────

class LiteralNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["literal"] = "literal"
    value: bool


class VariableNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["variable"] = "variable"
    name: str  # canonical lowercase


class BinOpNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["binop"] = "binop"
    op: Literal["AND", "OR"]
    left: "ExprAST"
    right: "ExprAST"


ExprAST = Union[LiteralNode, VariableNode, BinOpNode]
BinOpNode.model_rebuild()


class ASTNodeRecord(BaseModel):
    """
    One row of a flattened AST. Children are referenced by index into the
    row list, so serializing a tree never nests deeper than one level.
    """
    model_config = ConfigDict(frozen=True)

    node_type: Literal["literal", "variable", "binop"]
    value: Optional[bool] = None                 # literal
    name: Optional[str] = None                   # variable
    op: Optional[Literal["AND", "OR"]] = None    # binop
    left: Optional[int] = None                   # binop
    right: Optional[int] = None                  # binop


class BoundExpression(BaseModel):
    """AST paired with a read-only binding table. Produced by the binder only."""
    model_config = ConfigDict(frozen=True)

    ast: ExprAST
    bindings: dict[str, bool] = Field(default_factory=dict)


# ─────────────────────────── Validator ───────────────────────────────────

class ErrorDetail(BaseModel):
    kind: str
    message: str
    position: Optional[int] = None
    character: Optional[str] = None
    found: Optional[str] = None
    missing: Optional[list[str]] = None
    name: Optional[str] = None
    value: Optional[str] = None
    limit: Optional[int] = None


class ValidationResult(BaseModel):
    valid: bool
    error: Optional[ErrorDetail] = None


# ─────────────────────────── Errors ──────────────────────────────────────

class ExpressionError(Exception):
    """Base class for every failure the engine reports."""

    kind = "expression_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_detail(self) -> ErrorDetail:
        return ErrorDetail(kind=self.kind, message=self.message)


class LexError(ExpressionError):
    kind = "lex_error"

    def __init__(self, position: int, character: str, message: str | None = None) -> None:
        super().__init__(message or f"unexpected character {character!r} at position {position}")
        self.position = position
        self.character = character

    def to_detail(self) -> ErrorDetail:
        return ErrorDetail(
            kind=self.kind,
            message=self.message,
            position=self.position,
            character=self.character,
        )


class ExpressionTooLongError(ExpressionError):
    kind = "expression_too_long"

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"expression has {length} characters, limit is {limit}")
        self.length = length
        self.limit = limit

    def to_detail(self) -> ErrorDetail:
        return ErrorDetail(kind=self.kind, message=self.message, limit=self.limit)


class ExpressionSyntaxError(ExpressionError):
    """Structural problem found by the parser."""

    kind = "syntax_error"

    def __init__(self, position: int, message: str) -> None:
        super().__init__(message)
        self.position = position

    def to_detail(self) -> ErrorDetail:
        return ErrorDetail(kind=self.kind, message=self.message, position=self.position)


class EmptyExpressionError(ExpressionSyntaxError):
    kind = "empty_expression"

    def __init__(self, position: int = 0) -> None:
        super().__init__(position, "empty expression")


class UnexpectedTokenError(ExpressionSyntaxError):
    kind = "unexpected_token"

    def __init__(self, position: int, found: str, expected: str) -> None:
        super().__init__(position, f"expected {expected}, found {found!r} at position {position}")
        self.found = found
        self.expected = expected

    def to_detail(self) -> ErrorDetail:
        detail = super().to_detail()
        return detail.model_copy(update={"found": self.found})


class MissingOperandError(ExpressionSyntaxError):
    kind = "missing_operand"

    def __init__(self, position: int, operator: str) -> None:
        super().__init__(position, f"operator {operator} at position {position} has no right operand")
        self.operator = operator


class UnmatchedParenError(ExpressionSyntaxError):
    kind = "unmatched_paren"

    def __init__(self, position: int, paren: str) -> None:
        if paren == "(":
            message = f"'(' at position {position} is never closed"
        else:
            message = f"')' at position {position} has no matching '('"
        super().__init__(position, message)
        self.paren = paren


class TrailingInputError(ExpressionSyntaxError):
    kind = "trailing_input"

    def __init__(self, position: int, found: str) -> None:
        super().__init__(position, f"unexpected {found!r} after complete expression at position {position}")
        self.found = found

    def to_detail(self) -> ErrorDetail:
        detail = super().to_detail()
        return detail.model_copy(update={"found": self.found})


class NestingTooDeepError(ExpressionSyntaxError):
    kind = "nesting_too_deep"

    def __init__(self, position: int, limit: int) -> None:
        super().__init__(position, f"parentheses nested deeper than {limit} at position {position}")
        self.limit = limit

    def to_detail(self) -> ErrorDetail:
        detail = super().to_detail()
        return detail.model_copy(update={"limit": self.limit})


class UnboundVariableError(ExpressionError):
    kind = "unbound_variable"

    def __init__(self, missing: frozenset[str]) -> None:
        names = ", ".join(sorted(missing))
        super().__init__(f"missing required variables: {names}")
        self.missing = frozenset(missing)

    def to_detail(self) -> ErrorDetail:
        return ErrorDetail(kind=self.kind, message=self.message, missing=sorted(self.missing))


class InvalidVariableValueError(ExpressionError):
    kind = "invalid_variable_value"

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"variable values must be either 0 or 1, received {name}: {value!r}")
        self.name = name
        self.value = value

    def to_detail(self) -> ErrorDetail:
        return ErrorDetail(kind=self.kind, message=self.message, name=self.name, value=self.value)
