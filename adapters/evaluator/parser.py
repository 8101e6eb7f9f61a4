"""
Recursive descent parser for boolean expressions.

Grammar (AND binds tighter than OR, both left-associated):
  expr    = or_expr
  or_expr = and_expr ('OR' and_expr)*
  and_expr = primary ('AND' primary)*
  primary = '0' | '1' | VARIABLE | '(' expr ')'

Errors carry the source position of the offending token:
  EmptyExpressionError   — nothing but END
  UnexpectedTokenError   — wrong token category where a primary or ')' is expected
  MissingOperandError    — operator followed by END or ')'
  UnmatchedParenError    — '(' never closed, or a stray ')'
  TrailingInputError     — tokens left after a complete expression
  NestingTooDeepError    — groups nested deeper than max_depth
"""
from __future__ import annotations

from typing import Optional, Sequence

from contracts import (
    MAX_NESTING_DEPTH,
    BinOpNode,
    EmptyExpressionError,
    ExprAST,
    LiteralNode,
    MissingOperandError,
    NestingTooDeepError,
    Token,
    TokenType,
    TrailingInputError,
    UnexpectedTokenError,
    UnmatchedParenError,
    VariableNode,
)

DEFAULT_MAX_DEPTH = 64

_PRIMARY_EXPECTED = "0, 1, a variable or '('"


def _describe(tok: Token) -> str:
    return tok.text if tok.type is not TokenType.END else "end of input"


class _Parser:
    def __init__(self, tokens: Sequence[Token], max_depth: int) -> None:
        self._tokens = tokens
        self._pos = 0
        self._max_depth = max_depth
        self._open: list[Token] = []  # LPAREN tokens not closed yet

    def _peek(self) -> Token:
        return self._tokens[self._pos]

    def _consume(self) -> Token:
        tok = self._tokens[self._pos]
        if tok.type is not TokenType.END:
            self._pos += 1
        return tok

    def parse(self) -> ExprAST:
        first = self._peek()
        if first.type is TokenType.END:
            raise EmptyExpressionError(first.position)

        node = self._or_expr()

        tok = self._peek()
        if tok.type is TokenType.RPAREN:
            raise UnmatchedParenError(tok.position, ")")
        if tok.type is not TokenType.END:
            raise TrailingInputError(tok.position, _describe(tok))
        return node

    def _or_expr(self) -> ExprAST:
        left = self._and_expr(None)
        while self._peek().type is TokenType.OR:
            op = self._consume()
            right = self._and_expr(op)
            left = BinOpNode(op="OR", left=left, right=right)
        return left

    def _and_expr(self, after: Optional[Token]) -> ExprAST:
        left = self._primary(after)
        while self._peek().type is TokenType.AND:
            op = self._consume()
            right = self._primary(op)
            left = BinOpNode(op="AND", left=left, right=right)
        return left

    def _primary(self, after: Optional[Token]) -> ExprAST:
        """after: the operator token this primary is the right operand of, if any."""
        tok = self._peek()

        if tok.type is TokenType.LITERAL_TRUE or tok.type is TokenType.LITERAL_FALSE:
            self._consume()
            return LiteralNode(value=tok.type is TokenType.LITERAL_TRUE)

        if tok.type is TokenType.VARIABLE:
            self._consume()
            return VariableNode(name=tok.text)

        if tok.type is TokenType.LPAREN:
            return self._group()

        if after is not None and tok.type in (TokenType.END, TokenType.RPAREN):
            raise MissingOperandError(after.position, after.text)

        if tok.type is TokenType.END:
            # only reachable directly after '('
            raise UnmatchedParenError(self._open[-1].position, "(")

        raise UnexpectedTokenError(tok.position, _describe(tok), _PRIMARY_EXPECTED)

    def _group(self) -> ExprAST:
        lparen = self._consume()
        if len(self._open) >= self._max_depth:
            raise NestingTooDeepError(lparen.position, self._max_depth)
        self._open.append(lparen)

        node = self._or_expr()

        tok = self._peek()
        if tok.type is TokenType.END:
            raise UnmatchedParenError(lparen.position, "(")
        if tok.type is not TokenType.RPAREN:
            raise UnexpectedTokenError(tok.position, _describe(tok), "')'")
        self._consume()
        self._open.pop()
        return node


def parse(tokens: Sequence[Token], max_depth: int = DEFAULT_MAX_DEPTH) -> ExprAST:
    """Parses a full token stream (as produced by tokenize) into an AST."""
    if not 1 <= max_depth <= MAX_NESTING_DEPTH:
        raise ValueError(f"max_depth must be between 1 and {MAX_NESTING_DEPTH}")
    if not tokens or tokens[-1].type is not TokenType.END:
        end = tokens[-1].position + len(tokens[-1].text) if tokens else 0
        tokens = [*tokens, Token(type=TokenType.END, position=end)]
    return _Parser(tokens, max_depth).parse()
