"""
Tokenizer for boolean expressions.

Lexical rules:
  whitespace       — ASCII only, skipped
  0 / 1            — LITERAL_FALSE / LITERAL_TRUE, one token per digit
  ( / )            — LPAREN / RPAREN
  word [A-Za-z]+   — always taken whole, so it is bounded by non-letters:
      AND, OR      → operator
      other CAPS   → LexError (malformed operator word: ANDY, NOT, XOR)
      anything else → VARIABLE, lowercased (x, X, andy, orb)
  A word with any lowercase letter is a variable even when it embeds an
  operator: aAND, xOR, Andy, Or all name variables (aand, xor, andy, or).
  Only a whole CAPS word is checked against AND/OR.
"""
from __future__ import annotations

import re

from contracts import LexError, Token, TokenType

_TOKEN_RE = re.compile(
    r"(?P<ws>[ \t\r\n\f\v]+)"
    r"|(?P<literal>[01])"
    r"|(?P<word>[A-Za-z]+)"
    r"|(?P<paren>[()])"
)

_OPERATORS = {"AND": TokenType.AND, "OR": TokenType.OR}
_LITERALS = {"1": TokenType.LITERAL_TRUE, "0": TokenType.LITERAL_FALSE}
_PARENS = {"(": TokenType.LPAREN, ")": TokenType.RPAREN}


def _word_token(word: str, position: int) -> Token:
    if word.isupper():
        op = _OPERATORS.get(word)
        if op is not None:
            return Token(type=op, position=position, text=word)
        if len(word) > 1:
            raise LexError(
                position,
                word[0],
                message=f"unknown operator word {word!r} at position {position}",
            )
    return Token(type=TokenType.VARIABLE, position=position, text=word.lower())


def tokenize(source: str) -> list[Token]:
    """Returns every token of source followed by a single END token."""
    tokens: list[Token] = []
    pos = 0
    while pos < len(source):
        m = _TOKEN_RE.match(source, pos)
        if m is None:
            raise LexError(pos, source[pos])

        kind = m.lastgroup
        lexeme = m.group()
        if kind == "literal":
            tokens.append(Token(type=_LITERALS[lexeme], position=pos, text=lexeme))
        elif kind == "word":
            tokens.append(_word_token(lexeme, pos))
        elif kind == "paren":
            tokens.append(Token(type=_PARENS[lexeme], position=pos, text=lexeme))
        pos = m.end()

    tokens.append(Token(type=TokenType.END, position=len(source)))
    return tokens
