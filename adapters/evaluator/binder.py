"""
Binder: resolves VariableNode names against caller bindings.

The AST is never rewritten; the result is a BoundExpression that carries the
original tree plus a table restricted to the variables it references.
"""
from __future__ import annotations

from typing import Mapping

from contracts import BinOpNode, BoundExpression, ExprAST, UnboundVariableError, VariableNode


def collect_variables(ast: ExprAST) -> frozenset[str]:
    """Every distinct variable name referenced by the tree."""
    names: set[str] = set()
    stack: list[ExprAST] = [ast]
    while stack:
        node = stack.pop()
        if isinstance(node, VariableNode):
            names.add(node.name)
        elif isinstance(node, BinOpNode):
            stack.append(node.right)
            stack.append(node.left)
    return frozenset(names)


def bind(ast: ExprAST, bindings: Mapping[str, bool]) -> BoundExpression:
    """
    Keys of bindings must already be lowercase; lookup is exact.
    Raises UnboundVariableError with the full set of missing names.
    """
    names = collect_variables(ast)
    missing = frozenset(name for name in names if name not in bindings)
    if missing:
        raise UnboundVariableError(missing)
    return BoundExpression(
        ast=ast,
        bindings={name: bool(bindings[name]) for name in names},
    )
