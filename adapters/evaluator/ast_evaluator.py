"""
Fold of a bound boolean AST.

  Literal(v)          → v
  Variable(n)         → bindings[n]
  BinOp(AND, l, r)    → l and r
  BinOp(OR, l, r)     → l or r

Post-order walk on an explicit stack: left-associated chains such as
"1 AND 1 AND ... AND 1" produce trees as deep as the chain is long.
"""
from __future__ import annotations

from contracts import BinOpNode, BoundExpression, ExprAST, LiteralNode, VariableNode

_OP_FUNCS = {
    "AND": lambda a, b: a and b,
    "OR":  lambda a, b: a or b,
}


def evaluate(bound: BoundExpression) -> bool:
    bindings = bound.bindings
    values: list[bool] = []
    # (node, children_done)
    stack: list[tuple[ExprAST, bool]] = [(bound.ast, False)]

    while stack:
        node, children_done = stack.pop()

        if isinstance(node, LiteralNode):
            values.append(node.value)
        elif isinstance(node, VariableNode):
            values.append(bindings[node.name])
        elif isinstance(node, BinOpNode):
            if children_done:
                right = values.pop()
                left = values.pop()
                values.append(_OP_FUNCS[node.op](left, right))
            else:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
        else:
            raise TypeError(f"Unknown AST node type: {type(node)}")

    return values[0]
