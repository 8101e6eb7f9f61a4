"""
AST → flat node table for JSON output.

Rows are in pre-order, so the root is always row 0; a binop row refers to
its operands by row index. Built on an explicit stack: a chain of a few
thousand operators flattens (and serializes) like a short one.
"""
from __future__ import annotations

from typing import Any, Optional

from contracts import ASTNodeRecord, BinOpNode, ExprAST, LiteralNode, VariableNode


def flatten(ast: ExprAST) -> list[ASTNodeRecord]:
    rows: list[dict[str, Any]] = []
    # (node, parent row, side in parent)
    stack: list[tuple[ExprAST, Optional[int], str]] = [(ast, None, "")]

    while stack:
        node, parent, side = stack.pop()
        index = len(rows)
        if parent is not None:
            rows[parent][side] = index

        if isinstance(node, LiteralNode):
            rows.append({"node_type": "literal", "value": node.value})
        elif isinstance(node, VariableNode):
            rows.append({"node_type": "variable", "name": node.name})
        elif isinstance(node, BinOpNode):
            rows.append({"node_type": "binop", "op": node.op})
            stack.append((node.right, index, "right"))
            stack.append((node.left, index, "left"))
        else:
            raise TypeError(f"Unknown node type: {type(node)}")

    return [ASTNodeRecord(**row) for row in rows]
