#!/usr/bin/env python3
"""
logexp.py — LogExp CLI.

Runs the boolean expression engine locally; no API server needed.
Limits come from LOGEXP_* environment variables or a .env file.

Subcommands:
    eval      — evaluate an expression (bindings via --var NAME=0|1)
    validate  — syntax check only
    parse     — show the AST (rich tree, or --json node table) and required variables
    vars      — list the variables an expression needs

Usage:
    python logexp.py eval "1 OR 0 AND 0"
    python logexp.py eval "(x AND y) OR z" --var x=1 --var y=0 --var z=1
    python logexp.py validate "(1 AND 0"
    python logexp.py parse "X AND (y OR 0)"
    python logexp.py parse --json "1 OR a"
    python logexp.py vars "(a OR b) AND c"
"""
from __future__ import annotations

import argparse
import sys
from typing import NoReturn

from rich.console import Console
from rich.tree import Tree

from adapters.evaluator import BooleanEvaluator
from adapters.evaluator.binder import collect_variables
from adapters.evaluator.flatten import flatten
from api.bindings import bindings_from_pairs
from api.schemas import ParseResponse
from config import Settings
from contracts import BinOpNode, ExpressionError, ExprAST, LiteralNode


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _evaluator() -> BooleanEvaluator:
    return BooleanEvaluator.from_settings(Settings())


def _fail(exc: ExpressionError) -> NoReturn:
    print(f"error [{exc.kind}]: {exc.message}", file=sys.stderr)
    sys.exit(1)


def _label(node: ExprAST) -> str:
    if isinstance(node, LiteralNode):
        return "[green]1[/green]" if node.value else "[red]0[/red]"
    if isinstance(node, BinOpNode):
        return f"[bold]{node.op}[/bold]"
    return f"[cyan]{node.name}[/cyan]"


def _ast_tree(ast: ExprAST) -> Tree:
    root = Tree(_label(ast))
    stack: list[tuple[ExprAST, Tree]] = [(ast, root)]
    while stack:
        node, branch = stack.pop()
        if isinstance(node, BinOpNode):
            left = branch.add(_label(node.left))
            right = branch.add(_label(node.right))
            stack.append((node.right, right))
            stack.append((node.left, left))
    return root


def _parse_var_args(items: list[str]) -> dict[str, bool]:
    pairs: list[tuple[str, str]] = []
    for item in items:
        name, sep, raw = item.partition("=")
        if not sep:
            print(f"error: --var expects NAME=0|1, got {item!r}", file=sys.stderr)
            sys.exit(2)
        pairs.append((name.strip(), raw.strip()))
    return bindings_from_pairs(pairs)


# -- commands --------------------------------------------------------------

def _eval(args: argparse.Namespace) -> None:
    try:
        bindings = _parse_var_args(args.var)
        result = _evaluator().evaluate_expression(args.expression, bindings)
    except ExpressionError as exc:
        _fail(exc)
    print("true" if result else "false")


def _validate(args: argparse.Namespace) -> None:
    result = _evaluator().validate(args.expression)
    if result.valid:
        print("valid")
        return
    error = result.error
    where = f" at position {error.position}" if error.position is not None else ""
    print(f"invalid [{error.kind}]{where}: {error.message}", file=sys.stderr)
    sys.exit(1)


def _parse(args: argparse.Namespace) -> None:
    try:
        ast = _evaluator().parse(args.expression)
    except ExpressionError as exc:
        _fail(exc)

    names = sorted(collect_variables(ast))
    if args.json:
        out = ParseResponse(expression=args.expression, nodes=flatten(ast), variables=names)
        print(out.model_dump_json(indent=2, exclude_none=True))
        return

    _console().print(_ast_tree(ast))
    print(f"variables: {', '.join(names) if names else '-'}")


def _vars(args: argparse.Namespace) -> None:
    try:
        ast = _evaluator().parse(args.expression)
    except ExpressionError as exc:
        _fail(exc)
    for name in sorted(collect_variables(ast)):
        print(name)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="logexp",
        description="LogExp — boolean expression engine (0/1, AND, OR, variables)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # eval
    p = sub.add_parser("eval", help="Evaluate an expression")
    p.add_argument("expression", help='Expression, e.g. "(x AND y) OR z"')
    p.add_argument("--var", "-v", action="append", default=[], metavar="NAME=0|1",
                   help="Variable binding (repeatable)")

    # validate
    p = sub.add_parser("validate", help="Check syntax without bindings")
    p.add_argument("expression")

    # parse
    p = sub.add_parser("parse", help="Show the AST of an expression")
    p.add_argument("expression")
    p.add_argument("--json", action="store_true", help="Print the AST as JSON")

    # vars
    p = sub.add_parser("vars", help="List variables an expression needs")
    p.add_argument("expression")

    args = parser.parse_args(argv)

    cmds = {
        "eval":     _eval,
        "validate": _validate,
        "parse":    _parse,
        "vars":     _vars,
    }
    cmds[args.command](args)


if __name__ == "__main__":
    main()
