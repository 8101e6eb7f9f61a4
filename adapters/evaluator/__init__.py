"""
Boolean expression evaluator package.

Public import:
    from adapters.evaluator import BooleanEvaluator
"""

from adapters.evaluator.boolean_evaluator import BooleanEvaluator

__all__ = ["BooleanEvaluator"]
