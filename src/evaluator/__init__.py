"""Evaluator — tokenizing and precedence reduction of expression lines.

- tokenize(): operand/operator scan with the digit-addition rule
- ExpressionEvaluator: tiered reduction, {/, *} before {+, -}
"""

from .expression import (
    EvaluatorConfig,
    ExpressionEvaluator,
    run_expr,
)
from .ops import OP_PRECEDENCE, Op
from .tokenizer import TokenStream, tokenize

__all__ = [
    "EvaluatorConfig",
    "ExpressionEvaluator",
    "run_expr",
    "OP_PRECEDENCE",
    "Op",
    "TokenStream",
    "tokenize",
]
