"""
Expression Evaluator — tokenize, then reduce by precedence tier

Phase 1: tokenize() (src.evaluator.tokenizer)
Phase 2: tiered in-place reduction

Reduction, per tier (in precedence order):
    scan operators left to right;
    for an operator of the current tier at position i:
        remove operator i and operand i,
        replace operand i (formerly i+1) with op(removed, operand i);
    operators of later tiers are skipped and stay in place.

After all tiers exactly one operand remains: the result.

The evaluator keeps no state between calls; only the prime cache behind
Rational normalization is shared.
"""

from dataclasses import dataclass

from src.core.domain.rational import Rational
from src.core.errors import InvalidExpr
from src.core.logging_config import get_logger
from src.evaluator.ops import OP_PRECEDENCE, Op
from src.evaluator.tokenizer import DEFAULT_IGNORED_CHARS, TokenStream, tokenize

logger = get_logger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EvaluatorConfig:
    """Evaluator configuration.

    precedence: operator tiers, highest precedence first
    ignored_chars: characters the tokenizer skips
    """

    precedence: tuple[tuple[Op, ...], ...] = OP_PRECEDENCE
    ignored_chars: frozenset[str] = DEFAULT_IGNORED_CHARS

    def __post_init__(self):
        covered = [op for tier in self.precedence for op in tier]
        if sorted(covered) != sorted(Op):
            raise ValueError(
                f"precedence must cover every operator exactly once, got {covered}"
            )


# =============================================================================
# EVALUATOR
# =============================================================================


class ExpressionEvaluator:
    """Evaluates single-line arithmetic expressions over rationals."""

    def __init__(self, config: EvaluatorConfig | None = None):
        """
        Args:
            config: evaluator configuration (optional, default is used)
        """
        self.config = config or EvaluatorConfig()

    def evaluate(self, expr: str) -> Rational:
        """
        Evaluate one expression line.

        Args:
            expr: Expression text without its line terminator

        Returns:
            Normalized result

        Raises:
            InvalidSyntax: Unrecognized character
            InvalidExpr: Malformed token stream
            DivisionByZero: Division by a zero-valued operand
        """
        stream = tokenize(expr, ignored_chars=self.config.ignored_chars)
        return self.reduce(stream)

    def reduce(self, stream: TokenStream) -> Rational:
        """
        Collapse a well-formed token stream to its value.

        Works on copies; the given stream is left untouched.

        Raises:
            InvalidExpr: Stream is not well formed
            DivisionByZero: Division by a zero-valued operand
        """
        if not stream.is_well_formed():
            raise InvalidExpr()

        operands = list(stream.operands)
        operators = list(stream.operators)

        for tier in self.config.precedence:
            index = 0
            while index < len(operators):
                if operators[index] in tier:
                    op = operators.pop(index)
                    left = operands.pop(index)
                    operands[index] = op.compute(left, operands[index])
                    logger.debug(
                        "reduced %r %s -> %r", left, op.value, operands[index]
                    )
                else:
                    index += 1

        return operands[0]


_DEFAULT_EVALUATOR = ExpressionEvaluator()


def run_expr(expr: str) -> Rational:
    """
    Evaluate an expression with the default configuration.

    Examples:
        >>> str(run_expr("6/3*2"))
        '4'
        >>> str(run_expr("23+4"))
        '9'
    """
    return _DEFAULT_EVALUATOR.evaluate(expr)
