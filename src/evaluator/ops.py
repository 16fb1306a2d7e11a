"""
Binary operators and their precedence tiers.

Tiers are reduced in order; operators inside a tier are applied left to
right:
    tier 1: DIVIDE, MULTIPLY
    tier 2: ADD, SUBTRACT
"""

from enum import Enum
from typing import Final

from src.core.domain.rational import Rational


class Op(str, Enum):
    """Binary operator, valued by its input character."""

    MULTIPLY = "*"
    ADD = "+"
    SUBTRACT = "-"
    DIVIDE = "/"

    @classmethod
    def from_char(cls, char: str) -> "Op":
        """
        Map an operator character to its Op.

        Raises:
            ValueError: If char is not one of + - * /
        """
        return cls(char)

    def compute(self, a: Rational, b: Rational) -> Rational:
        """
        Apply the operator to two operands.

        Division goes through checked_divide, so a zero-valued divisor raises
        the recoverable DivisionByZero.
        """
        if self is Op.MULTIPLY:
            return a * b
        if self is Op.ADD:
            return a + b
        if self is Op.SUBTRACT:
            return a - b
        return a.checked_divide(b)


OPERATOR_CHARS: Final[frozenset[str]] = frozenset(op.value for op in Op)

OP_PRECEDENCE: Final[tuple[tuple[Op, ...], ...]] = (
    (Op.DIVIDE, Op.MULTIPLY),
    (Op.ADD, Op.SUBTRACT),
)
