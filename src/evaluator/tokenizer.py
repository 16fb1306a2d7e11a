"""
Tokenizer — phase 1 of expression evaluation

Single left-to-right scan of one input line into an operand list and an
operator list.

Scan rules:
- digit '0'..'9'   → added to the pending operand (acc = acc + digit)
- '+' '-' '*' '/'  → closes the pending operand (if any), appends the Op
- ignored char     → skipped (a space by default)
- anything else    → InvalidSyntax(index)

NOTE: digits accumulate by ADDITION, not by place value: "23" is the operand
2 + 3 = 5. Existing outputs depend on this, so it is kept as-is.

The resulting stream always satisfies len(operands) == len(operators) + 1;
anything else is rejected with InvalidExpr.
"""

from dataclasses import dataclass, field
from typing import Final

from src.core.domain.rational import Rational
from src.core.errors import InvalidExpr, InvalidSyntax
from src.core.logging_config import get_logger
from src.evaluator.ops import OPERATOR_CHARS, Op

logger = get_logger(__name__)

DEFAULT_IGNORED_CHARS: Final[frozenset[str]] = frozenset(" ")


@dataclass
class TokenStream:
    """Operands and operators of one expression, in input order."""

    operands: list[Rational] = field(default_factory=list)
    operators: list[Op] = field(default_factory=list)

    def is_well_formed(self) -> bool:
        return len(self.operands) == len(self.operators) + 1


def _is_digit(char: str) -> bool:
    # ASCII only; str.isdigit() would also accept other scripts' digits
    return "0" <= char <= "9"


def tokenize(
    expr: str,
    ignored_chars: frozenset[str] = DEFAULT_IGNORED_CHARS,
) -> TokenStream:
    """
    Split an expression line into operands and operators.

    Args:
        expr: Expression text without its line terminator
        ignored_chars: Characters skipped during the scan

    Returns:
        Well-formed TokenStream

    Raises:
        InvalidSyntax: Unrecognized character (carries its zero-based index)
        InvalidExpr: No trailing operand, or operands/operators out of step

    Examples:
        >>> tokenize("23+4").operands
        [Rational(5, 1), Rational(4, 1)]
    """
    stream = TokenStream()
    pending: Rational | None = None

    for index, char in enumerate(expr):
        if _is_digit(char):
            pending = (pending if pending is not None else Rational()) + int(char)
        elif char in OPERATOR_CHARS:
            if pending is not None:
                stream.operands.append(pending)
                pending = None
            stream.operators.append(Op.from_char(char))
        elif char in ignored_chars:
            continue
        else:
            raise InvalidSyntax(index)

    if pending is None:
        raise InvalidExpr()
    stream.operands.append(pending)

    if not stream.is_well_formed():
        raise InvalidExpr(
            f"invalid expression: {len(stream.operands)} operands "
            f"for {len(stream.operators)} operators"
        )

    logger.debug("operands: %s", stream.operands)
    logger.debug("operators: %s", [op.value for op in stream.operators])
    return stream
