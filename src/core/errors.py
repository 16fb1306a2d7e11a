"""
Calculation Errors — recoverable error hierarchy

Errors a caller can recover from while evaluating an expression line.
Each one carries the variant name the line driver prints as ``Err(...)``.

Hierarchy:
    CalcError (base)
    ├── DivisionByZero   — checked division by a zero-valued rational
    ├── InvalidSyntax    — unrecognized character at a zero-based index
    └── InvalidExpr      — no operands, or operands/operators out of step

The fatal fault (raw division with a zero denominator) is deliberately NOT
part of this hierarchy: it is raised as the built-in ZeroDivisionError and
must never be caught by the driver.
"""


class CalcError(Exception):
    """Base class for all recoverable evaluation errors."""

    def variant(self) -> str:
        """Name of the error as rendered inside ``Err(...)``."""
        return type(self).__name__


class DivisionByZero(CalcError):
    """Checked division where the divisor's numerator is zero."""

    def __init__(self, message: str = "division by a zero-valued rational"):
        super().__init__(message)


class InvalidSyntax(CalcError):
    """Unrecognized character during tokenizing."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"invalid syntax at index {index}")

    def variant(self) -> str:
        return f"InvalidSyntax({self.index})"


class InvalidExpr(CalcError):
    """Token stream does not form an expression."""

    def __init__(self, message: str = "invalid expression"):
        super().__init__(message)
