"""
Rational — Exact Fraction Value Object

Immutable pair of signed integers (numerator, denominator) with exact
arithmetic. Every arithmetic operation returns a new instance reduced to
lowest terms via the prime-cache GCD (src.core.math.primes).

CRITICAL INVARIANTS:
1. Results of add/subtract/multiply/divide are always normalized
2. The sign of the denominator is NOT canonicalized: a negative denominator
   survives normalization
3. Two division entry points with different severity:
   - divide():         zero divisor DENOMINATOR → ZeroDivisionError (fatal fault)
   - checked_divide(): zero divisor NUMERATOR   → DivisionByZero (recoverable)
4. Division by the plain integer 0 is the same fatal fault

DISPLAY FORMAT:
    d == 1   → "{n}"
    d == -1  → "{-n}"
    else     → "{q}{r}/{d}"  with q, r from TRUNCATING division
               (remainder carries the sign of the numerator)

    Rational(7, 2)  → "31/2"
    Rational(-7, 2) → "-3-1/2"
"""

from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Union

from src.core.errors import DivisionByZero
from src.core.math.primes import gcd

Operand = Union["Rational", int]


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Quotient rounded toward zero and the matching remainder (sign of a)."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - b * q


@dataclass(frozen=True)
class Rational:
    """
    Exact rational number.

    Direct construction stores the pair as given (no reduction); use
    ``Rational.reduced`` or ``Rational.from_integer`` for normalized values.
    ``Rational()`` is zero, i.e. (0, 1).
    """

    numerator: int = 0
    denominator: int = 1

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_integer(cls, value: int) -> "Rational":
        """Integer as a rational with denominator 1."""
        return cls(value, 1)

    @classmethod
    def reduced(cls, numerator: int, denominator: int) -> "Rational":
        """Rational built from the pair and reduced to lowest terms."""
        return cls(numerator, denominator).normalize()

    # -------------------------------------------------------------------------
    # Normalization
    # -------------------------------------------------------------------------

    def normalize(self) -> "Rational":
        """
        Divide numerator and denominator by their unsigned GCD.

        Idempotent. (0, d) reduces to (0, ±1); (0, 0) is returned unchanged.

        Examples:
            >>> Rational(6, 4).normalize()
            Rational(3, 2)
            >>> Rational(3, -6).normalize()
            Rational(1, -2)
        """
        divisor = gcd(abs(self.numerator), abs(self.denominator))
        if divisor in (0, 1):
            return self
        return Rational(self.numerator // divisor, self.denominator // divisor)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: Operand) -> "Rational":
        if isinstance(other, Rational):
            return Rational(
                self.numerator * other.denominator + other.numerator * self.denominator,
                self.denominator * other.denominator,
            ).normalize()
        return Rational(self.numerator + other * self.denominator, self.denominator).normalize()

    def subtract(self, other: Operand) -> "Rational":
        if isinstance(other, Rational):
            return Rational(
                self.numerator * other.denominator - other.numerator * self.denominator,
                self.denominator * other.denominator,
            ).normalize()
        return Rational(self.numerator - other * self.denominator, self.denominator).normalize()

    def multiply(self, other: Operand) -> "Rational":
        if isinstance(other, Rational):
            return Rational(
                self.numerator * other.numerator,
                self.denominator * other.denominator,
            ).normalize()
        return Rational(self.numerator * other, self.denominator).normalize()

    def divide(self, other: Operand) -> "Rational":
        """
        Raw division.

        Partial operation: the divisor must not have a zero denominator (for a
        Rational) or be the integer 0. Violating that is a programming error
        and raises ZeroDivisionError, never a recoverable CalcError.

        A zero-valued Rational divisor with a non-zero denominator is NOT
        checked here; use checked_divide() for user-supplied divisors.

        Raises:
            ZeroDivisionError: divisor denominator is 0, or divisor is int 0
        """
        if isinstance(other, Rational):
            if other.denominator == 0:
                raise ZeroDivisionError("cannot divide by zero")
            return Rational(
                self.numerator * other.denominator,
                self.denominator * other.numerator,
            ).normalize()
        if other == 0:
            raise ZeroDivisionError("cannot divide by zero")
        return Rational(self.numerator, self.denominator * other).normalize()

    def checked_divide(self, other: "Rational") -> "Rational":
        """
        Division that reports a zero-valued divisor as a recoverable error.

        Raises:
            DivisionByZero: If other.numerator == 0
        """
        if other.numerator == 0:
            raise DivisionByZero()
        return self.divide(other)

    def negate(self) -> "Rational":
        """Flip the sign of the numerator."""
        return Rational(-self.numerator, self.denominator)

    # Operator overloads; int operands are accepted on the right-hand side only

    def __add__(self, other: Operand) -> "Rational":
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Operand) -> "Rational":
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Operand) -> "Rational":
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: Operand) -> "Rational":
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> "Rational":
        return self.negate()

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def display(self) -> str:
        """
        Result format printed by the line driver.

        Examples:
            >>> Rational(4, 1).display()
            '4'
            >>> Rational(4, -1).display()
            '-4'
            >>> Rational(7, 2).display()
            '31/2'
            >>> Rational(-7, 2).display()
            '-3-1/2'
        """
        n, d = self.numerator, self.denominator
        if d == 1:
            return f"{n}"
        if d == -1:
            return f"{-n}"
        q, r = _trunc_divmod(n, d)
        return f"{q}{r}/{d}"

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"


def product(values: Iterable[Rational]) -> Rational:
    """
    Product of a sequence of rationals (1 for an empty sequence).

    Examples:
        >>> product([Rational(1, 2), Rational(2, 3)])
        Rational(1, 3)
    """
    return reduce(Rational.multiply, values, Rational(1, 1))
