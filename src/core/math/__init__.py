"""
Core math modules for ratio-calc

Number-theoretic primitives used by the rational arithmetic engine.
"""

# Primes & GCD
from src.core.math.primes import (
    FIRST_PRIME,
    PrimeCache,
    gcd,
    primes,
)

__all__ = [
    # Primes — Constants
    "FIRST_PRIME",
    # Primes — Types
    "PrimeCache",
    # Primes — Functions
    "gcd",
    "primes",
]
