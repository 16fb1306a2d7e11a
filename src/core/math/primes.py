"""
Primes — Shared Prime Cache & Trial-Division GCD

Module provides:
- PrimeCache: append-only, strictly ascending list of primes, grown on demand
  by trial division against the primes already known
- primes(): lazy infinite prime sequence, restarting at index 0 on every call
  but backed by the shared process-wide cache
- gcd(): greatest common divisor by dividing out common prime factors

CRITICAL INVARIANTS:
1. Cache is always strictly ascending and duplicate-free
2. First cached prime is always 2
3. Entries are never removed; the process-wide cache lives as long as the process
4. Every lookup (including cache extension) holds the cache lock
"""

import itertools
import threading
from typing import Final, Iterator

from src.core.logging_config import get_logger

logger = get_logger(__name__)

# First prime, seeded on the first lookup
FIRST_PRIME: Final[int] = 2


# =============================================================================
# PRIME CACHE
# =============================================================================


class PrimeCache:
    """
    Memoized ascending sequence of primes.

    Lookups are serialized by a mutex held for the whole lookup, so two threads
    can never compute and append the same missing prime twice.
    """

    def __init__(self):
        self._primes: list[int] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._primes)

    def snapshot(self) -> tuple[int, ...]:
        """Immutable copy of the primes cached so far."""
        with self._lock:
            return tuple(self._primes)

    def prime_at(self, index: int) -> int:
        """
        Prime at position ``index`` (0 → 2, 1 → 3, 2 → 5, ...).

        Returns the cached value or extends the cache until ``index`` is covered.

        Args:
            index: Zero-based position in the prime sequence

        Returns:
            The prime at that position

        Raises:
            ValueError: If index is negative

        Examples:
            >>> PrimeCache().prime_at(4)
            11
        """
        if index < 0:
            raise ValueError(f"index must be non-negative, got {index}")

        with self._lock:
            if not self._primes:
                self._primes.append(FIRST_PRIME)

            while len(self._primes) <= index:
                prime = self._next_prime()
                self._primes.append(prime)
                logger.debug("prime cache extended: #%d = %d", len(self._primes) - 1, prime)

            return self._primes[index]

    def _next_prime(self) -> int:
        # Caller holds the lock
        candidate = self._primes[-1] + 1
        while not self._is_prime(candidate):
            candidate += 1
        return candidate

    def _is_prime(self, candidate: int) -> bool:
        for p in self._primes:
            if p * p > candidate:
                return True
            if candidate % p == 0:
                return False
        return True


# Process-wide cache shared by every gcd() call
_PRIME_CACHE = PrimeCache()


def primes(cache: PrimeCache | None = None) -> Iterator[int]:
    """
    Lazy infinite sequence of ascending primes.

    Restarts from index 0 on every call; consumers may stop at any point
    without exhausting it.

    Args:
        cache: Cache to read through (default: process-wide cache)

    Yields:
        2, 3, 5, 7, 11, ...
    """
    source = _PRIME_CACHE if cache is None else cache
    for index in itertools.count():
        yield source.prime_at(index)


# =============================================================================
# GCD
# =============================================================================


def gcd(a: int, b: int, cache: PrimeCache | None = None) -> int:
    """
    Greatest common divisor of two non-negative integers.

    Walks the prime sequence and divides every shared prime factor out of both
    values into the result. Stops once the prime exceeds what is left of the
    smaller value.

    gcd(0, n) == n and gcd(0, 0) == 0, as for Euclid's algorithm.

    Args:
        a: Non-negative integer
        b: Non-negative integer
        cache: Prime cache to use (default: process-wide cache)

    Returns:
        gcd(a, b)

    Raises:
        ValueError: If a or b is negative

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(7, 5)
        1
        >>> gcd(0, 9)
        9
    """
    if a < 0 or b < 0:
        raise ValueError(f"gcd arguments must be non-negative, got ({a}, {b})")

    lowest = min(a, b)
    highest = max(a, b)

    if lowest == 0:
        return highest

    result = 1
    for p in primes(cache):
        if lowest // p < 1:
            break

        while lowest % p == 0 and highest % p == 0:
            highest //= p
            lowest //= p
            result *= p

    return result
