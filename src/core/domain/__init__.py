"""
Domain models and value objects.

Contains the exact rational number type used throughout the evaluator.
"""

from src.core.domain.rational import Rational, product

__all__ = [
    # Rational model
    "Rational",
    "product",
]
