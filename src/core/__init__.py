"""
Core domain models, mathematical primitives, and errors.

This module contains the foundational building blocks that are independent
of how expressions are read or printed (line driver, streams, etc.).
"""
