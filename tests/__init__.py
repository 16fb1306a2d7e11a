"""
Test suite for ratio-calc

Contains:
- tests/unit/          : Unit tests for individual modules
"""
