"""
Test suite for generic-sums

Contains:
- tests/unit/          : Unit tests for individual modules
"""
