"""
Test suite for exprstep

Contains:
- tests/unit/          : Unit tests for individual modules
"""
