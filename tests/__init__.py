"""
Test suite for numpicker

Contains:
- tests/unit/          : Unit tests for individual modules
"""
