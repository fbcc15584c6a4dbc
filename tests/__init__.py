"""
Test suite for luhn-id

Contains:
- tests/unit/          : Unit tests for individual modules
"""
