"""
Test suite for numeric-primer

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
"""
