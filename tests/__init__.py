"""
Test suite for tardis

Contains:
- tests/unit/          : Unit tests for individual modules
"""
