"""
Test suite for QUASI

Contains:
- tests/unit/          : Unit tests for individual modules
"""
