"""
Test suite for densemat

Contains:
- tests/unit/          : Unit tests for individual modules
"""
