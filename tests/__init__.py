"""
Test suite for chain discovery

Contains:
- tests/unit/          : Unit tests for individual modules and the end-to-end discovery pass
"""
