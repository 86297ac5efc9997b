"""
Test suite for psi-numerics

Contains:
- tests/unit/          : Unit tests for individual modules
"""
