"""
Test suite for balanced_ternary

Contains:
- tests/unit/          : Unit tests for individual modules
"""
