"""
Test suite for daydate

Contains:
- tests/unit/          : Unit tests for calendar math, domain values, contracts and DateOps
"""
