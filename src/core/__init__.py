"""
Core calendar math, domain value objects, and contracts.

This module contains the foundational building blocks: Gregorian primitives,
the ordinal-day date value, and the enums it is built from.
"""
