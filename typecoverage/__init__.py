"""ABOUTME: Pokemon type coverage analysis package.
ABOUTME: Computes worst-case multipliers of attacking type sets against every defending typing."""

__version__ = "0.1.0"
