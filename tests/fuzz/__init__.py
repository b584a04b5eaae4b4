"""Fuzz tests for purelex.

Intensive property tests excluded from normal runs; run with pytest -m fuzz.

Python 3.13+.
"""
