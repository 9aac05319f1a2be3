"""Algorithms on integers and integer sequences, with a check runner."""

__version__ = "0.1.0"