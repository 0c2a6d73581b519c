"""Sorting integers with two stacks and a fixed set of moves."""

__version__ = "0.1.0"