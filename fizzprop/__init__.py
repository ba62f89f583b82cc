"""Fizz/buzz error propagation demo."""

__version__ = "0.1.0"
