"""Project exception type."""


class FizzpropError(Exception):
    """Raised for validation and usage errors."""
