"""Exceptions raised by the catalog."""


class ValidationError(ValueError):
    """Raised when a catalog call is given input it cannot accept."""
