"""Errors raised by the ORID codec."""

class OridError(Exception):
    """Base error for this package."""


class OridTypeError(OridError, TypeError):
    """Raised when a non-string value is handed to the parser."""


class OridFormatError(OridError, ValueError):
    """Raised when a string is not a well-formed ORID."""
