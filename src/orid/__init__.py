"""Object Resource IDentifiers: generate, validate and parse ``orid:1:`` strings."""

from .errors import OridError, OridFormatError, OridTypeError
from .records import OridRecord
from .v1 import PREFIX, generate, is_valid, parse

__all__ = [
    "OridError",
    "OridFormatError",
    "OridRecord",
    "OridTypeError",
    "PREFIX",
    "generate",
    "is_valid",
    "parse",
]
