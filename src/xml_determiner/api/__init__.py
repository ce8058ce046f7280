"""Public validation API."""

from .validator import XMLDeterminer, validate_file, validate_string

__all__ = ["XMLDeterminer", "validate_file", "validate_string"]
