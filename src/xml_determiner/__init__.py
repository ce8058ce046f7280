"""XML Determiner.

A strict yes/no well-formedness check for a restricted XML dialect: element
tags, one optional prolog, comments and the five canonical character escapes.

Progressive API Disclosure:
- Level 0: Core predicate - determine_xml()
- Level 1: Simple functions - validate_string(), validate_file()
- Level 2: Configured validator - XMLDeterminer class
"""

__version__ = "0.1.0"
__author__ = "XML Determiner Team"

# Level 0: Core predicate
from .scanning import determine_xml

# Level 1 and 2: Validation API
from .api import XMLDeterminer, validate_file, validate_string

# Configuration and result objects
from .shared.config import ValidatorConfig
from .shared.result import ValidationResult

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Core predicate
    "determine_xml",

    # Simple validation functions
    "validate_string",
    "validate_file",

    # Configured validator
    "XMLDeterminer",

    # Configuration and result objects
    "ValidatorConfig",
    "ValidationResult",
]
