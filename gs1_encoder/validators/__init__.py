"""
Validation modules for the GS1-128 encoder.
"""

from .validators import (
    validate_elements,
    validate_digit_pairing,
    is_digit_element,
    is_fnc1,
    count_digits,
    ValidationResult,
    NUMERIC,
)

__all__ = [
    "validate_elements",
    "validate_digit_pairing",
    "is_digit_element",
    "is_fnc1",
    "count_digits",
    "ValidationResult",
    "NUMERIC",
]
