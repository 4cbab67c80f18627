"""
GS1-128 Code Set C Input Validation

Code Set C accepts only:
- Decimal digits 0-9, encoded two at a time
- FNC1, the GS1 field separator

Validation is a single left-to-right scan that stops at the first element
outside that set. Digit pairing is left to the codeword mapper, which
reports an odd digit count when it meets a digit without a partner.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from ..core.normalizer import FNC1, Symbol, describe_element
from ..errors import ErrorCode


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


NUMERIC = frozenset('0123456789')


def is_digit_element(element: Any) -> bool:
    return (
        isinstance(element, str)
        and not isinstance(element, Symbol)
        and element in NUMERIC
    )


def is_fnc1(element: Any) -> bool:
    return element is FNC1


def count_digits(elements: Sequence[Any]) -> int:
    """Count digit elements, ignoring FNC1 markers."""
    return sum(1 for element in elements if is_digit_element(element))


def validate_elements(elements: Sequence[Any]) -> ValidationResult:
    """
    Check that every element is a digit or FNC1.

    An empty sequence is valid. On failure the result meta holds the error
    code, the index and the printable form of the first offending element.

    Args:
        elements: Normalized elements

    Returns:
        ValidationResult
    """
    result = ValidationResult(valid=True)

    for index, element in enumerate(elements):
        if is_digit_element(element) or is_fnc1(element):
            continue

        shown = describe_element(element)
        result.valid = False
        if isinstance(element, Symbol):
            result.meta['code'] = ErrorCode.UNKNOWN_SYMBOLIC_TOKEN
            result.errors.append(
                f"Unsupported function code {shown} at index {index}. "
                f"Only FNC1 is allowed"
            )
        else:
            result.meta['code'] = ErrorCode.INVALID_CHARACTER
            result.errors.append(
                f"Invalid character found {shown} at index {index}. "
                f"Must be a digit or FNC1"
            )
        result.meta['index'] = index
        result.meta['offending_value'] = shown
        break

    return result


def validate_digit_pairing(elements: Sequence[Any]) -> ValidationResult:
    """
    Check that the digits, with FNC1 markers ignored, form complete pairs.

    A pair cannot straddle an FNC1 marker, so each run of digits between
    markers must itself be even. The first run with an odd length is
    reported.
    """
    result = ValidationResult(valid=True)
    result.meta['digit_count'] = count_digits(elements)

    run_start = 0
    run_length = 0
    for index, element in enumerate(list(elements) + [FNC1]):
        if is_fnc1(element):
            if run_length % 2:
                result.valid = False
                result.meta['code'] = ErrorCode.ODD_DIGIT_COUNT
                result.meta['index'] = run_start + run_length - 1
                result.errors.append(
                    f"Digit run starting at index {run_start} has "
                    f"{run_length} digits. Digits must come in pairs"
                )
                break
            run_start = index + 1
            run_length = 0
        else:
            run_length += 1

    return result
