"""
Error types for the GS1-128 encoder.

Every encode failure is described by an EncodeError record. Pipeline stages
raise GS1EncodeError subclasses carrying that record; encode_gs1() turns them
back into an EncodeResult so callers can choose between checking a result
and catching an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Error codes."""
    INVALID_CHARACTER = "INVALID_CHARACTER"
    UNKNOWN_SYMBOLIC_TOKEN = "UNKNOWN_SYMBOLIC_TOKEN"
    ODD_DIGIT_COUNT = "ODD_DIGIT_COUNT"


@dataclass(frozen=True)
class EncodeError:
    """
    Describes why an input could not be encoded.

    Attributes:
        code: Error code
        message: Human-readable description
        at_index: Position of the offending element (if any)
        value: Printable form of the offending element (if any)
    """
    code: ErrorCode
    message: str
    at_index: Optional[int] = None
    value: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'code': self.code.value,
            'message': self.message,
            'at_index': self.at_index,
            'value': self.value,
        }


class GS1EncodeError(ValueError):
    """Raised when a value cannot be encoded as a GS1-128 symbol."""

    code = ErrorCode.INVALID_CHARACTER

    def __init__(self, error: EncodeError):
        super().__init__(error.message)
        self.error = error

    @classmethod
    def build(
        cls,
        message: str,
        at_index: Optional[int] = None,
        value: Optional[str] = None,
    ) -> "GS1EncodeError":
        return cls(EncodeError(
            code=cls.code,
            message=message,
            at_index=at_index,
            value=value,
        ))


class InvalidCharacterError(GS1EncodeError):
    code = ErrorCode.INVALID_CHARACTER


class UnknownSymbolicTokenError(InvalidCharacterError):
    code = ErrorCode.UNKNOWN_SYMBOLIC_TOKEN


class OddDigitCountError(GS1EncodeError):
    code = ErrorCode.ODD_DIGIT_COUNT


_ERROR_CLASSES = {
    ErrorCode.INVALID_CHARACTER: InvalidCharacterError,
    ErrorCode.UNKNOWN_SYMBOLIC_TOKEN: UnknownSymbolicTokenError,
    ErrorCode.ODD_DIGIT_COUNT: OddDigitCountError,
}


def error_to_exception(error: EncodeError) -> GS1EncodeError:
    """Build the exception matching an EncodeError's code."""
    return _ERROR_CLASSES.get(error.code, GS1EncodeError)(error)
