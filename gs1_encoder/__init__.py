"""
GS1-128 Barcode Encoder

Encodes digit pairs and FNC1 markers as GS1-128 (Code 128, Code Set C)
symbols: codewords, Modulo-103 check codeword and the module sequence
a renderer draws.

Based on ISO/IEC 15417 (Code 128) and the GS1 General Specifications.
"""

from .core.encoder import (
    encode_gs1,
    encode_gs1_or_raise,
    EncodeOptions,
    EncodeResult,
    EncodedSymbol,
    GS1Encoder,
)
from .core.normalizer import Symbol, FNC1
from .errors import (
    ErrorCode,
    EncodeError,
    GS1EncodeError,
    InvalidCharacterError,
    UnknownSymbolicTokenError,
    OddDigitCountError,
)
from .validators.validators import validate_elements, validate_digit_pairing
from .formatters.json_formatter import (
    encode_gs1_to_json,
    encode_gs1_to_dict,
)

__version__ = "1.0.0"
__all__ = [
    "encode_gs1",
    "encode_gs1_or_raise",
    "EncodeOptions",
    "EncodeResult",
    "EncodedSymbol",
    "GS1Encoder",
    "Symbol",
    "FNC1",
    "ErrorCode",
    "EncodeError",
    "GS1EncodeError",
    "InvalidCharacterError",
    "UnknownSymbolicTokenError",
    "OddDigitCountError",
    "validate_elements",
    "validate_digit_pairing",
    "encode_gs1_to_json",
    "encode_gs1_to_dict",
]
