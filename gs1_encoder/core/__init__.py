"""
Core encoding modules for the GS1-128 encoder.
"""

from .encoder import (
    encode_gs1,
    encode_gs1_or_raise,
    EncodeOptions,
    EncodeResult,
    EncodedSymbol,
    GS1Encoder,
    map_codewords,
    calculate_checksum,
    render_modules,
)
from .normalizer import normalize, Symbol, FNC1
from .code_set_c import module_pattern, pattern_widths, SYMBOLOGY_ID

__all__ = [
    "encode_gs1",
    "encode_gs1_or_raise",
    "EncodeOptions",
    "EncodeResult",
    "EncodedSymbol",
    "GS1Encoder",
    "map_codewords",
    "calculate_checksum",
    "render_modules",
    "normalize",
    "Symbol",
    "FNC1",
    "module_pattern",
    "pattern_widths",
    "SYMBOLOGY_ID",
]
