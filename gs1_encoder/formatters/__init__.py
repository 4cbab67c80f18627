"""
Output formatters for the GS1-128 encoder.
"""

from .json_formatter import (
    encode_gs1_to_json,
    encode_gs1_to_dict,
    format_symbol_json,
    format_result_dict,
)

__all__ = [
    "encode_gs1_to_json",
    "encode_gs1_to_dict",
    "format_symbol_json",
    "format_result_dict",
]
