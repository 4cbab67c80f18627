"""
JSON Formatter for the GS1-128 Encoder

Provides JSON output for encoded symbols:
- Symbology tag and module sequence (as a list and as a bit string)
- Optional codewords and per-codeword bar/space widths
- Errors as {"error": {...}, "input": ...}
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, Optional, Union

from ..core.encoder import EncodedSymbol, EncodeOptions, EncodeResult, encode_gs1
from ..core.normalizer import describe_element


def format_symbol_json(
    symbol: EncodedSymbol,
    include_codewords: bool = False,
    include_widths: bool = False,
) -> Dict[str, Any]:
    """
    Build the JSON-ready dict for an encoded symbol.

    Args:
        symbol: Encoded symbol
        include_codewords: Include codewords and check codeword
        include_widths: Include bar/space widths per codeword
    """
    output: Dict[str, Any] = {
        "symbology": symbol.symbology,
        "width": symbol.width,
        "bits": symbol.to_bit_string(),
        "modules": list(symbol.modules),
    }

    if include_codewords:
        output["codewords"] = list(symbol.codewords)
        output["checksum"] = symbol.checksum

    if include_widths:
        output["bar_widths"] = [list(widths) for widths in symbol.bar_widths()]

    return output


def format_result_dict(
    result: EncodeResult,
    include_codewords: bool = False,
    include_widths: bool = False,
) -> Dict[str, Any]:
    """Dict for a result: the symbol on success, error and input otherwise."""
    if result.ok:
        return format_symbol_json(
            result.symbol,
            include_codewords=include_codewords,
            include_widths=include_widths,
        )

    raw = result.raw
    return {
        "error": result.error.to_dict(),
        "input": raw if isinstance(raw, str) else [describe_element(item) for item in raw],
    }


def encode_gs1_to_dict(
    value: Union[str, Iterable[Any]],
    include_codewords: bool = False,
    include_widths: bool = False,
    options: Optional[EncodeOptions] = None,
) -> Dict[str, Any]:
    """
    Encode a value and return a dictionary.

    Example:
        >>> data = encode_gs1_to_dict("123456", include_codewords=True)
        >>> data["codewords"], data["width"]
        ([105, 12, 34, 56, 44], 88)
    """
    result = encode_gs1(value, options)
    return format_result_dict(
        result,
        include_codewords=include_codewords,
        include_widths=include_widths,
    )


def encode_gs1_to_json(
    value: Union[str, Iterable[Any]],
    include_codewords: bool = False,
    include_widths: bool = False,
    options: Optional[EncodeOptions] = None,
) -> str:
    """
    Encode a value and return JSON.

    Returns:
        JSON string with the symbol, or with the error on failure
    """
    data = encode_gs1_to_dict(
        value,
        include_codewords=include_codewords,
        include_widths=include_widths,
        options=options,
    )
    return json.dumps(data, ensure_ascii=False, indent=2)
