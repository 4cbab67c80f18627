"""
Input normalization for the GS1-128 encoder.

Turns a string or a pre-tokenized sequence into a flat list of elements,
one element per input character or token, order preserved:
- single characters stay single-character strings
- integer character codes (ord('1') == 49) become characters
- function code tokens become Symbol members

Nothing is rejected here. Elements that are not digits or FNC1 are passed
through untouched so validation can report them with their position.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Iterable, List, Sequence, Tuple, Union


class Symbol(str, Enum):
    """Code 128 function code tokens."""
    FNC1 = "FNC1"
    FNC2 = "FNC2"
    FNC3 = "FNC3"
    FNC4 = "FNC4"


FNC1 = Symbol.FNC1

Element = Union[str, Symbol, Any]

# AIM symbology identifier transmitted ahead of GS1-128 data
SYMBOLOGY_PREFIX = "]C1"

# "FNC1", "fnc_1", "<FNC1>", ":fnc_1"
_TOKEN_PATTERN = re.compile(r'^[<(:]?\s*fnc[_ ]?([1-4])\s*[>)]?$', re.IGNORECASE)


def parse_token(token: str):
    """Return the Symbol named by a token string, or None."""
    match = _TOKEN_PATTERN.match(token.strip())
    if not match:
        return None
    return Symbol(f"FNC{match.group(1)}")


def describe_element(element: Element) -> str:
    """Printable form of an element for error messages."""
    if isinstance(element, Symbol):
        return element.value
    if isinstance(element, str) and element.isprintable():
        return element
    return repr(element)


def _split_string(text: str, separator_tokens: Sequence[str]) -> List[Element]:
    if not separator_tokens:
        return list(text)

    # Longest token first so "<GS>" wins over "<"
    tokens = sorted(separator_tokens, key=len, reverse=True)
    elements: List[Element] = []
    pos = 0
    while pos < len(text):
        for token in tokens:
            if token and text.startswith(token, pos):
                elements.append(FNC1)
                pos += len(token)
                break
        else:
            elements.append(text[pos])
            pos += 1
    return elements


def _normalize_item(item: Any) -> Element:
    if isinstance(item, Symbol):
        return item
    if isinstance(item, str):
        if len(item) == 1:
            return item
        symbol = parse_token(item)
        return symbol if symbol is not None else item
    if isinstance(item, bool):
        return item
    if isinstance(item, int):
        try:
            return chr(item)
        except (ValueError, OverflowError):
            return item
    return item


def normalize(
    value: Union[str, Iterable[Any]],
    *,
    separator_tokens: Sequence[str] = (),
    strip_symbology: bool = False,
    strip_whitespace: bool = False,
) -> Tuple[List[Element], bool]:
    """
    Normalize encoder input into a list of elements.

    Args:
        value: Digit string, or sequence of characters / character codes /
            function code tokens
        separator_tokens: Substrings of string input to read as FNC1
        strip_symbology: Drop a leading ]C1 symbology identifier
        strip_whitespace: Trim surrounding whitespace from string input

    Returns:
        (elements, symbology_removed)
    """
    symbology_removed = False

    if isinstance(value, str):
        text = value.strip() if strip_whitespace else value
        if strip_symbology and text.startswith(SYMBOLOGY_PREFIX):
            text = text[len(SYMBOLOGY_PREFIX):]
            symbology_removed = True
        return _split_string(text, separator_tokens), symbology_removed

    if isinstance(value, (bytes, bytearray)):
        return [_normalize_item(b) for b in value], symbology_removed

    return [_normalize_item(item) for item in value], symbology_removed
