"""
GS1-128 Symbol Encoder (Code Set C)

Converts digit pairs and FNC1 markers into the module sequence a Code 128
renderer draws.

Pipeline:
1. Normalize input into elements (characters / function code tokens)
2. Validate: every element is a digit or FNC1
3. Map elements to codewords: digit pair -> 0-99, FNC1 -> 102,
   prefixed with Start Code C (105)
4. Append the Modulo-103 check codeword
5. Render: quiet zone, 11-module pattern per codeword, Stop, quiet zone

Checksum (Code 128):
- Start codeword has weight 1
- The n-th codeword after Start has weight n
- check = weighted sum mod 103

Output width is 10 + 11 * (2 + pairs + fnc1s) + 13 + 10 modules.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple, Union

from .code_set_c import (
    CHECKSUM_MODULUS,
    FNC1_CODEWORD,
    QUIET_ZONE,
    START_CODE_C,
    STOP_PATTERN,
    SYMBOLOGY_ID,
    module_pattern,
    pattern_widths,
)
from .normalizer import Element, describe_element, normalize
from ..errors import (
    EncodeError,
    ErrorCode,
    GS1EncodeError,
    InvalidCharacterError,
    OddDigitCountError,
    UnknownSymbolicTokenError,
    error_to_exception,
)
from ..validators.validators import (
    is_digit_element,
    is_fnc1,
    validate_elements,
)


logger = logging.getLogger(__name__)


@dataclass
class EncodeOptions:
    """
    Configuration options for encoding.

    The defaults encode exactly what was given: string input cannot carry
    FNC1 and nothing is trimmed.

    Attributes:
        separator_tokens: Substrings of string input to read as FNC1
            (e.g. '\\x1d', '<GS>', '<FNC1>')
        strip_symbology: Drop a leading ]C1 symbology identifier
        strip_whitespace: Trim surrounding whitespace from string input
    """
    separator_tokens: FrozenSet[str] = field(default_factory=frozenset)
    strip_symbology: bool = False
    strip_whitespace: bool = False


@dataclass(frozen=True)
class EncodedSymbol:
    """
    An encoded GS1-128 symbol.

    Attributes:
        symbology: Symbology tag for renderers ("D1")
        modules: Flattened module sequence, 1 = dark, 0 = light
        codewords: Start, data and check codewords in order
    """
    symbology: str
    modules: Tuple[int, ...]
    codewords: Tuple[int, ...]

    @property
    def checksum(self) -> int:
        return self.codewords[-1]

    @property
    def width(self) -> int:
        return len(self.modules)

    def to_bit_string(self) -> str:
        return ''.join(str(module) for module in self.modules)

    def bar_widths(self) -> List[Tuple[int, ...]]:
        """Bar/space widths per codeword, Start to check codeword."""
        return [pattern_widths(codeword) for codeword in self.codewords]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'symbology': self.symbology,
            'modules': list(self.modules),
            'codewords': list(self.codewords),
            'checksum': self.checksum,
            'width': self.width,
        }


@dataclass
class EncodeResult:
    """
    Complete result of encoding one value.

    Exactly one of symbol / error is set.

    Attributes:
        raw: Original input
        elements: Normalized elements
        symbology_removed: True if a ]C1 prefix was stripped
        symbol: Encoded symbol on success
        error: Error description on failure
    """
    raw: Any
    elements: List[Element] = field(default_factory=list)
    symbology_removed: bool = False
    symbol: Optional[EncodedSymbol] = None
    error: Optional[EncodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.symbol is not None

    def unwrap(self) -> EncodedSymbol:
        """Return the symbol or raise the matching GS1EncodeError."""
        if self.error is not None:
            raise error_to_exception(self.error)
        return self.symbol

    def to_dict(self) -> Dict[str, Any]:
        return {
            'raw': self.raw if isinstance(self.raw, str) else [
                describe_element(item) for item in self.raw
            ],
            'elements': [describe_element(e) for e in self.elements],
            'symbology_removed': self.symbology_removed,
            'symbol': self.symbol.to_dict() if self.symbol else None,
            'error': self.error.to_dict() if self.error else None,
        }


def map_codewords(elements: Sequence[Element]) -> List[int]:
    """
    Map validated elements to Code Set C codewords.

    Returns:
        [105, ...] with one codeword per digit pair or FNC1

    Raises:
        OddDigitCountError: a digit has no digit right after it
    """
    codewords = [START_CODE_C]
    pos = 0
    while pos < len(elements):
        element = elements[pos]
        if is_fnc1(element):
            codewords.append(FNC1_CODEWORD)
            pos += 1
            continue

        partner = elements[pos + 1] if pos + 1 < len(elements) else None
        if not (is_digit_element(element) and is_digit_element(partner)):
            raise OddDigitCountError.build(
                f"Expected FNC1 or a pair of digits at index {pos}, got "
                f"{describe_element(element)} without a digit to pair with",
                at_index=pos,
                value=describe_element(element),
            )

        codewords.append(int(element) * 10 + int(partner))
        pos += 2

    return codewords


def calculate_checksum(codewords: Sequence[int]) -> int:
    """
    Calculate the Code 128 Modulo-103 check codeword.

    Args:
        codewords: Start codeword followed by data codewords

    Returns:
        Check codeword (0-102)
    """
    if not codewords:
        raise ValueError("Checksum needs at least the start codeword")

    start, rest = codewords[0], codewords[1:]
    total = start + sum(codeword * weight for weight, codeword in enumerate(rest, 1))
    return total % CHECKSUM_MODULUS


def render_modules(codewords: Iterable[int]) -> List[int]:
    """
    Lay out the full module sequence for Start ... check codewords.

    Raises:
        LookupError: a codeword has no pattern (bug upstream)
    """
    modules = list(QUIET_ZONE)
    for codeword in codewords:
        modules.extend(module_pattern(codeword))
    modules.extend(STOP_PATTERN)
    modules.extend(QUIET_ZONE)
    return modules


def _validation_error(elements: Sequence[Element]) -> Optional[GS1EncodeError]:
    validation = validate_elements(elements)
    if validation.valid:
        return None

    error_class = (
        UnknownSymbolicTokenError
        if validation.meta['code'] == ErrorCode.UNKNOWN_SYMBOLIC_TOKEN
        else InvalidCharacterError
    )
    return error_class.build(
        validation.errors[0],
        at_index=validation.meta['index'],
        value=validation.meta['offending_value'],
    )


class GS1Encoder:
    """
    GS1-128 Code Set C encoder.

    Stateless apart from its options; one instance can encode any number
    of values from any number of threads.
    """

    def __init__(self, options: Optional[EncodeOptions] = None):
        self.options = options or EncodeOptions()

    def normalize(self, value: Union[str, Iterable[Any]]) -> Tuple[List[Element], bool]:
        return normalize(
            value,
            separator_tokens=tuple(self.options.separator_tokens),
            strip_symbology=self.options.strip_symbology,
            strip_whitespace=self.options.strip_whitespace,
        )

    def build_symbol(self, elements: Sequence[Element]) -> EncodedSymbol:
        """
        Run validation, mapping, checksum and rendering.

        Raises:
            GS1EncodeError: invalid element or unpaired digit
        """
        error = _validation_error(elements)
        if error is not None:
            raise error

        codewords = map_codewords(elements)
        checksum = calculate_checksum(codewords)
        codewords.append(checksum)
        modules = render_modules(codewords)

        logger.debug(
            "Encoded %d codewords (check %d) into %d modules",
            len(codewords), checksum, len(modules),
        )
        return EncodedSymbol(
            symbology=SYMBOLOGY_ID,
            modules=tuple(modules),
            codewords=tuple(codewords),
        )

    def encode(self, value: Union[str, Iterable[Any]]) -> EncodeResult:
        """
        Encode a value.

        Args:
            value: Digit string, or sequence of characters / character codes
                / function code tokens

        Returns:
            EncodeResult with either symbol or error set
        """
        if not isinstance(value, str):
            value = list(value)
        elements, symbology_removed = self.normalize(value)
        result = EncodeResult(
            raw=value,
            elements=elements,
            symbology_removed=symbology_removed,
        )

        try:
            result.symbol = self.build_symbol(elements)
        except GS1EncodeError as exc:
            logger.info("Rejected GS1-128 input: [%s] %s", exc.error.code.value, exc.error.message)
            result.error = exc.error

        return result


def encode_gs1(
    value: Union[str, Iterable[Any]],
    options: Optional[EncodeOptions] = None,
) -> EncodeResult:
    """
    Encode a GS1-128 value using Code Set C.

    Example:
        >>> encode_gs1("123456").symbol.codewords
        (105, 12, 34, 56, 44)
        >>> encode_gs1("").symbol.codewords
        (105, 2)
    """
    return GS1Encoder(options).encode(value)


def encode_gs1_or_raise(
    value: Union[str, Iterable[Any]],
    options: Optional[EncodeOptions] = None,
) -> EncodedSymbol:
    """
    Encode a value, raising instead of returning an error.

    Raises:
        GS1EncodeError: same error information encode_gs1() would return
    """
    return encode_gs1(value, options).unwrap()
