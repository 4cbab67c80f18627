"""
Code 128 Code Set C Tables

Static codeword data for GS1-128 symbols restricted to Code Set C:
- Codewords 0-99 encode digit pairs 00-99
- Codeword 102 encodes FNC1
- Codeword 105 is Start Code C
- Every codeword is drawn as an 11-module bar/space pattern
- The Stop pattern is 13 modules (including the final 2-module bar)

Pattern reference: ISO/IEC 15417 bar/space width table.
"""

from __future__ import annotations

from typing import Final, Tuple


# Symbology tag handed to renderers (Code 128, GS1-128 subtype)
SYMBOLOGY_ID: Final = "D1"

START_CODE_C: Final = 105
FNC1_CODEWORD: Final = 102
CHECKSUM_MODULUS: Final = 103

QUIET_ZONE_MODULES: Final = 10
CODEWORD_MODULES: Final = 11
STOP_MODULES: Final = 13

QUIET_ZONE: Final[Tuple[int, ...]] = (0,) * QUIET_ZONE_MODULES
STOP_PATTERN: Final[Tuple[int, ...]] = (1, 1, 0, 0, 0, 1, 1, 1, 0, 1, 0, 1, 1)

# 1 = dark module, 0 = light module; index = codeword value
PATTERNS: Final[Tuple[str, ...]] = (
    "11011001100",  # 0
    "11001101100",  # 1
    "11001100110",  # 2
    "10010011000",  # 3
    "10010001100",  # 4
    "10001001100",  # 5
    "10011001000",  # 6
    "10011000100",  # 7
    "10001100100",  # 8
    "11001001000",  # 9
    "11001000100",  # 10
    "11000100100",  # 11
    "10110011100",  # 12
    "10011011100",  # 13
    "10011001110",  # 14
    "10111001100",  # 15
    "10011101100",  # 16
    "10011100110",  # 17
    "11001110010",  # 18
    "11001011100",  # 19
    "11001001110",  # 20
    "11011100100",  # 21
    "11001110100",  # 22
    "11101101110",  # 23
    "11101001100",  # 24
    "11100101100",  # 25
    "11100100110",  # 26
    "11101100100",  # 27
    "11100110100",  # 28
    "11100110010",  # 29
    "11011011000",  # 30
    "11011000110",  # 31
    "11000110110",  # 32
    "10100011000",  # 33
    "10001011000",  # 34
    "10001000110",  # 35
    "10110001000",  # 36
    "10001101000",  # 37
    "10001100010",  # 38
    "11010001000",  # 39
    "11000101000",  # 40
    "11000100010",  # 41
    "10110111000",  # 42
    "10110001110",  # 43
    "10001101110",  # 44
    "10111011000",  # 45
    "10111000110",  # 46
    "10001110110",  # 47
    "11101110110",  # 48
    "11010001110",  # 49
    "11000101110",  # 50
    "11011101000",  # 51
    "11011100010",  # 52
    "11011101110",  # 53
    "11101011000",  # 54
    "11101000110",  # 55
    "11100010110",  # 56
    "11101101000",  # 57
    "11101100010",  # 58
    "11100011010",  # 59
    "11101111010",  # 60
    "11001000010",  # 61
    "11110001010",  # 62
    "10100110000",  # 63
    "10100001100",  # 64
    "10010110000",  # 65
    "10010000110",  # 66
    "10000101100",  # 67
    "10000100110",  # 68
    "10110010000",  # 69
    "10110000100",  # 70
    "10011010000",  # 71
    "10011000010",  # 72
    "10000110100",  # 73
    "10000110010",  # 74
    "11000010010",  # 75
    "11001010000",  # 76
    "11110111010",  # 77
    "11000010100",  # 78
    "10001111010",  # 79
    "10100111100",  # 80
    "10010111100",  # 81
    "10010011110",  # 82
    "10111100100",  # 83
    "10011110100",  # 84
    "10011110010",  # 85
    "11110100100",  # 86
    "11110010100",  # 87
    "11110010010",  # 88
    "11011011110",  # 89
    "11011110110",  # 90
    "11110110110",  # 91
    "10101111000",  # 92
    "10100011110",  # 93
    "10001011110",  # 94
    "10111101000",  # 95
    "10111100010",  # 96
    "11110101000",  # 97
    "11110100010",  # 98
    "10111011110",  # 99
    "10111101110",  # 100 Code B
    "11101011110",  # 101 Code A
    "11110101110",  # 102 FNC1
    "11010000100",  # 103 Start A
    "11010010000",  # 104 Start B
    "11010011100",  # 105 Start C
)

_PATTERN_MODULES: Final[Tuple[Tuple[int, ...], ...]] = tuple(
    tuple(int(bit) for bit in pattern) for pattern in PATTERNS
)


def module_pattern(codeword: int) -> Tuple[int, ...]:
    """
    Return the 11-module pattern for a codeword.

    Raises:
        LookupError: codeword outside 0-105. The encoder only produces
            codewords inside this range, so hitting this is a bug upstream.
    """
    if not isinstance(codeword, int) or not 0 <= codeword < len(_PATTERN_MODULES):
        raise LookupError(f"No Code Set C pattern for codeword {codeword!r}")
    return _PATTERN_MODULES[codeword]


def pattern_widths(codeword: int) -> Tuple[int, ...]:
    """
    Return bar/space run widths for a codeword, starting with a bar.

    Every Code 128 symbol character is 3 bars and 3 spaces (6 runs)
    spanning 11 modules.
    """
    return run_lengths(module_pattern(codeword))


def run_lengths(modules: Tuple[int, ...]) -> Tuple[int, ...]:
    """Collapse a module sequence into consecutive run widths."""
    widths = []
    previous = None
    for module in modules:
        if module == previous:
            widths[-1] += 1
        else:
            widths.append(1)
            previous = module
    return tuple(widths)
