"""
CLI interface for the GS1-128 encoder.

Usage:
    python -m gs1_encoder "<digits>" [options]

Options:
    --fnc1-token TOKEN    Read TOKEN inside the value as FNC1 (repeatable)
    --strip-symbology     Drop a leading ]C1 identifier
    --json                Output as JSON
    --codewords           Show codewords and check codeword
    --check               Validate only, do not print the symbol
    --verbose             Log pipeline details to stderr
"""

import argparse
import json
import logging
import sys
from typing import Optional

from .core.encoder import EncodeOptions, EncodeResult, GS1Encoder
from .errors import ErrorCode
from .formatters.json_formatter import format_result_dict
from .validators.validators import validate_digit_pairing


def configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("gs1_encoder")
    if not verbose or logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('[%(levelname)s] %(asctime)s - %(message)s'))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def format_result(result: EncodeResult, show_codewords: bool = False) -> str:
    """Format encode result for display."""
    if not result.ok:
        error = result.error
        lines = [f"[{error.code.value}] {error.message}"]
        if error.at_index is not None:
            lines.append(f"  at index: {error.at_index}")
        return '\n'.join(lines)

    symbol = result.symbol
    if not show_codewords:
        return symbol.to_bit_string()

    lines = [
        "=" * 60,
        "GS1-128 Encode Result",
        "=" * 60,
        f"Symbology: {symbol.symbology}",
        f"Codewords: {' '.join(str(c) for c in symbol.codewords)}",
        f"Check Codeword: {symbol.checksum}",
        f"Width: {symbol.width} modules",
        "",
        symbol.to_bit_string(),
    ]
    return '\n'.join(lines)


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='gs1_encoder',
        description='Encode digit pairs and FNC1 as a GS1-128 (Code Set C) symbol'
    )

    parser.add_argument(
        'value',
        help='Digits to encode'
    )

    parser.add_argument(
        '--fnc1-token',
        action='append',
        default=[],
        metavar='TOKEN',
        help='Substring to read as FNC1, e.g. "<FNC1>" or "|" (repeatable)'
    )

    parser.add_argument(
        '--strip-symbology',
        action='store_true',
        help='Drop a leading ]C1 symbology identifier'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output result as JSON'
    )

    parser.add_argument(
        '--codewords',
        action='store_true',
        help='Show codewords and check codeword'
    )

    parser.add_argument(
        '--check',
        action='store_true',
        help='Validate only; exit code reports the outcome'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log encoding details to stderr'
    )

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    options = EncodeOptions(
        separator_tokens=frozenset(args.fnc1_token),
        strip_symbology=args.strip_symbology,
    )
    encoder = GS1Encoder(options)
    result = encoder.encode(args.value)

    if args.check:
        if result.ok:
            print("OK")
            return 0
        print(format_result(result))
        if result.error.code == ErrorCode.ODD_DIGIT_COUNT:
            pairing = validate_digit_pairing(result.elements)
            for message in pairing.errors:
                print(f"  {message}")
        return 1

    if args.json:
        output = format_result_dict(result, include_codewords=args.codewords)
        print(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        print(format_result(result, show_codewords=args.codewords))

    return 0 if result.ok else 1


if __name__ == '__main__':
    sys.exit(main())
