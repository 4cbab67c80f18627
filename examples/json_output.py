"""
Demo: JSON Output

Shows the JSON output for reference inputs, including FNC1 fields and
rejected values.
"""

from gs1_encoder import FNC1, EncodeOptions, encode_gs1, encode_gs1_to_json


def demo_json_output():
    """Demonstrate JSON output for a set of inputs."""

    print("=" * 80)
    print("  JSON OUTPUT DEMO")
    print("=" * 80)

    test_cases = [
        ("Digit pairs", "123456"),
        ("Leading FNC1", [FNC1, "1", "2", "3", "4", "5", "6"]),
        ("FNC1 between fields", [FNC1, "1", "2", "3", "4", FNC1, "5", "6"]),
        ("Empty input", ""),
        ("Odd digit count", "12345"),
        ("Unsupported function code", ["FNC2", "1", "2"]),
    ]

    for title, value in test_cases:
        print(f"\n{title}")
        print("-" * 80)
        print(f"Input: {value!r}")
        print("\nJSON Output:")
        print(encode_gs1_to_json(value, include_codewords=True))


def demo_separator_tokens():
    """Scanner-style text with GS characters read as FNC1."""

    print("\n\n" + "=" * 80)
    print("  SEPARATOR TOKENS")
    print("=" * 80)

    options = EncodeOptions(
        separator_tokens=frozenset({"\x1d", "<GS>"}),
        strip_symbology=True,
    )
    value = "]C1" + "01062850960008421729013110" + "<GS>" + "1234"
    result = encode_gs1(value, options)

    print(f"\nInput: {value!r}")
    if result.ok:
        print(f"Codewords: {list(result.symbol.codewords)}")
        print(f"Width: {result.symbol.width} modules")
    else:
        print(f"Error: {result.error.message}")


if __name__ == "__main__":
    demo_json_output()
    demo_separator_tokens()
