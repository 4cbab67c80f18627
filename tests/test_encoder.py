"""
Tests for the GS1-128 Code Set C encoder.

Ground truth module strings are taken from reference symbols and MUST
match exactly.
"""

import random

import pytest
from gs1_encoder import (
    FNC1,
    EncodeOptions,
    ErrorCode,
    GS1EncodeError,
    GS1Encoder,
    InvalidCharacterError,
    OddDigitCountError,
    Symbol,
    UnknownSymbolicTokenError,
    encode_gs1,
    encode_gs1_or_raise,
)
from gs1_encoder.core.code_set_c import (
    PATTERNS,
    QUIET_ZONE,
    STOP_PATTERN,
    module_pattern,
    pattern_widths,
)
from gs1_encoder.core.encoder import calculate_checksum, map_codewords, render_modules


def bits(text: str):
    """Turn a 0/1 string into a module tuple."""
    return tuple(int(ch) for ch in text)


def expected_width(pairs: int, fnc1s: int) -> int:
    return 10 + 11 * (2 + pairs + fnc1s) + 13 + 10


def random_digits(rng: random.Random, count: int) -> str:
    return ''.join(rng.choice('0123456789') for _ in range(count))


class TestGroundTruthSymbols:
    """Reference symbols that MUST be reproduced module for module."""

    def test_basic_encoding(self):
        """
        "123456" -> Start C, 12, 34, 56, check 44

        Check: (105 + 12*1 + 34*2 + 56*3) mod 103 = 353 mod 103 = 44
        """
        symbol = encode_gs1_or_raise("123456")

        assert symbol.modules == bits(
            "0000000000110100111001011001110010001011000111000101101000110111011000111010110000000000"
        )
        assert symbol.codewords == (105, 12, 34, 56, 44)
        assert symbol.checksum == 44
        assert symbol.width == 88
        assert symbol.symbology == "D1"

    def test_leading_fnc1(self):
        """FNC1 takes weight 1, pushing every pair one position right."""
        symbol = encode_gs1_or_raise([FNC1, "1", "2", "3", "4", "5", "6"])

        assert symbol.modules == bits(
            "000000000011010011100111101011101011001110010001011000111000101101011011100011000111010110000000000"
        )
        assert symbol.codewords == (105, 102, 12, 34, 56, 42)

    def test_fnc1_between_fields(self):
        symbol = encode_gs1_or_raise([FNC1, "1", "2", "3", "4", FNC1, "5", "6"])

        assert symbol.modules == bits(
            "00000000001101001110011110101110101100111001000101100011110101110111000101101000101111011000111010110000000000"
        )
        assert symbol.codewords == (105, 102, 12, 34, 102, 56, 94)

    def test_character_codes_match_characters(self):
        """List of character codes encodes like the equivalent string."""
        codes = [ord(ch) for ch in "123456"]

        assert encode_gs1_or_raise(codes) == encode_gs1_or_raise("123456")

    def test_empty_input(self):
        """Empty input is legal: Start, check codeword 2, Stop."""
        symbol = encode_gs1_or_raise("")

        assert symbol.codewords == (105, 2)
        assert symbol.width == 55
        assert symbol.modules == (
            QUIET_ZONE
            + bits("11010011100")
            + bits("11001100110")
            + STOP_PATTERN
            + QUIET_ZONE
        )

    def test_empty_list(self):
        assert encode_gs1_or_raise([]).codewords == (105, 2)


class TestErrors:
    """Rejected inputs produce no symbol and a descriptive error."""

    def test_odd_digit_count(self):
        result = encode_gs1("12345")

        assert not result.ok
        assert result.symbol is None
        assert result.error.code == ErrorCode.ODD_DIGIT_COUNT
        assert result.error.at_index == 4
        assert result.error.value == "5"

    def test_odd_digit_count_raises(self):
        with pytest.raises(OddDigitCountError) as exc_info:
            encode_gs1_or_raise("12345")

        assert exc_info.value.error == encode_gs1("12345").error
        assert str(exc_info.value) == exc_info.value.error.message

    def test_digit_split_by_fnc1(self):
        """A pair cannot straddle FNC1 even when the total count is even."""
        result = encode_gs1(["1", FNC1, "2"])

        assert result.error.code == ErrorCode.ODD_DIGIT_COUNT
        assert result.error.at_index == 0

    def test_non_digit_character(self):
        result = encode_gs1("12a4")

        assert result.error.code == ErrorCode.INVALID_CHARACTER
        assert result.error.at_index == 2
        assert result.error.value == "a"
        assert "a" in result.error.message

    def test_first_invalid_element_reported(self):
        result = encode_gs1("1x2y")

        assert result.error.value == "x"
        assert result.error.at_index == 1

    def test_invalid_character_wins_over_odd_count(self):
        result = encode_gs1("123x5")

        assert result.error.code == ErrorCode.INVALID_CHARACTER

    def test_unknown_function_code(self):
        result = encode_gs1([Symbol.FNC2, "1", "2", "3", "4", "5", "6"])

        assert result.error.code == ErrorCode.UNKNOWN_SYMBOLIC_TOKEN
        assert result.error.value == "FNC2"
        assert result.error.at_index == 0

    def test_unknown_function_code_raises(self):
        with pytest.raises(UnknownSymbolicTokenError):
            encode_gs1_or_raise(["1", "2", "fnc_3"])

    def test_unknown_token_is_invalid_character(self):
        """Catching InvalidCharacterError also covers unknown tokens."""
        with pytest.raises(InvalidCharacterError):
            encode_gs1_or_raise(["FNC4"])

    def test_string_cannot_embed_fnc1(self):
        """Without separator tokens, GS in a string is just a bad character."""
        result = encode_gs1("12\x1d34")

        assert result.error.code == ErrorCode.INVALID_CHARACTER
        assert result.error.value == "'\\x1d'"

    def test_multi_character_list_item(self):
        result = encode_gs1(["12", "34"])

        assert result.error.code == ErrorCode.INVALID_CHARACTER
        assert result.error.value == "12"

    def test_non_text_item(self):
        result = encode_gs1(["1", None])

        assert result.error.code == ErrorCode.INVALID_CHARACTER
        assert result.error.value == "None"

    @pytest.mark.parametrize("digit", ["٣", "１", "²"])
    def test_non_ascii_digits_rejected(self, digit):
        assert encode_gs1("1" + digit).error.code == ErrorCode.INVALID_CHARACTER

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            encode_gs1_or_raise("1")

    def test_unwrap_matches_or_raise(self):
        with pytest.raises(GS1EncodeError) as from_unwrap:
            encode_gs1("1a").unwrap()
        with pytest.raises(GS1EncodeError) as from_raise:
            encode_gs1_or_raise("1a")

        assert from_unwrap.value.error == from_raise.value.error


class TestCodewordMapping:

    def test_pairs(self):
        assert map_codewords(list("00990510")) == [105, 0, 99, 5, 10]

    def test_fnc1_anywhere(self):
        elements = [FNC1, FNC1, "4", "2", FNC1]

        assert map_codewords(elements) == [105, 102, 102, 42, 102]

    def test_empty(self):
        assert map_codewords([]) == [105]

    def test_trailing_digit(self):
        with pytest.raises(OddDigitCountError):
            map_codewords(list("123"))


class TestChecksum:

    def test_start_only(self):
        assert calculate_checksum([105]) == 2

    def test_position_weights(self):
        assert calculate_checksum([105, 12, 34, 56]) == 44

    def test_fnc1_weighted_like_data(self):
        assert calculate_checksum([105, 102, 12, 34, 56]) == 42

    def test_requires_start(self):
        with pytest.raises(ValueError):
            calculate_checksum([])

    @pytest.mark.parametrize("seed", range(20))
    def test_weighted_sum_formula(self, seed):
        rng = random.Random(seed)
        data = [rng.choice(list(range(100)) + [102]) for _ in range(rng.randint(0, 30))]
        codewords = [105] + data

        expected = (105 + sum(c * (i + 1) for i, c in enumerate(data))) % 103
        assert calculate_checksum(codewords) == expected
        assert 0 <= calculate_checksum(codewords) <= 102


class TestModuleTable:

    def test_table_is_complete(self):
        assert len(PATTERNS) == 106

    def test_patterns_are_distinct(self):
        assert len(set(PATTERNS)) == len(PATTERNS)

    @pytest.mark.parametrize("codeword", range(106))
    def test_pattern_shape(self, codeword):
        """Every symbol character: 11 modules, 3 bars, 3 spaces, bar first."""
        modules = module_pattern(codeword)
        widths = pattern_widths(codeword)

        assert len(modules) == 11
        assert modules[0] == 1
        assert modules[-1] == 0
        assert len(widths) == 6
        assert sum(widths) == 11
        assert all(1 <= width <= 4 for width in widths)

    @pytest.mark.parametrize("codeword", [-1, 106, 107, 1000, "1", None])
    def test_out_of_domain_codeword(self, codeword):
        with pytest.raises(LookupError):
            module_pattern(codeword)

    def test_render_rejects_out_of_domain(self):
        with pytest.raises(LookupError):
            render_modules([105, 200])

    def test_stop_pattern(self):
        assert STOP_PATTERN == bits("1100011101011")

    def test_start_c_pattern(self):
        assert module_pattern(105) == bits("11010011100")
        assert pattern_widths(105) == (2, 1, 1, 2, 3, 2)

    def test_fnc1_pattern(self):
        assert pattern_widths(102) == (4, 1, 1, 1, 3, 1)


class TestProperties:
    """Properties checked over seeded random inputs."""

    @pytest.mark.parametrize("seed", range(50))
    def test_even_digit_strings_encode(self, seed):
        rng = random.Random(seed)
        value = random_digits(rng, 2 * rng.randint(1, 25))

        symbol = encode_gs1_or_raise(value)

        assert symbol.width == expected_width(len(value) // 2, 0)
        assert len(symbol.codewords) == 2 + len(value) // 2
        assert symbol.codewords[1:-1] == tuple(
            int(value[i:i + 2]) for i in range(0, len(value), 2)
        )

    @pytest.mark.parametrize("seed", range(50))
    def test_odd_digit_strings_fail(self, seed):
        rng = random.Random(1000 + seed)
        value = random_digits(rng, 2 * rng.randint(0, 25) + 1)

        result = encode_gs1(value)

        assert result.error.code == ErrorCode.ODD_DIGIT_COUNT
        assert result.symbol is None

    @pytest.mark.parametrize("seed", range(30))
    def test_length_formula_with_fnc1(self, seed):
        rng = random.Random(2000 + seed)
        elements = []
        pairs = fnc1s = 0
        for _ in range(rng.randint(0, 20)):
            if rng.random() < 0.3:
                elements.append(FNC1)
                fnc1s += 1
            else:
                elements.extend(random_digits(rng, 2))
                pairs += 1

        symbol = encode_gs1_or_raise(elements)

        assert symbol.width == expected_width(pairs, fnc1s)
        assert symbol.codewords[0] == 105
        assert all(0 <= c <= 102 for c in symbol.codewords[1:])

    @pytest.mark.parametrize("seed", range(10))
    def test_deterministic(self, seed):
        rng = random.Random(3000 + seed)
        value = random_digits(rng, 2 * rng.randint(0, 20))

        assert encode_gs1_or_raise(value) == encode_gs1_or_raise(value)
        assert encode_gs1(value).symbol.modules == encode_gs1(value).symbol.modules

    @pytest.mark.parametrize("seed", range(10))
    def test_modules_are_binary_and_framed(self, seed):
        rng = random.Random(4000 + seed)
        symbol = encode_gs1_or_raise(random_digits(rng, 2 * rng.randint(0, 20)))

        assert set(symbol.modules) <= {0, 1}
        assert symbol.modules[:10] == QUIET_ZONE
        assert symbol.modules[-10:] == QUIET_ZONE
        assert symbol.modules[-23:-10] == STOP_PATTERN


class TestOptions:

    def test_separator_tokens(self):
        options = EncodeOptions(separator_tokens=frozenset({"<FNC1>", "\x1d"}))

        symbol = encode_gs1_or_raise("<FNC1>1234\x1d56", options)

        assert symbol.codewords == (105, 102, 12, 34, 102, 56, 94)

    def test_longest_separator_token_wins(self):
        options = EncodeOptions(separator_tokens=frozenset({"<", "<GS>"}))

        assert encode_gs1_or_raise("12<GS>34", options).codewords[:4] == (105, 12, 102, 34)

    def test_strip_symbology(self):
        encoder = GS1Encoder(EncodeOptions(strip_symbology=True))

        result = encoder.encode("]C1123456")

        assert result.symbology_removed
        assert result.symbol == encode_gs1_or_raise("123456")

    def test_symbology_kept_by_default(self):
        assert encode_gs1("]C1123456").error.code == ErrorCode.INVALID_CHARACTER

    def test_strip_whitespace(self):
        options = EncodeOptions(strip_whitespace=True)

        assert encode_gs1(" 123456\n", options).ok
        assert not encode_gs1(" 123456\n").ok


class TestEncodeResult:

    def test_success(self):
        result = encode_gs1("1234")

        assert result.ok
        assert result.error is None
        assert result.unwrap() is result.symbol
        assert result.raw == "1234"
        assert result.elements == ["1", "2", "3", "4"]

    def test_generator_input(self):
        result = encode_gs1(ch for ch in "1234")

        assert result.ok
        assert result.raw == ["1", "2", "3", "4"]

    def test_input_not_retained(self):
        elements = [FNC1, "1", "2"]
        symbol = encode_gs1_or_raise(elements)
        elements.append("3")

        assert symbol.codewords == (105, 102, 12, 25)

    def test_to_dict(self):
        data = encode_gs1([FNC1, "1", "2"]).to_dict()

        assert data["elements"] == ["FNC1", "1", "2"]
        assert data["symbol"]["codewords"] == [105, 102, 12, 25]
        assert data["error"] is None

    def test_error_to_dict(self):
        data = encode_gs1("123").to_dict()

        assert data["symbol"] is None
        assert data["error"]["code"] == "ODD_DIGIT_COUNT"

    def test_bit_string(self):
        symbol = encode_gs1_or_raise("")

        assert symbol.to_bit_string() == ''.join(str(m) for m in symbol.modules)

    def test_bar_widths(self):
        symbol = encode_gs1_or_raise("12")

        assert symbol.bar_widths() == [pattern_widths(c) for c in symbol.codewords]
