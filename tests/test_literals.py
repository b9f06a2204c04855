#
# bitsfmt - Literal Parsing Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bitsfmt.errors import UnrecognizedFormat, ValueTooLarge, WidthTooSmall
from bitsfmt.literals import HEX_BITS, OCTAL_BITS, LiteralKind, ParsedValue, pad_bits, parse_literal, parse_literals


# Tests ----------------------------------------------------------------------------------------------------------------

class TestParseLiteralKinds:
    """Classification order and digit expansion."""

    @pytest.mark.parametrize('text, bits, kind', [
        pytest.param("255", "11111111", LiteralKind.DECIMAL, id='decimal'),
        pytest.param("+5", "101", LiteralKind.DECIMAL, id='decimal_plus'),
        pytest.param("1_000", "1111101000", LiteralKind.DECIMAL, id='decimal_underscore'),
        pytest.param("1,024", "10000000000", LiteralKind.DECIMAL, id='decimal_comma'),
        pytest.param("101", "1100101", LiteralKind.DECIMAL, id='decimal_before_binary'),
        pytest.param("017", "001111", LiteralKind.OCTAL, id='octal_zero_prefix'),
        pytest.param("0o17", "001111", LiteralKind.OCTAL, id='octal_o_prefix'),
        pytest.param("0O7", "111", LiteralKind.OCTAL, id='octal_upper_o_prefix'),
        pytest.param("0", "000", LiteralKind.OCTAL, id='zero'),
        pytest.param("0101", "001000001", LiteralKind.OCTAL, id='octal_before_binary'),
        pytest.param("b101", "101", LiteralKind.BINARY, id='binary_b_prefix'),
        pytest.param("0B0011", "0011", LiteralKind.BINARY, id='binary_0b_prefix'),
        pytest.param("0x2f", "00101111", LiteralKind.HEX, id='hex_prefix'),
        pytest.param("FF", "11111111", LiteralKind.HEX, id='hex_upper'),
        pytest.param("09", "00001001", LiteralKind.HEX, id='hex_fallback'),
        pytest.param("0xC0DED", "11000000110111101101", LiteralKind.HEX, id='hex_mixed_digits'),
        pytest.param("dead_beef", "11011110101011011011111011101111", LiteralKind.HEX, id='hex_separator'),
    ])
    def test_kinds(self, text, bits, kind):
        value = parse_literal(text)
        assert value.bits == bits
        assert value.kind == kind
        assert value.width == len(bits)
        assert value.negative is False
        assert value.text == text

    @pytest.mark.parametrize('text', [
        pytest.param("", id='empty'),
        pytest.param("0x", id='bare_hex_prefix'),
        pytest.param("12.5", id='float'),
        pytest.param("-0", id='negative_zero'),
        pytest.param("+0", id='positive_zero'),
        pytest.param("0xfg", id='bad_hex_digit'),
        pytest.param("-0x1", id='negative_hex'),
        pytest.param("zz", id='letters'),
    ])
    def test_unrecognized(self, text):
        with pytest.raises(UnrecognizedFormat, match="unrecognized number format") as excinfo:
            parse_literal(text)
        assert excinfo.value.text == text
        assert excinfo.value.kind == "UnrecognizedFormat"

    def test_non_string_raises_typeerror(self):
        with pytest.raises(TypeError, match="literal must be a str"):
            parse_literal(255)


class TestParseLiteralNegative:
    """Negative decimals in minimal two's complement with a sign bit."""

    @pytest.mark.parametrize('text, bits', [
        pytest.param("-1", "1", id='minus_one'),
        pytest.param("-2", "10", id='minus_two'),
        pytest.param("-5", "1011", id='minus_five'),
        pytest.param("-128", "10000000", id='int8_min'),
        pytest.param("-129", "101111111", id='below_int8_min'),
    ])
    def test_bits(self, text, bits):
        value = parse_literal(text)
        assert value.bits == bits
        assert value.negative is True
        assert value.fill == "1"

    @pytest.mark.parametrize('v', [-1, -2, -3, -7, -8, -9, -100, -128, -129, -32768, -2 ** 31 - 1, -2 ** 63])
    def test_twos_complement_at_any_width(self, v):
        value = parse_literal(str(v))
        assert value.to_int() == v
        for width in (value.width, value.width + 1, 64, 80):
            bits = value.padded(width)
            assert len(bits) == width
            assert int(bits, 2) - (1 << width) == v


class TestParseLiteralRange:
    """Native range check for decimals."""

    @pytest.mark.parametrize('text', [
        pytest.param("18446744073709551616", id='uint64_max_plus_one'),
        pytest.param("-9223372036854775809", id='int64_min_minus_one'),
        pytest.param("1" + "0" * 30, id='huge'),
    ])
    def test_too_large(self, text):
        with pytest.raises(ValueTooLarge, match="too large") as excinfo:
            parse_literal(text)
        assert excinfo.value.text == text

    def test_uint64_max(self):
        assert parse_literal("18446744073709551615").bits == "1" * 64

    def test_int64_min(self):
        assert parse_literal("-9223372036854775808").bits == "1" + "0" * 63

    @pytest.mark.parametrize('v', [0, 1, 2, 255, 256, 1000, 2 ** 32, 2 ** 63, 2 ** 64 - 1])
    def test_non_negative_round_trip(self, v):
        value = parse_literal(str(v))
        for width in (value.width, 64, 72):
            assert int(value.padded(width), 2) == v


class TestDigitTables:

    @pytest.mark.parametrize('digits', ["0", "17", "7654321", "00"])
    def test_octal_regroups_to_digits(self, digits):
        bits = parse_literal("0o" + digits).bits
        inverse = {v: k for k, v in OCTAL_BITS.items()}
        assert "".join(inverse[bits[i:i + 3]] for i in range(0, len(bits), 3)) == digits

    @pytest.mark.parametrize('digits', ["0", "c0ded", "0123456789abcdef"])
    def test_hex_regroups_to_digits(self, digits):
        bits = parse_literal("0x" + digits).bits
        inverse = {v: k for k, v in HEX_BITS.items()}
        assert "".join(inverse[bits[i:i + 4]] for i in range(0, len(bits), 4)) == digits

    def test_binary_is_verbatim(self):
        assert parse_literal("0b0010110").bits == "0010110"


class TestPadBits:

    @pytest.mark.parametrize('text, width, expected', [
        pytest.param("5", 8, "00000101", id='zero_fill'),
        pytest.param("-2", 8, "11111110", id='one_fill'),
        pytest.param("0b11", 2, "11", id='no_fill'),
    ])
    def test_pad(self, text, width, expected):
        value = parse_literal(text)
        assert pad_bits(value, width) == expected
        assert value.padded(width) == expected

    def test_too_narrow(self):
        with pytest.raises(WidthTooSmall, match="needs 9 bits"):
            pad_bits(parse_literal("300"), 8)

    def test_immutable(self):
        value = parse_literal("5")
        value.padded(16)
        assert value.bits == "101"
        with pytest.raises(AttributeError):
            value.bits = "1"


class TestParseLiterals:

    def test_preserves_order(self):
        values = parse_literals(["0x1", "-1", "7"])
        assert [v.text for v in values] == ["0x1", "-1", "7"]
        assert all(isinstance(v, ParsedValue) for v in values)

    def test_first_error_aborts(self):
        with pytest.raises(UnrecognizedFormat):
            parse_literals(["1", "nope", "2"])
