import pytest

from solong.printf import (
    decimal_length,
    format_printf,
    hex_digit,
    hex_length,
    printf,
)


@pytest.mark.parametrize("digit", range(16))
def test_hex_digit_round_trip(digit):
    assert int(hex_digit(digit, "x"), 16) == digit


@pytest.mark.parametrize("digit", range(16))
def test_hex_digit_upper_matches_lower(digit):
    assert hex_digit(digit, "X") == hex_digit(digit, "x").upper()


@pytest.mark.parametrize("digit", [-1, 16, 100])
def test_hex_digit_out_of_range(digit):
    with pytest.raises(ValueError):
        hex_digit(digit, "x")


@pytest.mark.parametrize("number", [1, 9, 10, 99, 12345, -1, -10, -2147483648, 2147483647])
def test_decimal_length_matches_text(number):
    assert decimal_length(number) == len(str(number))


def test_decimal_length_zero_has_one_digit():
    assert decimal_length(0) == len("0")


@pytest.mark.parametrize("number", [1, 15, 16, 255, 256, 4096, 2**32 - 1, 2**64 - 1])
def test_hex_length_matches_text(number):
    assert hex_length(number) == len(format(number, "x"))


def test_hex_length_zero():
    assert hex_length(0) == 0


def test_hex_length_negative_rejected():
    with pytest.raises(ValueError):
        hex_length(-1)


def test_percent_literal():
    assert format_printf("%%") == "%"


def test_null_string():
    assert format_printf("%s", None) == "(null)"


def test_string_passes_through():
    assert format_printf("[%s]", "map.ber") == "[map.ber]"


def test_nil_pointer():
    assert format_printf("%p", 0) == "(nil)"
    assert format_printf("%p", None) == "(nil)"


def test_pointer_is_prefixed_hex():
    result = format_printf("%p", 4096)
    assert result.startswith("0x")
    assert int(result[2:], 16) == 4096


def test_char_from_int_and_str():
    assert format_printf("%c", ord("A")) == "A"
    assert format_printf("%c", "z") == "z"


def test_char_needs_single_character():
    with pytest.raises(ValueError):
        format_printf("%c", "ab")


@pytest.mark.parametrize("number", [0, 7, -42, 2147483647, -2147483648])
def test_signed_round_trip(number):
    assert int(format_printf("%d", number)) == number
    assert format_printf("%i", number) == format_printf("%d", number)


def test_signed_wraps_to_32_bits():
    assert int(format_printf("%d", 2**31)) == -(2**31)


def test_unsigned_wraps_negative():
    assert int(format_printf("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("number", [1, 255, 0xABC, 2**32 - 1])
def test_hex_round_trip(number):
    lower = format_printf("%x", number)
    upper = format_printf("%X", number)
    assert int(lower, 16) == number
    assert lower == lower.lower()
    assert upper == lower.upper()


def test_hex_zero():
    assert format_printf("%x", 0) == "0"


def test_unknown_conversion_prints_nothing_and_keeps_argument():
    assert format_printf("%q%d", 5) == "5"


def test_trailing_percent_is_dropped():
    assert format_printf("ab%") == "ab"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_movement_message():
    assert format_printf("Movement Count : %i\n", 3) == "Movement Count : 3\n"


def test_printf_writes_and_counts(capsys):
    count = printf("collectible count : %i\n", 2)
    out = capsys.readouterr().out
    assert out == format_printf("collectible count : %i\n", 2)
    assert count == len(out)