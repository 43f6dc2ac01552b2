"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Iterator

_INT_BITS = 32
_POINTER_MASK = (1 << 64) - 1
_UINT_MASK = (1 << _INT_BITS) - 1


def _to_int32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range."""
    return (value + (1 << (_INT_BITS - 1))) % (1 << _INT_BITS) - (1 << (_INT_BITS - 1))


def _to_uint32(value: int) -> int:
    """Wrap an integer to the unsigned 32-bit range."""
    return value & _UINT_MASK


def hex_digit(digit: int, kind: str = "x") -> str:
    """Return the hexadecimal character for ``digit`` (0 to 15).

    ``kind`` 'X' gives upper-case letters; anything else gives lower case.
    """
    if not 0 <= digit <= 15:
        raise ValueError(f"hex digit out of range: {digit}")
    char = "0123456789abcdef"[digit]
    return char.upper() if kind == "X" else char


def decimal_length(number: int) -> int:
    """Number of characters in the decimal text of ``number``, sign included."""
    length = 1 if number <= 0 else 0
    number = abs(number)
    while number:
        number //= 10
        length += 1
    return length


def hex_length(number: int) -> int:
    """Number of hexadecimal digits of ``number``; zero has none."""
    if number < 0:
        raise ValueError("hex_length needs a non-negative number")
    length = 0
    while number > 0:
        number //= 16
        length += 1
    return length


def _hex_text(value: int, kind: str) -> str:
    return format(value, "X" if kind == "X" else "x")


def _convert_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c needs a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def _convert_string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _convert_pointer(value: Any) -> str:
    address = 0 if value is None else operator.index(value) & _POINTER_MASK
    if not address:
        return "(nil)"
    return "0x" + _hex_text(address, "x")


def _convert_signed(value: Any) -> str:
    return str(_to_int32(operator.index(value)))


def _convert_unsigned(value: Any) -> str:
    return str(_to_uint32(operator.index(value)))


def _convert_lower_hex(value: Any) -> str:
    return _hex_text(_to_uint32(operator.index(value)), "x")


def _convert_upper_hex(value: Any) -> str:
    return _hex_text(_to_uint32(operator.index(value)), "X")


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _convert_char,
    "s": _convert_string,
    "p": _convert_pointer,
    "d": _convert_signed,
    "i": _convert_signed,
    "u": _convert_unsigned,
    "x": _convert_lower_hex,
    "X": _convert_upper_hex,
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, "")
        if spec == "%":
            yield "%"
            continue
        converter = _CONVERTERS.get(spec)
        if converter is None:
            # Unknown conversions print nothing and take no argument.
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        yield converter(value)


def format_printf(fmt: str, *args: Any) -> str:
    """Return the text that ``printf`` would write for ``fmt`` and ``args``."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)