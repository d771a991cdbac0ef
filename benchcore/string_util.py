"""String helpers: human readable numbers, formatting, splitting and C-style parsing."""

from __future__ import annotations

import re
from itertools import takewhile
from typing import Any

# kilo, Mega, Giga, Tera, Peta, Exa, Zetta, Yotta.
_BIG_SI_UNITS = "kMGTPEZY"
# Kibi, Mebi, Gibi, Tebi, Pebi, Exbi, Zebi, Yobi.
_BIG_IEC_UNITS = "KMGTPEZY"
# milli, micro, nano, pico, femto, atto, zepto, yocto.
_SMALL_SI_UNITS = "munpfazy"

# Values between this and the small threshold are printed as they are.
_SIMPLE_THRESHOLD = 0.01

_ULONG_MAX = 2**64 - 1
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"

_HEX_FLOAT = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
)
_SPECIAL_FLOAT = re.compile(
    r"[+-]?(?:inf(?:inity)?|nan(?:\([0-9A-Za-z_]*\))?)", re.IGNORECASE
)
_DECIMAL_FLOAT = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _stream_str(value: Any) -> str:
    """Render a value the way a default-configured output stream would."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _exponent_and_mantissa(
    val: float, thresh: float, precision: int, one_k: float
) -> tuple[str, int]:
    sign = ""
    if val < 0:
        sign = "-"
        val = -val

    # Never exclude values that cannot be rendered in 'precision' digits.
    adjusted = max(thresh, 1.0 / 10.0**precision)
    big_threshold = adjusted * one_k
    small_threshold = adjusted

    if val > big_threshold:
        scaled = val
        for exponent in range(1, len(_BIG_SI_UNITS) + 1):
            scaled /= one_k
            if scaled <= big_threshold:
                return sign + _stream_str(float(scaled)), exponent
    elif val < small_threshold and val < _SIMPLE_THRESHOLD:
        scaled = val
        for exponent in range(1, len(_SMALL_SI_UNITS) + 1):
            scaled *= one_k
            if scaled >= small_threshold:
                return sign + _stream_str(float(scaled)), -exponent
    return sign + _stream_str(float(val)), 0


def _exponent_to_prefix(exponent: int, iec: bool) -> str:
    if exponent == 0:
        return ""
    index = exponent - 1 if exponent > 0 else -exponent - 1
    if index >= len(_BIG_SI_UNITS):
        return ""
    if exponent > 0:
        units = _BIG_IEC_UNITS if iec else _BIG_SI_UNITS
    else:
        units = _SMALL_SI_UNITS
    return units[index] + "i" if iec else units[index]


def _to_binary_string(
    value: float, threshold: float, precision: int, one_k: float = 1024.0
) -> str:
    mantissa, exponent = _exponent_and_mantissa(value, threshold, precision, one_k)
    return mantissa + _exponent_to_prefix(exponent, False)


def append_human_readable(n: int, text: str = "") -> str:
    """Return *text* followed by *n* rounded down to the nearest SI prefix."""
    return text + _to_binary_string(n, 1.0, 0)


def human_readable_number(n: float, one_k: float = 1024.0) -> str:
    """Render *n* with an SI prefix, one decimal of precision and a 1.1 threshold."""
    return _to_binary_string(n, 1.1, 1, one_k)


def str_format(fmt: str, *args: Any) -> str:
    """Format *args* with a printf-style format string."""
    return fmt % args


def str_cat(*args: Any) -> str:
    """Concatenate the stream renderings of all arguments."""
    return "".join(_stream_str(arg) for arg in args)


def str_split(text: str, delim: str) -> list[str]:
    """Split *text* on *delim*; an empty string yields an empty list."""
    if not text:
        return []
    return text.split(delim)


def _leading_space(text: str) -> int:
    return len(text) - len(text.lstrip(_WHITESPACE))


def _digit_value(ch: str) -> int:
    if len(ch) == 1 and ch.isascii() and ch.isalnum():
        return int(ch, 36)
    return 99


def _scan_integer(text: str, base: int, func: str) -> tuple[bool, int, int]:
    """Scan an integer like strtol; return (negative, magnitude, end position)."""
    if base != 0 and not 2 <= base <= 36:
        raise ValueError(f"{func} failed: invalid base {base}")
    pos = _leading_space(text)
    negative = False
    sign = text[pos : pos + 1]
    if sign in ("+", "-"):
        negative = sign == "-"
        pos += 1
    if (
        base in (0, 16)
        and text[pos : pos + 2] in ("0x", "0X")
        and _digit_value(text[pos + 2 : pos + 3]) < 16
    ):
        base = 16
        pos += 2
    elif base == 0:
        base = 8 if text[pos : pos + 1] == "0" else 10
    digits = "".join(takewhile(lambda ch: _digit_value(ch) < base, text[pos:]))
    if not digits:
        raise ValueError(f"{func} failed: {text} is not an integer")
    return negative, int(digits, base), pos + len(digits)


def stoul(text: str, base: int = 10) -> tuple[int, int]:
    """Parse an unsigned long; return (value, number of characters consumed)."""
    negative, magnitude, end = _scan_integer(text, base, "stoul")
    if magnitude > _ULONG_MAX:
        raise OverflowError(
            f"stoul failed: {text} is outside of range of unsigned long"
        )
    value = (-magnitude) % (_ULONG_MAX + 1) if negative else magnitude
    return value, end


def stoi(text: str, base: int = 10) -> tuple[int, int]:
    """Parse an int; return (value, number of characters consumed)."""
    negative, magnitude, end = _scan_integer(text, base, "stoi")
    value = -magnitude if negative else magnitude
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"stoi failed: {text} is outside of range of int")
    return value, end


def _has_nonzero_digit(mantissa: str) -> bool:
    return any(ch.isalnum() and ch not in "0xX" for ch in mantissa)


def stod(text: str) -> tuple[float, int]:
    """Parse a double like strtod; return (value, number of characters consumed)."""
    pos = _leading_space(text)

    found = _HEX_FLOAT.match(text, pos)
    if found:
        token = found.group()
        try:
            value = float.fromhex(token)
        except OverflowError:
            raise OverflowError(
                f"stod failed: {text} is outside of range of double"
            ) from None
        mantissa = re.split(r"[pP]", token)[0]
        if value == 0.0 and _has_nonzero_digit(mantissa):
            raise OverflowError(f"stod failed: {text} is outside of range of double")
        return value, found.end()

    found = _SPECIAL_FLOAT.match(text, pos)
    if found:
        token = found.group()
        negative = token.startswith("-")
        body = token.lstrip("+-").lower()
        value = float("inf") if body.startswith("inf") else float("nan")
        return (-value if negative else value), found.end()

    found = _DECIMAL_FLOAT.match(text, pos)
    if not found:
        raise ValueError(f"stod failed: {text} is not a number")
    token = found.group()
    value = float(token)
    mantissa = re.split(r"[eE]", token)[0]
    if value in (float("inf"), float("-inf")) or (
        value == 0.0 and _has_nonzero_digit(mantissa)
    ):
        raise OverflowError(f"stod failed: {text} is outside of range of double")
    return value, found.end()