"""
Vibrating value conversion: text to scalar, and scalar type to display name.

Scope
- parse_value(type, text) -> (value, ok): convert one command-line token into
  the destination type. Numeric conversions are all-or-nothing: the whole token
  must be consumed, so "12abc" is rejected rather than read as 12.
- type_name(type) -> str: the short token shown in usage output.

Supported destination types
- int     → "int"     C base-0 integer notation (decimal, 0x hex, leading-0 octal)
- uint    → "uint"    same notation, minus sign rejected
- single  → "float"   decimal/exponent/hex-float/inf/nan, rounded to 32 bits
- float   → "double"  same notation at full precision
- str     → "string"  verbatim, always succeeds

Anything else renders as "unknown" and cannot be converted.
"""
import math
import re
import struct


class uint(int):
    """
    Marker type for unsigned integer destinations (values are stored as int).
    """
    __slots__ = ()


class single(float):
    """
    Marker type for single-precision destinations (values are stored as float).
    """
    __slots__ = ()


_INTEGER = re.compile(r"([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEXADECIMAL = re.compile(r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?")
_SPECIAL = re.compile(r"[+-]?(?:inf(?:inity)?|nan)", re.IGNORECASE)


def _parse_integer(text):
    if not (match := _INTEGER.fullmatch(text)):
        raise ValueError("invalid integer literal: %r" % text)
    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        radix = 16
    elif digits[:1] == "0":
        radix = 8
    else:
        radix = 10
    value = int(digits, radix)
    return -value if sign == "-" else value


def _parse_unsigned(text):
    if text.startswith("-"):
        raise ValueError("negative value for unsigned integer: %r" % text)
    return _parse_integer(text)


def _parse_double(text):
    if _DECIMAL.fullmatch(text) or _SPECIAL.fullmatch(text):
        return float(text)
    if _HEXADECIMAL.fullmatch(text):
        return float.fromhex(text)
    raise ValueError("invalid floating-point literal: %r" % text)


def _parse_single(text):
    value = _parse_double(text)
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        # Out of single range: saturate like strtof does.
        return math.copysign(math.inf, value)


def _parse_text(text):
    return text


_CONVERTERS = {
    int: (_parse_integer, "int"),
    uint: (_parse_unsigned, "uint"),
    single: (_parse_single, "float"),
    float: (_parse_double, "double"),
    str: (_parse_text, "string"),
}


def supports(type, /):
    """
    Return True when values of `type` can be converted from text.

    Lookup is by exact type: bool is an int subclass but is not a value type.
    """
    return type in _CONVERTERS


def type_name(type, /):
    """
    Return the display token for a destination type ("unknown" when unsupported).
    """
    try:
        return _CONVERTERS[type][1]
    except (KeyError, TypeError):
        return "unknown"


def parse_value(type, text, /):
    """
    Convert `text` into a value of `type`.

    Parameters
    - type: one of int, uint, single, float, str.
    - text: the raw token. No surrounding whitespace or digit separators are
      accepted for numbers, and an empty token is never a number.

    Returns
    - tuple[value, bool]: (converted value, True) on success, (None, False)
      when the text is not a complete literal of the requested type.

    Raises
    - TypeError: `type` is not a supported destination type.
    """
    try:
        converter, _ = _CONVERTERS[type]
    except (KeyError, TypeError):
        raise TypeError("parse_value() does not support type %r" % (type,)) from None
    if not isinstance(text, str):
        raise TypeError("parse_value() text must be a string")
    try:
        return converter(text), True
    except ValueError:
        return None, False


__all__ = (
    "uint",
    "single",
    "supports",
    "type_name",
    "parse_value",
)
