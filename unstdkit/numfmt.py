"""Conversion of numbers to text for printf-style formatting.

Each converter builds its digits least significant first into a bounded
buffer, exactly as a fixed-size stack buffer would hold them, and then emits
them in reading order with the requested padding.
"""

from __future__ import annotations

import enum
import math
import struct

__all__ = ["FormatFlag", "format_integer", "format_fixed", "format_exponential"]

# Size of the conversion buffers; digits past this limit are dropped.
_BUFFER_SIZE = 32
_DEFAULT_FLOAT_PRECISION = 6
# Largest magnitude printed in fixed notation; larger values use exponents.
_MAX_FLOAT = 1e9
_POW10 = (1, 10, 100, 1000, 10000, 100000, 1000000, 10000000, 100000000, 1000000000)
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_U64 = (1 << 64) - 1
_U32 = (1 << 32) - 1


class FormatFlag(enum.IntFlag):
    """Flags of a conversion specification."""

    NONE = 0
    ZEROPAD = 1 << 0
    LEFT = 1 << 1
    PLUS = 1 << 2
    SPACE = 1 << 3
    HASH = 1 << 4
    UPPERCASE = 1 << 5
    CHAR = 1 << 6
    SHORT = 1 << 7
    LONG = 1 << 8
    LONG_LONG = 1 << 9
    PRECISION = 1 << 10
    ADAPT_EXP = 1 << 11


def _check_sizes(precision: int, width: int) -> None:
    if precision < 0:
        raise ValueError(f"precision must not be negative: {precision}")
    if width < 0:
        raise ValueError(f"width must not be negative: {width}")


def _emit(reversed_chars, width: int, flags: FormatFlag) -> str:
    """Render reversed characters with space padding up to ``width``."""
    body = "".join(reversed(reversed_chars))
    if flags & FormatFlag.LEFT:
        return body.ljust(width)
    if flags & FormatFlag.ZEROPAD:
        return body
    return body.rjust(width)


def _append_sign(buf: list, negative: bool, flags: FormatFlag) -> None:
    if len(buf) < _BUFFER_SIZE:
        if negative:
            buf.append("-")
        elif flags & FormatFlag.PLUS:
            buf.append("+")
        elif flags & FormatFlag.SPACE:
            buf.append(" ")


def format_integer(value: int, negative: bool, base: int, precision: int, width: int, flags) -> str:
    """Format the magnitude ``value`` in ``base``; ``negative`` adds a minus sign."""
    flags = FormatFlag(flags)
    if value < 0:
        raise ValueError(f"value must be a non-negative magnitude: {value}")
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"unsupported base: {base}")
    _check_sizes(precision, width)

    if not value:
        flags &= ~FormatFlag.HASH

    buf: list[str] = []
    if not (flags & FormatFlag.PRECISION) or value:
        digits = _DIGITS.upper() if flags & FormatFlag.UPPERCASE else _DIGITS
        while True:
            value, digit = divmod(value, base)
            buf.append(digits[digit])
            if not value or len(buf) >= _BUFFER_SIZE:
                break

    if not flags & FormatFlag.LEFT:
        if (
            width
            and flags & FormatFlag.ZEROPAD
            and (negative or flags & (FormatFlag.PLUS | FormatFlag.SPACE))
        ):
            width -= 1
        while len(buf) < precision and len(buf) < _BUFFER_SIZE:
            buf.append("0")
        while flags & FormatFlag.ZEROPAD and len(buf) < width and len(buf) < _BUFFER_SIZE:
            buf.append("0")

    if flags & FormatFlag.HASH:
        if not flags & FormatFlag.PRECISION and buf and len(buf) in (precision, width):
            buf.pop()
            if buf and base == 16:
                buf.pop()
        if len(buf) < _BUFFER_SIZE:
            if base == 16:
                buf.append("X" if flags & FormatFlag.UPPERCASE else "x")
            elif base == 2:
                buf.append("b")
        if len(buf) < _BUFFER_SIZE:
            buf.append("0")

    _append_sign(buf, negative, flags)
    return _emit(buf, width, flags)


def format_fixed(value: float, precision: int, width: int, flags) -> str:
    """Format ``value`` in fixed-point notation (``%f``)."""
    flags = FormatFlag(flags)
    value = float(value)
    _check_sizes(precision, width)

    if math.isnan(value):
        return _emit("nan"[::-1], width, flags)
    if math.isinf(value):
        if value < 0:
            return _emit("-inf"[::-1], width, flags)
        text = "+inf" if flags & FormatFlag.PLUS else "inf"
        return _emit(text[::-1], width, flags)

    if value > _MAX_FLOAT or value < -_MAX_FLOAT:
        return format_exponential(value, precision, width, flags)

    negative = value < 0
    if negative:
        value = -value

    if not flags & FormatFlag.PRECISION:
        precision = _DEFAULT_FLOAT_PRECISION

    buf: list[str] = []
    # Precision above nine would overflow the fraction; extra digits are zeros.
    while len(buf) < _BUFFER_SIZE and precision > 9:
        buf.append("0")
        precision -= 1

    whole = int(value)
    tmp = (value - whole) * _POW10[precision]
    frac = int(tmp)
    diff = tmp - frac

    if diff > 0.5:
        frac += 1
        if frac >= _POW10[precision]:
            frac = 0
            whole += 1
    elif diff < 0.5:
        pass
    elif frac == 0 or frac & 1:
        frac += 1

    if precision == 0:
        diff = value - whole
        if (not diff < 0.5 or diff > 0.5) and whole & 1:
            whole += 1
    else:
        count = precision
        while len(buf) < _BUFFER_SIZE:
            count = (count - 1) & _U32
            buf.append(_DIGITS[frac % 10])
            frac //= 10
            if not frac:
                break
        while len(buf) < _BUFFER_SIZE and count > 0:
            count -= 1
            buf.append("0")
        if len(buf) < _BUFFER_SIZE:
            buf.append(".")

    while len(buf) < _BUFFER_SIZE:
        buf.append(_DIGITS[whole % 10])
        whole //= 10
        if not whole:
            break

    if not flags & FormatFlag.LEFT and flags & FormatFlag.ZEROPAD:
        if width and (negative or flags & (FormatFlag.PLUS | FormatFlag.SPACE)):
            width -= 1
        while len(buf) < width and len(buf) < _BUFFER_SIZE:
            buf.append("0")

    _append_sign(buf, negative, flags)
    return _emit(buf, width, flags)


def _bits_of(value: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", value))[0]


def _float_of(bits: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", bits & _U64))[0]


def format_exponential(value: float, precision: int, width: int, flags) -> str:
    """Format ``value`` in exponential notation (``%e``), or ``%g`` with ADAPT_EXP."""
    flags = FormatFlag(flags)
    value = float(value)
    _check_sizes(precision, width)

    if math.isnan(value) or math.isinf(value):
        return format_fixed(value, precision, width, flags)

    negative = value < 0
    if negative:
        value = -value

    if not flags & FormatFlag.PRECISION:
        precision = _DEFAULT_FLOAT_PRECISION

    # Estimate the decimal exponent from the binary one.
    bits = _bits_of(value)
    exp2 = ((bits >> 52) & 0x7FF) - 1023
    mantissa = _float_of((bits & ((1 << 52) - 1)) | (1023 << 52))
    expval = int(0.1760912590558 + exp2 * 0.301029995663981 + (mantissa - 1.5) * 0.289529654602168)
    exp2 = int(expval * 3.321928094887362 + 0.5)
    z = expval * 2.302585092994046 - exp2 * 0.6931471805599453
    z2 = z * z
    scale = _float_of((exp2 + 1023) << 52)
    # exp(z) by continued fraction
    scale *= 1 + 2 * z / (2 - z + (z2 / (6 + (z2 / (10 + z2 / 14)))))
    if value < scale:
        expval -= 1
        scale /= 10

    minwidth = 4 if -100 < expval < 100 else 5

    if flags & FormatFlag.ADAPT_EXP:
        if 1e-4 <= value < 1e6:
            precision = precision - expval - 1 if precision > expval else 0
            flags |= FormatFlag.PRECISION
            minwidth = 0
            expval = 0
        elif precision > 0 and flags & FormatFlag.PRECISION:
            precision -= 1

    fwidth = width - minwidth if width > minwidth else 0
    if flags & FormatFlag.LEFT and minwidth:
        fwidth = 0

    if expval:
        value /= scale

    text = format_fixed(-value if negative else value, precision, fwidth, flags & ~FormatFlag.ADAPT_EXP)

    if minwidth:
        text += "E" if flags & FormatFlag.UPPERCASE else "e"
        text += format_integer(
            abs(expval), expval < 0, 10, 0, minwidth - 1, FormatFlag.ZEROPAD | FormatFlag.PLUS
        )
        if flags & FormatFlag.LEFT:
            text = text.ljust(width)
    return text