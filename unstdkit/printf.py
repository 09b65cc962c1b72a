"""printf-style formatting with the conversions of a small embedded printf.

Supported specifications follow ``%[flags][width][.precision][length]type``
with flags ``-+ #0``, ``*`` for width and precision, length modifiers
``hh h l ll t j z`` and the types ``d i u x X o b f F e E g G c s p %``.
Integer arguments are truncated to the size the length modifier selects
(``int`` is 32 bits, ``long`` and pointers are 64 bits).
"""

from __future__ import annotations

import numbers
import operator
import re
import sys
from typing import Any, Callable, Iterator

from .numfmt import FormatFlag, format_exponential, format_fixed, format_integer

__all__ = ["sprintf", "snprintf", "fctprintf", "printf"]

_SPEC_PATTERN = re.compile(
    r"%(?P<flags>[-+ #0]*)(?P<width>\d+|\*)?(?:(?P<dot>\.)(?P<precision>\d+|\*)?)?"
    r"(?P<length>hh|h|ll|l|t|j|z)?(?P<spec>.)?"
    r"|[^%]+",
    re.DOTALL,
)

_FLAG_CHARS = {
    "0": FormatFlag.ZEROPAD,
    "-": FormatFlag.LEFT,
    "+": FormatFlag.PLUS,
    " ": FormatFlag.SPACE,
    "#": FormatFlag.HASH,
}

_LENGTH_FLAGS = {
    "l": FormatFlag.LONG,
    "ll": FormatFlag.LONG | FormatFlag.LONG_LONG,
    "h": FormatFlag.SHORT,
    "hh": FormatFlag.SHORT | FormatFlag.CHAR,
    "t": FormatFlag.LONG,
    "j": FormatFlag.LONG,
    "z": FormatFlag.LONG,
}

_BASES = {"x": 16, "X": 16, "o": 8, "b": 2}
_POINTER_DIGITS = 16
_U64 = (1 << 64) - 1


def _as_int(arg: Any) -> int:
    try:
        return operator.index(arg)
    except TypeError:
        raise TypeError(f"an integer is required, not {type(arg).__name__}") from None


def _as_float(arg: Any) -> float:
    if not isinstance(arg, numbers.Real):
        raise TypeError(f"a real number is required, not {type(arg).__name__}")
    return float(arg)


def _as_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError("%c requires a single character")
        return arg
    return chr(_as_int(arg) & 0xFF)


def _integer_bits(flags: FormatFlag) -> int:
    if flags & (FormatFlag.LONG_LONG | FormatFlag.LONG):
        return 64
    if flags & FormatFlag.CHAR:
        return 8
    if flags & FormatFlag.SHORT:
        return 16
    return 32


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _pad(text: str, width: int, flags: FormatFlag) -> str:
    return text.ljust(width) if flags & FormatFlag.LEFT else text.rjust(width)


def _convert(spec: str, flags: FormatFlag, width: int, precision: int, take: Callable[[], Any]) -> str:
    if spec in "diuxXob":
        base = _BASES.get(spec, 10)
        if base == 10:
            flags &= ~FormatFlag.HASH
        if spec == "X":
            flags |= FormatFlag.UPPERCASE
        if spec not in "di":
            flags &= ~(FormatFlag.PLUS | FormatFlag.SPACE)
        if flags & FormatFlag.PRECISION:
            flags &= ~FormatFlag.ZEROPAD
        bits = _integer_bits(flags)
        value = _as_int(take())
        if spec in "di":
            value = _to_signed(value, bits)
            return format_integer(abs(value), value < 0, base, precision, width, flags)
        return format_integer(value & ((1 << bits) - 1), False, base, precision, width, flags)

    if spec in "fF":
        if spec == "F":
            flags |= FormatFlag.UPPERCASE
        return format_fixed(_as_float(take()), precision, width, flags)

    if spec in "eEgG":
        if spec in "gG":
            flags |= FormatFlag.ADAPT_EXP
        if spec in "EG":
            flags |= FormatFlag.UPPERCASE
        return format_exponential(_as_float(take()), precision, width, flags)

    if spec == "c":
        return _pad(_as_char(take()), width, flags)

    if spec == "s":
        text = str(take()).split("\0", 1)[0]
        if flags & FormatFlag.PRECISION:
            text = text[:precision]
        return _pad(text, width, flags)

    if spec == "p":
        arg = take()
        address = 0 if arg is None else _as_int(arg) & _U64
        flags |= FormatFlag.ZEROPAD | FormatFlag.UPPERCASE
        return format_integer(address, False, 16, precision, _POINTER_DIGITS, flags)

    # "%%" and unknown conversion characters are copied through.
    return spec


def _render(fmt: str, args: tuple) -> str:
    values: Iterator[Any] = iter(args)

    def take() -> Any:
        try:
            return next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    parts: list[str] = []
    for match in _SPEC_PATTERN.finditer(fmt):
        piece = match.group(0)
        if not piece.startswith("%"):
            parts.append(piece)
            continue

        flags = FormatFlag.NONE
        for ch in match.group("flags"):
            flags |= _FLAG_CHARS[ch]

        width = 0
        width_text = match.group("width")
        if width_text == "*":
            requested = _as_int(take())
            if requested < 0:
                flags |= FormatFlag.LEFT
                width = -requested
            else:
                width = requested
        elif width_text:
            width = int(width_text)

        precision = 0
        if match.group("dot"):
            flags |= FormatFlag.PRECISION
            precision_text = match.group("precision")
            if precision_text == "*":
                precision = max(_as_int(take()), 0)
            elif precision_text:
                precision = int(precision_text)

        length = match.group("length")
        if length:
            flags |= _LENGTH_FLAGS[length]

        spec = match.group("spec")
        if spec is None:
            break
        parts.append(_convert(spec, flags, width, precision, take))
    return "".join(parts)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` formatted with ``args``."""
    return _render(fmt, args)


def snprintf(count: int, fmt: str, *args: Any) -> tuple[str, int]:
    """Format into a buffer of ``count`` characters including the terminator.

    Returns the stored text, at most ``count - 1`` characters, and the length
    the full output would have had. A length of ``count`` or more means the
    text was truncated.
    """
    if count < 0:
        raise ValueError(f"count must not be negative: {count}")
    text = _render(fmt, args)
    stored = text[: count - 1] if count else ""
    return stored, len(text)


def fctprintf(out: Callable[[str], Any], fmt: str, *args: Any) -> int:
    """Send each formatted character to ``out``; return the output length.

    Null characters count towards the length but are not passed to ``out``.
    """
    text = _render(fmt, args)
    for ch in text:
        if ch != "\0":
            out(ch)
    return len(text)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = _render(fmt, args)
    sys.stdout.write(text.replace("\0", ""))
    return len(text)