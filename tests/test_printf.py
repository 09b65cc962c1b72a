import pytest

from unstdkit.numfmt import FormatFlag, format_exponential, format_integer
from unstdkit.printf import fctprintf, printf, snprintf, sprintf


def test_plain_text_passes_through():
    assert sprintf("hello world") == "hello world"


@pytest.mark.parametrize(
    "fmt, value",
    [
        ("%d", 42),
        ("%d", -42),
        ("%i", 7),
        ("%5d", 42),
        ("%-5d|", 42),
        ("%05d", 42),
        ("%05d", -42),
        ("%+d", 42),
        ("% d", 42),
        ("%.4d", 42),
        ("%x", 255),
        ("%X", 255),
        ("%#x", 42),
        ("%#08x", 42),
        ("%o", 8),
        ("%u", 1234),
    ],
)
def test_integer_conversions_match_builtin(fmt, value):
    assert sprintf(fmt, value) == fmt % value


@pytest.mark.parametrize(
    "fmt, value",
    [
        ("%.3f", 3.14159),
        ("%10.2f", 2.5),
        ("%-10.2f|", -1.25),
        ("%f", 0.1),
        ("%.0f", 7.0),
        ("%+.1f", 12.5),
        ("%e", 1234.5),
    ],
)
def test_float_conversions_match_builtin(fmt, value):
    assert sprintf(fmt, value) == fmt % value


@pytest.mark.parametrize(
    "fmt, value",
    [("%s", "text"), ("%8s", "abc"), ("%-8s|", "abc"), ("%.2s", "abcdef"), ("%c", 65), ("%3c", 66)],
)
def test_string_and_char_conversions_match_builtin(fmt, value):
    assert sprintf(fmt, value) == fmt % value


def test_percent_literal():
    assert sprintf("100%%") == "100%"


def test_binary_matches_integer_formatter():
    assert sprintf("%#b", 5) == format_integer(5, False, 2, 0, 0, FormatFlag.HASH)
    assert int(sprintf("%b", 5), 2) == 5


def test_star_width_and_precision():
    assert sprintf("%*d", 5, 42) == "%5d" % 42
    assert sprintf("%*d", -5, 42) == "%-5d" % 42
    assert sprintf("%.*f", 2, 3.14159) == "%.2f" % 3.14159
    assert sprintf("%.*s", -3, "abc") == ""


def test_length_modifiers_truncate():
    assert sprintf("%hhd", 255) == "-1"
    assert sprintf("%hu", -1) == "65535"
    assert sprintf("%u", -1) == "4294967295"
    assert int(sprintf("%lu", -1)) == (1 << 64) - 1
    assert sprintf("%lld", -5) == "%d" % -5


def test_pointer_is_sixteen_uppercase_hex_digits():
    text = sprintf("%p", 0xABC)
    assert len(text) == 16
    assert int(text, 16) == 0xABC
    assert text == text.upper()


def test_large_float_switches_to_exponent():
    assert sprintf("%f", 1e10) == format_exponential(1e10, 0, 0, FormatFlag.NONE)


def test_general_format_uses_exponential_formatter():
    assert sprintf("%g", 0.5) == format_exponential(0.5, 0, 0, FormatFlag.ADAPT_EXP)
    assert sprintf("%G", 1e-7) == format_exponential(
        1e-7, 0, 0, FormatFlag.ADAPT_EXP | FormatFlag.UPPERCASE
    )


def test_nan_text():
    assert sprintf("%f", float("nan")) == "nan"


def test_string_stops_at_null():
    assert sprintf("%s", "ab\0cd") == "ab"


def test_unknown_conversion_copies_character():
    assert sprintf("%y") == "y"


def test_trailing_percent_ends_output():
    assert sprintf("ab%") == "ab"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_non_integer_for_integer_conversion_raises():
    with pytest.raises(TypeError):
        sprintf("%d", 1.5)


def test_non_number_for_float_conversion_raises():
    with pytest.raises(TypeError):
        sprintf("%f", "1.5")


def test_snprintf_truncates_and_reports_full_length():
    full = sprintf("%d", 1234567)
    stored, needed = snprintf(5, "%d", 1234567)
    assert stored == full[:4]
    assert needed == len(full)


def test_snprintf_fits():
    stored, needed = snprintf(32, "x=%d", 9)
    assert stored == sprintf("x=%d", 9)
    assert needed == len(stored)


def test_snprintf_zero_count_stores_nothing():
    stored, needed = snprintf(0, "abc")
    assert stored == ""
    assert needed == len("abc")


def test_snprintf_negative_count_raises():
    with pytest.raises(ValueError):
        snprintf(-1, "abc")


def test_fctprintf_sends_characters():
    chars = []
    count = fctprintf(chars.append, "v=%5.2f", 1.5)
    assert "".join(chars) == sprintf("v=%5.2f", 1.5)
    assert count == len(chars)


def test_fctprintf_skips_null_characters():
    chars = []
    count = fctprintf(chars.append, "a%cb", 0)
    assert "".join(chars) == "ab"
    assert count == 3


def test_printf_writes_stdout(capsys):
    count = printf("x=%d\n", 5)
    assert capsys.readouterr().out == "x=5\n"
    assert count == len("x=5\n")