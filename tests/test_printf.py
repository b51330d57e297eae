import pytest

from ftkit.printf import (
    cformat,
    format_hex,
    format_int,
    format_ptr,
    format_str,
    format_unsigned,
    printf,
)


def test_plain_text():
    assert cformat("abc def") == "abc def"


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483648])
def test_int_round_trip(n):
    assert int(cformat("%d", n)) == n
    assert cformat("%i", n) == cformat("%d", n)


def test_int_min():
    assert cformat("%d", -2147483648) == "-2147483648"


def test_int_wraps_to_32_bits():
    assert format_int(2147483648) == "-2147483648"


def test_unsigned_of_negative_wraps():
    assert int(cformat("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 9, 10, 255, 4096, 2**32 - 1])
def test_unsigned_round_trip(n):
    assert int(format_unsigned(n)) == n


@pytest.mark.parametrize("n", [0, 15, 16, 255, 48879, 2**32 - 1])
def test_hex_round_trip(n):
    text = cformat("%x", n)
    assert int(text, 16) == n
    assert text == text.lower()
    assert cformat("%X", n) == text.upper()


def test_format_hex_case():
    assert format_hex(48879, True) == format_hex(48879, False).upper()
    assert int(format_hex(48879, False), 16) == 48879


def test_string_and_null():
    assert cformat("%s!", "hi") == "hi!"
    assert cformat("%s", None) == "(null)"
    assert format_str(None) == "(null)"


def test_string_stops_at_nul():
    assert format_str("ab\0cd") == "ab"


def test_pointer_null():
    assert cformat("%p", None) == "(nil)"
    assert format_ptr(0) == "(nil)"


def test_pointer_value():
    text = format_ptr(0x7FFE1234)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0x7FFE1234


def test_char_and_percent():
    assert cformat("%c", "Z") == "Z"
    assert cformat("%c", ord("k")) == "k"
    assert cformat("100%%") == "100%"


def test_unknown_specifier_consumes_nothing():
    assert cformat("%q%d", 5) == "5"


def test_trailing_percent_dropped():
    assert cformat("ab%") == "ab"


def test_missing_argument():
    with pytest.raises(TypeError):
        cformat("%d %d", 1)


def test_wrong_argument_type():
    with pytest.raises(TypeError):
        cformat("%d", "x")


def test_printf_writes_and_counts(capfd):
    count = printf("%s=%d %c", "val", -12, "y")
    out = capfd.readouterr().out
    assert out == "val=-12 y"
    assert count == len(out)


def test_printf_null_string(capfd):
    count = printf("%s", None)
    assert capfd.readouterr().out == "(null)"
    assert count == len("(null)")