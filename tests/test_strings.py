import pytest

from ftkit.chars import toupper
from ftkit.cstring import atoi
from ftkit.strings import itoa, split, strjoin, strmapi, striteri, strtrim, substr


def test_substr_within_bounds():
    s = "hello world"
    assert substr(s, 6, 5) == s[6:11]
    assert substr(s, 0, 100) == s
    assert len(substr(s, 3, 4)) == 4


def test_substr_start_past_end():
    s = "hello"
    assert substr(s, len(s) + 1, 3) == ""
    assert substr(s, len(s), 3) == ""


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_substr_none():
    with pytest.raises(TypeError):
        substr(None, 0, 1)


def test_strjoin():
    a, b = "foo", "bar baz"
    joined = strjoin(a, b)
    assert joined == a + b
    assert len(joined) == len(a) + len(b)


def test_strjoin_none():
    with pytest.raises(TypeError):
        strjoin("a", None)


def test_strtrim_invariants():
    s = "-*-keep*this-*"
    charset = "-*"
    trimmed = strtrim(s, charset)
    assert trimmed in s
    assert trimmed[0] not in charset
    assert trimmed[-1] not in charset
    assert s.startswith("-*-") and trimmed == s[3:-2]


def test_strtrim_everything_removed():
    assert strtrim("xxxx", "x") == ""


def test_strtrim_empty_set_keeps_string():
    s = "  padded  "
    assert strtrim(s, "") == s


def test_split_words():
    assert split("  a  bc d ", " ") == ["a", "bc", "d"]


def test_split_invariants():
    s = ",,one,,two,three,,"
    words = split(s, ",")
    assert all(words)
    assert all("," not in word for word in words)
    assert "".join(words) == s.replace(",", "")


def test_split_int_separator_and_empty():
    s = "a;b"
    assert split(s, ord(";")) == split(s, ";")
    assert split("", ";") == []


def test_split_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


@pytest.mark.parametrize("n", [0, 7, -7, 42, 2147483647, -2147483648])
def test_itoa_round_trip(n):
    text = itoa(n)
    assert atoi(text) == n
    assert int(text) == n


def test_itoa_pinned_values():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")


def test_striteri_bytearray_stops_at_nul():
    buffer = bytearray(b"abc\0def")
    seen = []

    def upper(index, value):
        seen.append(index)
        return toupper(value)

    striteri(buffer, upper)
    assert buffer[:3] == b"abc".upper()
    assert buffer[3:] == b"\0def"
    assert seen == list(range(3))


def test_striteri_list_keeps_items_on_none():
    letters = list("word")
    striteri(letters, lambda index, ch: None)
    assert letters == list("word")


def test_strmapi():
    s = "mixed Case"
    assert strmapi(s, lambda index, ch: toupper(ch)) == s.upper()
    assert strmapi(s, lambda index, ch: ch) == s


def test_strmapi_indices_and_none():
    seen = []
    s = "abcd"
    strmapi(s, lambda index, ch: seen.append(index) or ch)
    assert seen == list(range(len(s)))
    assert strmapi(None, lambda index, ch: ch) == ""