import pytest

from fdf.textutil import (
    split,
    strchr,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    striteri,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_skips_repeated_separators():
    assert split("  10  20 30 ", " ") == ["10", "20", "30"]


def test_split_cell_with_color():
    assert split("5,0xFF0000", ",") == ["5", "0xFF0000"]


def test_split_only_separators_is_empty():
    assert split("    ", " ") == []
    assert split("", " ") == []


def test_split_rejects_multichar_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_split_joined_back_has_no_separator():
    words = split("a,,b,c,,", ",")
    assert ",".join(words).split(",") == words
    assert all(words)


def test_strchr_first_occurrence():
    text = "hello"
    assert strchr(text, "l") == text.index("l")
    assert strchr(text, "z") is None


def test_strchr_nul_gives_end():
    assert strchr("abc", "\0") == len("abc")
    assert strchr("abc", 0) == len("abc")


def test_strchr_int_code():
    assert strchr("abc", ord("b")) == 1


def test_strrchr_last_occurrence():
    text = "hello"
    assert strrchr(text, "l") == text.rindex("l")
    assert strrchr(text, "q") is None
    assert strrchr(text, "\0") == len(text)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "") == ""


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strlcpy_truncates_and_reports_source_length():
    src = "hello"
    copy, total = strlcpy(src, 3)
    assert copy == src[:2]
    assert total == len(src)


def test_strlcpy_fits():
    src = "hi"
    assert strlcpy(src, 10) == (src, len(src))


def test_strlcpy_zero_size():
    assert strlcpy("abc", 0) == ("", 3)


def test_strlcat_appends_within_size():
    dest, src = "ab", "cdef"
    result, total = strlcat(dest, src, 5)
    assert result == dest + src[:2]
    assert total == len(dest) + len(src)
    assert len(result) == 5 - 1


def test_strlcat_dest_already_full():
    dest, src = "abcd", "xy"
    assert strlcat(dest, src, 3) == (dest, 3 + len(src))


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat("a", "b", -1)


def test_strmapi_uses_index():
    assert strmapi("abc", lambda i, c: c.upper() if i % 2 == 0 else c) == "AbC"


def test_striteri_replaces_and_keeps():
    result = striteri("abcd", lambda i, c: "x" if i == 1 else None)
    assert result == "axcd"


def test_striteri_visits_in_order():
    seen = []
    striteri("xyz", lambda i, c: seen.append((i, c)))
    assert seen == [(0, "x"), (1, "y"), (2, "z")]


def test_strncmp_equal_and_limited():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abc", "abd", 0) == 0


def test_strncmp_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strnstr_found_within_size():
    hay = "Foo Bar Baz"
    assert strnstr(hay, "Bar", len(hay)) == hay.index("Bar")


def test_strnstr_beyond_size():
    hay = "Foo Bar Baz"
    assert strnstr(hay, "Bar", 6) is None
    assert strnstr(hay, "Bar", 7) == 4


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("  a b  ", " ") == "a b"


def test_strtrim_everything_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  a  ", "") == "  a  "


def test_substr_basic_and_clipped():
    text = "hello world"
    assert substr(text, 6, 5) == text[6:]
    assert substr(text, 6, 100) == text[6:]
    assert substr(text, 0, 0) == ""


def test_substr_start_past_end():
    assert substr("abc", 3, 2) == ""
    assert substr("abc", 99, 2) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)