import pytest

from solong.textops import (
    split,
    strchr,
    strdlen,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strdlen_stops_at_delimiter():
    assert strdlen("11111\n", "\n") == len("11111")


def test_strdlen_without_delimiter_is_length():
    text = "10C0E1"
    assert strdlen(text, "\n") == len(text)


def test_strdlen_accepts_code():
    assert strdlen("ab\ncd", 10) == strdlen("ab\ncd", "\n")


def test_strchr_finds_first():
    text = "so_long_so"
    index = strchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[:index]


def test_strchr_missing_is_none():
    assert strchr("abc", "z") is None


def test_strchr_end_marker():
    assert strchr("abc", 0) == len("abc")
    assert strrchr("abc", "\0") == len("abc")


def test_strrchr_finds_last():
    text = "so_long_so"
    index = strrchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[index + 1 :]


def test_strrchr_missing_is_none():
    assert strrchr("abc", "q") is None


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strncmp_equal():
    assert strncmp("abc", "abc", 10) == 0


def test_strncmp_limited_prefix():
    assert strncmp("abcX", "abcY", 3) == 0


def test_strncmp_difference_of_codes():
    assert strncmp("abcX", "abcY", 4) == ord("X") - ord("Y")


def test_strncmp_shorter_counts_as_zero():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_zero_length():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_negative_raises():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_found_within_bound():
    hay = "map.ber"
    index = strnstr(hay, ".ber", len(hay))
    assert hay[index : index + 4] == ".ber"


def test_strnstr_cut_by_bound():
    hay = "map.ber"
    assert strnstr(hay, ".ber", len(hay) - 1) is None


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_missing():
    assert strnstr("abc", "d", 3) is None


def test_strlcpy_full_copy():
    result, total = strlcpy("", "hello", 10)
    assert result == "hello"
    assert total == len("hello")


def test_strlcpy_truncates_leaving_room_for_terminator():
    result, total = strlcpy("", "hello", 3)
    assert result == "hello"[:2]
    assert total == len("hello")


def test_strlcpy_zero_size_keeps_destination():
    result, total = strlcpy("old", "hello", 0)
    assert result == "old"
    assert total == len("hello")


def test_strlcat_appends():
    result, total = strlcat("ab", "cd", 10)
    assert result == "ab" + "cd"
    assert total == len("abcd")


def test_strlcat_truncates():
    result, total = strlcat("ab", "cdef", 5)
    assert len(result) == 4
    assert result.startswith("ab")
    assert total == len("ab") + len("cdef")


def test_strlcat_no_room():
    result, total = strlcat("abcd", "xy", 3)
    assert result == "abcd"
    assert total == 3 + len("xy")


def test_strlcat_zero_size():
    result, total = strlcat("abc", "xy", 0)
    assert result == "abc"
    assert total == len("xy")


def test_substr_middle():
    assert substr("so_long", 3, 4) == "long"


def test_substr_clamped_to_end():
    assert substr("so_long", 3, 100) == "long"


def test_substr_start_past_end_is_empty():
    assert substr("abc", 10, 2) == ""


def test_substr_zero_length_is_empty():
    assert substr("abc", 0, 0) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_round_trip():
    joined = strjoin("11", "0P")
    assert joined[: len("11")] == "11"
    assert joined[len("11") :] == "0P"


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "a")


def test_strtrim_both_ends():
    assert strtrim("  xx hello xx ", " x") == "hello"


def test_strtrim_all_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  a  ", "") == "  a  "


def test_split_skips_empty_pieces():
    assert split("  hello   world ", " ") == ["hello", "world"]


def test_split_only_separators():
    assert split("////", "/") == []


def test_split_rejoin_invariant():
    text = "1111\n1P0C1\n1E001\n1111"
    parts = split(text, "\n")
    assert "\n".join(parts) == text


def test_split_accepts_code():
    assert split("a,b", ord(",")) == ["a", "b"]


def test_strmapi_uses_index():
    result = strmapi("abc", lambda i, ch: ch.upper() if i == 1 else ch)
    assert result == "aBc"


def test_strmapi_calls_from_last_to_first():
    order = []

    def record(i, ch):
        order.append(i)
        return ch

    assert strmapi("abcd", record) == "abcd"
    assert order == [3, 2, 1, 0]


def test_strmapi_requires_function():
    with pytest.raises(TypeError):
        strmapi("abc", None)


def test_striteri_in_order_and_replacement():
    order = []

    def visit(i, ch):
        order.append(i)
        return "_" if ch == " " else None

    assert striteri("a b c", visit) == "a_b_c"
    assert order == [0, 1, 2, 3, 4]


def test_striteri_none_keeps_text():
    assert striteri("so_long", lambda i, ch: None) == "so_long"


def test_striteri_requires_function():
    with pytest.raises(TypeError):
        striteri("abc", None)