import pytest

from pushswap.cstring import (
    strcspn,
    streq,
    strlcat,
    strlcpy,
    strchr,
    strlen,
    strncmp,
    strnstr,
    strrchr,
    strreplace,
    strspn,
    tokenize,
)


@pytest.mark.parametrize("text", ["", "a", "hello", "push swap"])
def test_strlen_matches_len(text):
    assert strlen(text) == len(text)


def test_strlen_stops_at_nul():
    assert strlen("ab\0cd") == strlen("ab")


@pytest.mark.parametrize("size", [0, 1, 3, 5, 6, 20])
def test_strlcpy_invariants(size):
    src = "hello"
    copied, length = strlcpy(src, size)
    assert length == len(src)
    assert src.startswith(copied)
    assert len(copied) == max(0, min(len(src), size - 1))


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("abc", -1)


def test_strlcat_fits():
    result, total = strlcat("push", "_swap", 20)
    assert result == "push_swap"
    assert total == len("push_swap")


@pytest.mark.parametrize("size", [5, 6, 7, 9])
def test_strlcat_truncates(size):
    result, total = strlcat("push", "_swap", size)
    assert total == len("push_swap")
    assert result.startswith("push")
    assert "push_swap".startswith(result)
    assert len(result) == min(len("push_swap"), size - 1)


def test_strlcat_small_size_keeps_dst():
    result, total = strlcat("push", "_swap", 2)
    assert result == "push"
    assert total == len("_swap") + 2


def test_strlcat_zero_size():
    assert strlcat("push", "_swap", 0) == ("push", len("_swap"))


@pytest.mark.parametrize("c", ["h", "l", "o"])
def test_strchr_first(c):
    text = "hello"
    index = strchr(text, c)
    assert text[index] == c
    assert c not in text[:index]


@pytest.mark.parametrize("c", ["h", "l", "o"])
def test_strrchr_last(c):
    text = "hello"
    index = strrchr(text, c)
    assert text[index] == c
    assert c not in text[index + 1:]


def test_strchr_missing_and_nul():
    assert strchr("hello", "z") is None
    assert strrchr("hello", "z") is None
    assert strchr("hello", "\0") == len("hello")
    assert strrchr("hello", "\0") == len("hello")


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("hello", "he")


def test_strnstr_found_within_length():
    haystack = "hello world"
    index = strnstr(haystack, "world", len(haystack))
    assert haystack[index:index + len("world")] == "world"


def test_strnstr_match_past_length():
    assert strnstr("hello world", "world", 8) is None


def test_strnstr_edge_cases():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "a", 0) is None
    assert strnstr("abc", "zz", 3) is None


def test_strncmp_signs():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("x", "y", 0) == 0
    assert strncmp("ab", "abc", 5) < 0


def test_streq():
    assert streq("pa", "pa")
    assert not streq("pa", "pb")
    assert not streq("pa", "pab")
    assert not streq("rra", "rr")


def test_strspn_and_strcspn_partition():
    text = "  \tword rest"
    lead = strspn(text, " \t")
    assert text[:lead].strip() == ""
    assert text[lead] not in " \t"
    word = strcspn(text[lead:], " ")
    assert text[lead:lead + word] == "word"
    assert strcspn("abc", "") == len("abc")
    assert strspn("abc", "") == 0


def test_tokenize():
    assert list(tokenize("  a,b  ,,c ", " ,")) == ["a", "b", "c"]
    assert list(tokenize("", " ")) == []
    assert list(tokenize("   ", " ")) == []
    assert list(tokenize("sa pb ra", " ")) == "sa pb ra".split()


def test_strreplace_rescans():
    assert strreplace("aabb", "ab", "") == ""
    assert strreplace("one two one", "one", "1") == "1 two 1"
    assert strreplace("abc", "z", "y") == "abc"


def test_strreplace_missing_args():
    assert strreplace("abc", None, "x") == "abc"
    assert strreplace("abc", "a", None) == "abc"


def test_strreplace_never_ending():
    with pytest.raises(ValueError):
        strreplace("abc", "a", "aa")
    with pytest.raises(ValueError):
        strreplace("abc", "", "x")