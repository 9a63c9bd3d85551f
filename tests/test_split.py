import pytest

from minishell.split import split, split_mult


def test_split_simple_command():
    assert split("ls -l", " ") == ["ls", "-l"]


def test_split_drops_empty_words():
    assert split("  ls   -l  ", " ") == ["ls", "-l"]


def test_split_single_character_last_word():
    assert split("a b", " ") == ["a", "b"]


def test_split_empty_and_only_separators():
    assert split("", " ") == []
    assert split("     ", " ") == []


def test_split_no_separator_present():
    assert split("hello", ",") == ["hello"]


def test_split_nul_separator_keeps_whole_text():
    assert split("echo hi", "\0") == ["echo hi"]
    assert split("", "\0") == []


@pytest.mark.parametrize("sep", ["", "ab"])
def test_split_rejects_bad_separator(sep):
    with pytest.raises(ValueError):
        split("a b", sep)


@pytest.mark.parametrize(
    "text",
    ["a,b,,c", ",,x,", "one", ",,,", "x,y,z"],
)
def test_split_words_contain_no_separator_and_rejoin(text):
    words = split(text, ",")
    assert all(words)
    assert all("," not in w for w in words)
    assert "".join(words) == text.replace(",", "")


def test_split_mult_several_delimiters():
    assert split_mult("ls\t-l | wc", " \t|") == ["ls", "-l", "wc"]


def test_split_mult_empty_charset_is_one_word():
    assert split_mult("echo hi", "") == ["echo hi"]
    assert split_mult("", "") == []


def test_split_mult_single_delimiter_matches_split():
    text = "  cat  file.txt  "
    assert split_mult(text, " ") == split(text, " ")


@pytest.mark.parametrize("text", ["a;b:c", ";;:", "abc", ":a::b;"])
def test_split_mult_words_are_free_of_delimiters(text):
    words = split_mult(text, ";:")
    assert all(words)
    assert all(";" not in w and ":" not in w for w in words)
    assert "".join(words) == text.replace(";", "").replace(":", "")