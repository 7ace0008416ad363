import pytest

from extbasics.strings import (
    ends_with,
    replace,
    section,
    split_on,
    split_on_multiple,
    starts_with,
    to_lower,
    to_upper,
)


def test_section_worked_example():
    assert section("abc", 10, "=") == "=== abc =="


@pytest.mark.parametrize("text, width", [("abc", 10), ("ab", 11), ("title", 80), ("x", 5)])
def test_section_has_requested_width_and_centres_text(text, width):
    line = section(text, width, "-")
    assert len(line) == width
    assert f" {text} " in line
    left, right = line.split(f" {text} ")
    assert set(left + right) == {"-"}
    assert len(left) - len(right) in (0, 1)


def test_section_default_width():
    assert len(section("heading")) == 80


def test_section_empty_text_fills_line():
    assert section("", 6, "*") == "*" * 6


def test_section_too_long_text_is_unchanged():
    assert section("ab", 4) == "ab"
    assert section("a long heading", 5) == "a long heading"


def test_section_rejects_multi_character_fill():
    with pytest.raises(ValueError):
        section("abc", 10, "==")


def test_case_mapping():
    assert to_upper("Hello World 1") == "HELLO WORLD 1"
    assert to_lower("Hello World 1") == "hello world 1"


def test_case_mapping_leaves_non_ascii_alone():
    assert to_upper("ä") == "ä"
    assert to_lower("Ä") == "Ä"


def test_starts_and_ends_with():
    assert starts_with("prefix-rest", "prefix")
    assert not starts_with("pre", "prefix")
    assert ends_with("rest-suffix", "suffix")
    assert not ends_with("fix", "suffix")
    assert starts_with("abc", "")


def test_split_on_drops_empty_parts():
    assert split_on("a,,b,", ",") == ["a", "b"]


def test_split_on_keeps_empty_parts():
    assert split_on("a,,b,", ",", True) == ["a", "", "b", ""]


def test_split_on_empty_separator():
    assert split_on("abc", "") == ["abc"]
    assert split_on("", "") == [""]


@pytest.mark.parametrize("text", ["a::b", "::x::", "", "no separator", "::::"])
def test_split_on_with_empty_round_trips(text):
    assert "::".join(split_on(text, "::", True)) == text


def test_replace():
    assert replace("a-b-c", "-", "+") == "a+b+c"
    assert replace("a--b", "--", "") == "ab"


def test_replace_empty_sequence_keeps_text():
    assert replace("abc", "", "x") == "abc"


@pytest.mark.parametrize("text", ["one two", "xx", "", "a x b x"])
def test_replace_agrees_with_str_replace(text):
    assert replace(text, "x", "yy") == text.replace("x", "yy")


def test_split_on_multiple_default_space():
    assert split_on_multiple("a b c") == ["a", "b", "c"]


def test_split_on_multiple_adjacent_separators_give_empty_parts():
    assert split_on_multiple("a  b") == ["a", "", "b"]
    assert split_on_multiple(" a") == ["", "a"]


def test_split_on_multiple_trailing_separator():
    assert split_on_multiple("a ") == ["a"]


def test_split_on_multiple_several_separators():
    assert split_on_multiple("a::b-c", ["::", "-"]) == ["a", "b", "c"]
    assert split_on_multiple("a::b-c", ["::", "-"], False) == ["a", "b", "c"]


def test_split_on_multiple_unmatched_long_separator():
    assert split_on_multiple("a::b:c", ["::"]) == ["a", "b:c"]


def test_split_on_multiple_no_separator_found():
    assert split_on_multiple("word", [","]) == ["word"]
    assert split_on_multiple("", [","]) == []