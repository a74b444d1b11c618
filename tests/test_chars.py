import string

import pytest

from sollong.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("code", range(-5, 300))
def test_is_alpha_matches_ascii_letters(code):
    expected = 0 <= code < 128 and chr(code) in string.ascii_letters
    assert is_alpha(code) == expected


@pytest.mark.parametrize("code", range(-5, 300))
def test_is_digit_matches_ascii_digits(code):
    expected = 0 <= code < 128 and chr(code) in string.digits
    assert is_digit(code) == expected


@pytest.mark.parametrize("code", range(0, 256))
def test_is_alnum_is_union_of_alpha_and_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_string_characters_accepted():
    assert is_alpha("q") is True
    assert is_digit("7") is True
    assert is_alnum("_") is False


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


@pytest.mark.parametrize("letter", string.ascii_uppercase)
def test_case_round_trip(letter):
    lower = to_lower(letter)
    assert lower == letter.lower()
    assert to_upper(lower) == letter


@pytest.mark.parametrize("ch", "0 !@[`{~")
def test_case_mapping_leaves_non_letters(ch):
    assert to_lower(ch) == ch
    assert to_upper(ch) == ch


def test_case_mapping_keeps_int_type():
    assert to_lower(ord("Z")) == ord("z")
    assert to_upper(ord("a")) == ord("A")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  -42abc", -42),
        ("\t\n+17", 17),
        ("abc", 0),
        ("--5", 0),
        ("", 0),
        ("0099", 99),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 2147483647, -2147483648, 123456])
def test_itoa_matches_str_and_round_trips(n):
    text = itoa(n)
    assert text == str(n)
    assert atoi(text) == n