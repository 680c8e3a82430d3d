import pytest

from solong.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("code", range(128))
def test_classification_matches_ascii_semantics(code):
    ch = chr(code)
    assert is_alpha(code) == ch.isalpha()
    assert is_digit(code) == ch.isdigit()
    assert is_alnum(code) == ch.isalnum()
    assert is_print(code) == ch.isprintable()


def test_classification_accepts_strings():
    assert is_alpha("q") and not is_alpha("5")
    assert is_digit("7") and not is_digit("x")
    assert is_alnum("Z") and not is_alnum("-")


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_non_ascii_letters_are_not_alpha():
    assert not is_alpha("é")
    assert not is_print(200)


def test_single_character_required():
    with pytest.raises(ValueError):
        is_alpha("ab")


@pytest.mark.parametrize("letter", "abcdefghijklmnopqrstuvwxyz")
def test_case_round_trip(letter):
    upper = to_upper(letter)
    assert upper == letter.upper()
    assert to_lower(upper) == letter


def test_case_conversion_keeps_type():
    assert to_upper(ord("m")) == ord("M")
    assert to_lower(ord("M")) == ord("m")


@pytest.mark.parametrize("ch", "0123456789 !@[`{~")
def test_case_conversion_leaves_non_letters(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


@pytest.mark.parametrize("n", [0, 7, 42, -42, 123456, -99999])
def test_atoi_round_trip(n):
    assert atoi(str(n)) == n


def test_atoi_skips_whitespace_and_stops_at_junk():
    assert atoi(" \t\n\v\f\r-17xyz") == -17
    assert atoi("+5") == 5
    assert atoi("12 34") == 12


def test_atoi_without_digits():
    assert atoi("") == 0
    assert atoi("--5") == 0
    assert atoi("abc") == 0