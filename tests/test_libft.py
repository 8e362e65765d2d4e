import string

import pytest

from fractol import libft


@pytest.mark.parametrize(
    "text, expected",
    [
        ("-2.0", -2.0),
        ("1.2", 1.2),
        ("  \t+1.0", 1.0),
        ("0.5", 0.5),
        ("3", 3.0),
        ("-1.25xyz", -1.25),
    ],
)
def test_atof_parses_numbers(text, expected):
    assert libft.atof(text) == pytest.approx(expected)


def test_atof_without_digits_is_zero():
    assert libft.atof("abc") == 0.0
    assert libft.atof("") == 0.0


def test_atof_negative_sign_applies_to_fraction():
    assert libft.atof("-.5") == pytest.approx(-0.5)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -17", -17),
        ("+8abc", 8),
        ("\n\v12", 12),
        ("", 0),
        ("x12", 0),
    ],
)
def test_atoi(text, expected):
    assert libft.atoi(text) == expected


def test_atoi_only_one_sign():
    assert libft.atoi("+-5") == 0
    assert libft.atoi("--5") == 0


def test_itoa_min_int():
    assert libft.itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -99999, 2147483647])
def test_itoa_atoi_round_trip(n):
    assert libft.atoi(libft.itoa(n)) == n


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        libft.itoa(1.5)


def test_split_skips_empty_words():
    assert libft.split(",,a,b,,c,", ",") == ["a", "b", "c"]


def test_split_empty_and_only_separators():
    assert libft.split("", " ") == []
    assert libft.split("   ", " ") == []


def test_split_join_invariant():
    text = "one two  three"
    words = libft.split(text, " ")
    assert " ".join(words) == "one two three"
    assert all(" " not in w and w for w in words)


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        libft.split("a--b", "--")


def test_strtrim():
    assert libft.strtrim("xxhelloxyx", "xy") == "hello"
    assert libft.strtrim("hello", "") == "hello"
    assert libft.strtrim("aaaa", "a") == ""


def test_substr():
    assert libft.substr("fractol", 0, 5) == "fract"
    assert libft.substr("fractol", 5, 100) == "ol"
    assert libft.substr("fractol", 7, 3) == ""
    assert libft.substr("fractol", 50, 3) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        libft.substr("abc", -1, 2)
    with pytest.raises(ValueError):
        libft.substr("abc", 0, -2)


def test_strnstr():
    assert libft.strnstr("mandelbrot", "", 0) == 0
    assert libft.strnstr("mandelbrot", "brot", 10) == 6
    assert libft.strnstr("mandelbrot", "brot", 9) is None
    assert libft.strnstr("mandelbrot", "zz", 10) is None


def test_strncmp_sign_and_equality():
    assert libft.strncmp("abc", "abc", 10) == 0
    assert libft.strncmp("abcx", "abcy", 3) == 0
    assert libft.strncmp("abd", "abc", 3) > 0
    assert libft.strncmp("ab", "abc", 3) < 0
    assert libft.strncmp("x", "y", 0) == 0


def test_strncmp_antisymmetric():
    assert libft.strncmp("left", "right", 5) == -libft.strncmp("right", "left", 5)


def test_character_classes_match_ascii_sets():
    for code in range(0, 200):
        ch = chr(code)
        assert libft.isalpha(code) == (ch in string.ascii_letters)
        assert libft.isdigit(code) == (ch in string.digits)
        assert libft.isalnum(code) == (ch in string.ascii_letters + string.digits)
        assert libft.isascii(code) == (code <= 127)
        assert libft.isprint(code) == (32 <= code < 127)


def test_character_classes_accept_strings():
    assert libft.isalpha("q") is True
    assert libft.isdigit("q") is False
    assert libft.isprint(" ") is True


def test_character_class_rejects_long_string():
    with pytest.raises(ValueError):
        libft.isalpha("ab")


def test_case_conversion():
    assert libft.toupper("a") == "A"
    assert libft.tolower("Z") == "z"
    assert libft.toupper("1") == "1"
    assert libft.toupper(ord("m")) == ord("M")
    assert libft.tolower(ord("{")) == ord("{")


def test_case_round_trip():
    for ch in string.ascii_lowercase:
        assert libft.tolower(libft.toupper(ch)) == ch
        assert libft.toupper(ch) == ch.upper()