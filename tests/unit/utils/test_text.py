"""Unit tests for :mod:`modex.utils.text`."""

import random
import string

import pytest

from modex.utils import text

# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


def test_trimmed_strips_whitespace_and_newlines():
    assert text.trimmed("  \n Hello World \t\n") == "Hello World"


def test_without_spaces_keeps_other_whitespace():
    assert text.without_spaces("a b\tc\nd e") == "ab\tc\nde"


def test_removing_characters():
    assert text.removing_characters("Hello, World!", string.punctuation) == "Hello World"
    assert text.removing_characters("abc", "") == "abc"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("hello world", "helloWorld"),
        ("Hello Big WORLD", "helloBigWorld"),
        ("  hello   world", "helloWorld"),
        ("single", "single"),
        ("", ""),
        ("   ", ""),
    ],
)
def test_camel_cased(value, expected):
    assert text.camel_cased(value) == expected


def test_snake_cased():
    assert text.snake_cased("Hello Big World") == "hello_big_world"


def test_reversed_string():
    assert text.reversed_string("abc") == "cba"
    assert text.reversed_string("") == ""


@pytest.mark.parametrize(
    ("value", "expected"),
    [("hello", "Hello"), ("hELLO", "HELLO"), ("", ""), ("1abc", "1abc")],
)
def test_capitalizing_first_letter(value, expected):
    assert text.capitalizing_first_letter(value) == expected


def test_localized_falls_back_to_input_without_catalog():
    assert text.localized("Hello") == "Hello"


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "value", ["123", "-12", "+3.5", "0.5", ".5", "5.", "1e10", "2.5E-3"]
)
def test_is_numeric_accepts_decimal_numbers(value):
    assert text.is_numeric(value)


@pytest.mark.parametrize(
    "value",
    ["", "abc", "1,000", "1,5", " 12", "12 ", "12\n", "nan", "inf", "1e", "--1", "."],
)
def test_is_numeric_rejects_everything_else(value):
    assert not text.is_numeric(value)


@pytest.mark.parametrize("value", ["١٢٣", "１２", "৩.৫", "1e٣"])
def test_is_numeric_only_accepts_ascii_digits(value):
    assert not text.is_numeric(value)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("test@example.com", True),
        ("first.last+tag@sub.example.co", True),
        ("invalid-email", False),
        ("a@b", False),
        ("@example.com", False),
        ("a b@example.com", False),
        ("test@example.com\n", False),
    ],
)
def test_is_valid_email(value, expected):
    assert text.is_valid_email(value) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("https://www.example.com", True),
        ("https://example.com/path?q=1#frag", True),
        ("mailto:someone@example.com", True),
        ("not a url", False),
        ("", False),
        ("http://[::1", False),
    ],
)
def test_is_valid_url(value, expected):
    assert text.is_valid_url(value) is expected


def test_contains_checks():
    assert text.contains_korean("안녕하세요 hello")
    assert not text.contains_korean("hello")
    assert text.contains_english("안녕 a")
    assert not text.contains_english("12345")
    assert text.contains_number("abc1")
    assert not text.contains_number("abc")


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------


def test_phone_number_strips_plus_dash_and_whitespace():
    assert text.phone_number("+1 234-567-890") == "1234567890"
    assert text.phone_number("010-1234-5678") == "01012345678"


def test_only_numbers_and_only_letters():
    assert text.only_numbers("a1b2c3") == "123"
    assert text.only_letters("a1b2c3") == "abc"
    assert text.only_letters("안녕1") == "안녕"


@pytest.mark.parametrize(
    ("value", "length", "trailing", "expected"),
    [
        ("Hello, this is a long text", 10, "...", "Hello, thi..."),
        ("short", 10, "...", "short"),
        ("exactly10!", 10, "...", "exactly10!"),
        ("abcdef", 3, "~", "abc~"),
        ("abcdef", 5, "......", "abcde......"),
    ],
)
def test_truncated(value, length, trailing, expected):
    assert text.truncated(value, length, trailing) == expected


# ---------------------------------------------------------------------------
# Masking
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("value", "count", "expected"),
    [
        ("1234567890", 4, "123456****"),
        ("1234", 4, "1234"),
        ("1234", 10, "1234"),
        ("1234", 0, "1234"),
        ("1234", -1, "1234"),
    ],
)
def test_masking_last(value, count, expected):
    assert text.masking_last(value, count) == expected


@pytest.mark.parametrize(
    ("start", "end", "expected"),
    [
        (2, 7, "he*****orld"),
        (0, 0, "hello world"),
        (0, 11, "***********"),
        (-1, 3, "hello world"),
        (5, 20, "hello world"),
        (6, 4, "hello world"),
    ],
)
def test_masking_range(start, end, expected):
    assert text.masking_range("hello world", start, end) == expected


def test_masking_range_custom_character():
    assert text.masking_range("hello world", 2, 7, "#") == "he#####orld"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("test@example.com", "te**@example.com"),
        ("a@example.com", "a@example.com"),
        ("abc@example.com", "a**@example.com"),
        ("no-at-sign", "no-at-sign"),
        ("two@@signs", "two@@signs"),
        ("@example.com", "@example.com"),
    ],
)
def test_masking_email(value, expected):
    assert text.masking_email(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("010-1234-5678", "010-****-5678"),
        ("01012345678", "010-****-5678"),
        ("123-4567", "123-****-4567"),
        ("12345", "12345"),
    ],
)
def test_masking_phone(value, expected):
    assert text.masking_phone(value) == expected


# ---------------------------------------------------------------------------
# Misc
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("value", "expected"),
    [("Hello World", 2), ("  one\ntwo\t three  ", 3), ("", 0), ("   ", 0)],
)
def test_word_count(value, expected):
    assert text.word_count(value) == expected


def test_random_string_length_and_alphabet():
    value = text.random_string(32)
    assert len(value) == 32
    assert set(value) <= set(text.ALPHANUMERIC)


def test_random_string_default_length():
    assert len(text.random_string()) == 8


def test_random_string_non_positive_length():
    assert text.random_string(0) == ""
    assert text.random_string(-3) == ""


def test_random_string_is_reproducible_with_seeded_rng():
    assert text.random_string(12, random.Random(7)) == text.random_string(
        12, random.Random(7)
    )
