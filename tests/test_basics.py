import math

import pytest

from dsakit.basics import (
    UserProfile,
    christmas_banner,
    count_vowels_consonants,
    digits_to_words,
    factorial,
    register_user,
    to_binary,
)


@pytest.mark.parametrize("number", [1, 2, 7, 10, 255, 1024, 99999])
def test_to_binary_round_trip(number):
    digits = to_binary(number)
    assert int(digits, 2) == number
    assert digits.startswith("1")
    assert set(digits) <= {"0", "1"}


@pytest.mark.parametrize("number", [0, -5])
def test_to_binary_non_positive(number):
    assert to_binary(number) == ""


def test_to_binary_truncates_to_max_digits():
    number = 2**20 + 5
    digits = to_binary(number)
    assert len(digits) == 20
    assert int(digits, 2) == number % 2**20


def test_to_binary_custom_limit():
    digits = to_binary(1023, max_digits=4)
    assert digits == "1111"


@pytest.mark.parametrize("number", range(0, 12))
def test_factorial_matches_math(number):
    assert factorial(number) == math.factorial(number)


def test_factorial_negative_is_one():
    assert factorial(-3) == 1


def test_digits_to_words_all_digits():
    assert digits_to_words(1234567890) == [
        "ONE",
        "TWO",
        "THREE",
        "FOUR",
        "FIVE",
        "SIX",
        "SEVEN",
        "EIGHT",
        "NINE",
        "ZERO",
    ]


def test_digits_to_words_zero():
    assert digits_to_words(0) == ["ZERO"]


def test_digits_to_words_negative():
    with pytest.raises(ValueError):
        digits_to_words(-12)


@pytest.mark.parametrize("text", ["language", "hello world", "", "AEIOU xyz"])
def test_counts_cover_every_character(text):
    vowels, consonants = count_vowels_consonants(text)
    assert vowels + consonants == len(text)
    assert vowels == sum(text.count(v) for v in "aeiou")


def test_only_lowercase_vowels_count():
    assert count_vowels_consonants("aeiou") == (5, 0)
    assert count_vowels_consonants("AEIOU") == (0, 5)


def test_christmas_banner_content():
    banner = christmas_banner()
    assert "\t\t\t\tMerry Christmas\n" in banner
    assert banner.count("\t\t\t    * * * * * * * * * *\n") == 2
    assert banner.endswith("\n\n")


def test_register_user_matching():
    password = "password"
    profile = register_user(
        password=password, confirmation=password, user_name="alice", age=30
    )
    assert profile == UserProfile(user_name="alice", age=30)


def test_register_user_mismatch():
    password = "password"
    with pytest.raises(ValueError):
        register_user(
            password=password, confirmation="secret", user_name="bob", age=41
        )