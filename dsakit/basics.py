"""Small number and text utilities."""

from __future__ import annotations

from dataclasses import dataclass

_DIGIT_WORDS = (
    "ZERO",
    "ONE",
    "TWO",
    "THREE",
    "FOUR",
    "FIVE",
    "SIX",
    "SEVEN",
    "EIGHT",
    "NINE",
)

_VOWELS = frozenset("aeiou")

_BANNER_LINES = (
    "\t\t\t    * * * * * * * * * *",
    "\t\t\t    *                 *",
    "\t\t\t    *   *       *   *",
    "\t\t\t    *   *       *   *",
    "\t\t\t    *   *       *   *",
    "\t\t\t    *   * * * * *   *",
    "\t\t\t    *                 *",
    "\t\t\t    *                 *",
    "\t\t\t    *                 *",
    "\t\t\t    * * * * * * * * * *",
)


@dataclass(frozen=True)
class UserProfile:
    """A registered user's name and age."""

    user_name: str
    age: int


def to_binary(number: int, max_digits: int = 20) -> str:
    """Return the binary digits of ``number``, most significant first.

    At most ``max_digits`` low-order digits are produced; a number that is
    not positive yields an empty string.
    """
    remainders = []
    while number > 0 and len(remainders) < max_digits:
        number, remainder = divmod(number, 2)
        remainders.append(str(remainder))
    return "".join(reversed(remainders))


def factorial(number: int) -> int:
    """Return the product of the integers from ``number`` down to 1."""
    result = 1
    for factor in range(number, 0, -1):
        result *= factor
    return result


def digits_to_words(number: int) -> list[str]:
    """Return the English word of each decimal digit of ``number``, in order."""
    if number < 0:
        raise ValueError("number must not be negative")
    return [_DIGIT_WORDS[int(digit)] for digit in str(number)]


def count_vowels_consonants(text: str) -> tuple[int, int]:
    """Return ``(vowels, consonants)``: lower-case a, e, i, o, u against all else."""
    vowels = sum(1 for ch in text if ch in _VOWELS)
    return vowels, len(text) - vowels


def christmas_banner() -> str:
    """Return the seasonal greeting banner."""
    body = "".join(f"{line}\n" for line in _BANNER_LINES)
    return "\n\n\t\t\t\tMerry Christmas\n\n" + body + "\n\n"


def register_user(
    password: str, confirmation: str, user_name: str, age: int
) -> UserProfile:
    """Register a user once the confirmation matches the password."""
    if confirmation != password:
        raise ValueError("Invalid password")
    return UserProfile(user_name=user_name, age=age)