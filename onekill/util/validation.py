"""Turn typed input into counts and check them against the deck."""

from __future__ import annotations

from enum import Enum
from re import compile as re_compile

from .probability import DECK_SIZE, is_missing

FULL_WIDTH_ZERO = 0xFF10
FULL_WIDTH_NINE = 0xFF19
ASCII_ZERO = 0x30

MAX_DIGITS = 18

# Only the characters JavaScript's parseInt skips, unlike \s
WHITESPACE = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

leading_integer = re_compile(rf"[{WHITESPACE}]*([+-]?)([0-9]+)")


class ValidationError(Enum):
    """Problem with one input field, the value is the message shown to the user."""

    NOT_A_NUMBER = "Please enter a number"
    NEGATIVE = "Please enter an integer of 0 or more"
    EXCEEDS_DECK_SIZE = f"Please enter an integer of {DECK_SIZE} or less"
    TOTAL_EXCEEDS_DECK_SIZE = f"The deck has more than {DECK_SIZE} cards"

    @property
    def message(self: ValidationError) -> str:
        """Get the message shown to the user."""
        return self.value


def normalize(raw: str) -> str:
    """Replace full-width digits with ASCII ones.

    Args:
    ----
    raw (str): Text as typed
    """
    return "".join(
        chr(ord(char) - FULL_WIDTH_ZERO + ASCII_ZERO)
        if FULL_WIDTH_ZERO <= ord(char) <= FULL_WIDTH_NINE
        else char
        for char in raw
    )


def parse_integer(text: str) -> int | None:
    """Read the integer at the start of `text`, ignoring anything after it.

    Numbers longer than `MAX_DIGITS` digits are clamped to `10 ** MAX_DIGITS`
    with their sign kept, which is still out of range for every count.

    Args:
    ----
    text (str): Text to read, usually already normalized
    """
    match = leading_integer.match(text)
    if not match:
        return None
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    value = 10**MAX_DIGITS if len(digits) > MAX_DIGITS else int(digits)
    return -value if sign == "-" else value


def validate_threshold(n: int | None) -> ValidationError | None:
    """Check the HP threshold."""
    if is_missing(n):
        return ValidationError.NOT_A_NUMBER
    if n < 0:
        return ValidationError.NEGATIVE
    return None


def validate_category_count(n: int | None) -> ValidationError | None:
    """Check the number of cards in one category."""
    if is_missing(n):
        return ValidationError.NOT_A_NUMBER
    if n < 0:
        return ValidationError.NEGATIVE
    if n > DECK_SIZE:
        return ValidationError.EXCEEDS_DECK_SIZE
    return None


def validate_total(total: int | None) -> ValidationError | None:
    """Check the deck doesn't hold more cards than allowed."""
    if not is_missing(total) and total > DECK_SIZE:
        return ValidationError.TOTAL_EXCEEDS_DECK_SIZE
    return None


def derive_other_count(low_count: int | None, high_count: int | None) -> int | None:
    """Get the number of cards that aren't basics, never below zero."""
    if is_missing(low_count) or is_missing(high_count):
        return None
    return max(DECK_SIZE - low_count - high_count, 0)


def derive_total(
    low_count: int | None, high_count: int | None, other_count: int | None
) -> int | None:
    """Add up all three categories."""
    if is_missing(low_count) or is_missing(high_count) or is_missing(other_count):
        return None
    return low_count + high_count + other_count
