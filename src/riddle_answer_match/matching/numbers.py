"""Numeric value extraction from digits or number words."""

import re

from riddle_answer_match.matching.normalize import normalize_for_word_match

DIGITS_RE = re.compile(r"-?\d+(?:\.\d+)?")

NUMBER_WORDS: dict[str, int] = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
    "twenty": 20,
    "thirty": 30,
    "forty": 40,
    "fifty": 50,
    "sixty": 60,
    "seventy": 70,
    "eighty": 80,
    "ninety": 90,
    "hundred": 100,
}


def parse_numeric_value(text: str) -> float | None:
    """
    Extract a number from an answer.

    Digits take precedence over words. For words, only the first recognized
    token counts: compound numbers are not summed, so "twenty one" is 20.

    Args:
        text: Raw answer text.

    Returns:
        The numeric value, or None when the answer holds no number.
    """
    normalized = normalize_for_word_match(text)
    if not normalized:
        return None

    digit_match = DIGITS_RE.search(normalized)
    if digit_match:
        return float(digit_match.group(0))

    for token in normalized.split(" "):
        if token in NUMBER_WORDS:
            return float(NUMBER_WORDS[token])

    return None
