"""Synchronous accept/reject decision for riddle answers."""

import logging
from collections.abc import Callable, Iterable

from riddle_answer_match.matching.distance import within_edit_tolerance
from riddle_answer_match.matching.normalize import singularize, standardize
from riddle_answer_match.matching.numbers import parse_numeric_value
from riddle_answer_match.matching.overlap import has_word_level_match
from riddle_answer_match.types import MatchDecision, RuleName

logger = logging.getLogger(__name__)


def exact_match(user_answer: str, correct_answer: str) -> bool:
    """Compact forms are identical."""
    return standardize(user_answer) == standardize(correct_answer)


def singular_match(user_answer: str, correct_answer: str) -> bool:
    """Compact forms are identical once simple plurals are folded."""
    return singularize(standardize(user_answer)) == singularize(standardize(correct_answer))


def numeric_match(user_answer: str, correct_answer: str) -> bool:
    """Both sides hold the same number, written as digits or words."""
    user_number = parse_numeric_value(user_answer)
    correct_number = parse_numeric_value(correct_answer)
    return user_number is not None and correct_number is not None and user_number == correct_number


RULES: tuple[tuple[RuleName, Callable[[str, str], bool]], ...] = (
    ("exact", exact_match),
    ("singular", singular_match),
    ("numeric", numeric_match),
    ("word_overlap", has_word_level_match),
    ("edit_distance", within_edit_tolerance),
)


def match_rule(user_answer: str, correct_answer: str) -> RuleName | None:
    """
    Evaluate the rule chain for one candidate.

    Args:
        user_answer: Raw submission.
        correct_answer: Raw candidate answer.

    Returns:
        Name of the first rule that accepts, or None.
    """
    if not standardize(user_answer) or not standardize(correct_answer):
        return None

    for name, rule in RULES:
        if rule(user_answer, correct_answer):
            logger.debug(f"Rule {name} accepted {user_answer!r} for {correct_answer!r}")
            return name
    return None


def is_close_enough(user_answer: str, correct_answer: str) -> bool:
    """Return True if the submission matches a single candidate answer."""
    return match_rule(user_answer, correct_answer) is not None


def candidate_answers(correct_answer: str, alternate_answers: Iterable[str] | None = None) -> list[str]:
    """Canonical answer followed by alternates, with empty entries dropped."""
    return [answer for answer in [correct_answer, *(alternate_answers or [])] if answer]


def explain_answer(
    user_input: str,
    correct_answer: str,
    alternate_answers: Iterable[str] | None = None,
) -> MatchDecision:
    """
    Check a submission against every candidate and report what accepted it.

    Args:
        user_input: Raw submission.
        correct_answer: The riddle's canonical answer.
        alternate_answers: Other accepted answers.

    Returns:
        MatchDecision naming the first accepting candidate and rule.
    """
    for candidate in candidate_answers(correct_answer, alternate_answers):
        rule = match_rule(user_input, candidate)
        if rule is not None:
            return {"accepted": True, "candidate": candidate, "rule": rule}
    return {"accepted": False, "candidate": None, "rule": None}


def is_answer_correct(
    user_input: str,
    correct_answer: str,
    alternate_answers: Iterable[str] | None = None,
) -> bool:
    """Return True if the submission matches the canonical answer or any alternate."""
    return any(
        is_close_enough(user_input, candidate)
        for candidate in candidate_answers(correct_answer, alternate_answers)
    )
