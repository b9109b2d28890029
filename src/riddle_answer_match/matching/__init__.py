"""Synchronous answer-matching rules."""

from riddle_answer_match.matching.distance import levenshtein_distance, within_edit_tolerance
from riddle_answer_match.matching.engine import (
    explain_answer,
    is_answer_correct,
    is_close_enough,
    match_rule,
)
from riddle_answer_match.matching.normalize import normalize_for_word_match, standardize
from riddle_answer_match.matching.numbers import parse_numeric_value
from riddle_answer_match.matching.overlap import has_word_level_match

__all__ = [
    "explain_answer",
    "has_word_level_match",
    "is_answer_correct",
    "is_close_enough",
    "levenshtein_distance",
    "match_rule",
    "normalize_for_word_match",
    "parse_numeric_value",
    "standardize",
    "within_edit_tolerance",
]
