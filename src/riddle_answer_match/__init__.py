"""Riddle Answer Match - fuzzy and semantic checking of free-text riddle answers."""

from riddle_answer_match.matcher import (
    AnswerMatcher,
    get_semantic_similarity,
    is_answer_correct_with_ai,
)
from riddle_answer_match.matching.engine import is_answer_correct

__all__ = [
    "AnswerMatcher",
    "get_semantic_similarity",
    "is_answer_correct",
    "is_answer_correct_with_ai",
]
__version__ = "0.1.0"
