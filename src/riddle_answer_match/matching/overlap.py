"""Word-level overlap heuristics between a submission and a candidate answer."""

import re

from riddle_answer_match.matching.normalize import normalize_for_word_match

MIN_CANDIDATE_OVERLAP = 0.85
MIN_USER_OVERLAP = 0.65
# Extra tokens tolerated around a candidate phrase quoted inside a longer answer
MAX_EXTRA_PHRASE_WORDS = 3


def word_match_reason(user_answer: str, correct_answer: str) -> str | None:
    """
    Run the word-overlap checks in order and report which one accepted.

    Checks, first match wins:
        "equal": identical after word-preserving normalization.
        "subset": several user words, all of them in the candidate.
        "headword": one user word that is the candidate's only or last word.
        "overlap": intersection covers >= 85% of the candidate's distinct
            words and >= 65% of the user's.
        "phrase": the whole candidate phrase appears word-bounded inside a
            multi-word answer at most three tokens longer than the candidate.

    Args:
        user_answer: Raw submission.
        correct_answer: Raw candidate answer.

    Returns:
        Name of the accepting check, or None when no check accepts.
    """
    normalized_user = normalize_for_word_match(user_answer)
    normalized_correct = normalize_for_word_match(correct_answer)

    if not normalized_user or not normalized_correct:
        return None

    if normalized_user == normalized_correct:
        return "equal"

    candidate_tokens = normalized_correct.split(" ")
    candidate_words = set(candidate_tokens)
    user_tokens = normalized_user.split(" ")
    user_words = set(user_tokens)

    intersection_size = len(user_words & candidate_words)
    if intersection_size == 0:
        return None

    if len(user_words) > 1 and user_words <= candidate_words:
        return "subset"

    if len(user_words) == 1:
        (word,) = user_words
        if candidate_words == {word} or candidate_tokens[-1] == word:
            return "headword"

    overlap_with_candidate = intersection_size / len(candidate_words)
    overlap_with_user = intersection_size / len(user_words)
    if overlap_with_candidate >= MIN_CANDIDATE_OVERLAP and overlap_with_user >= MIN_USER_OVERLAP:
        return "overlap"

    if len(user_words) > 1 and _contains_phrase(normalized_user, candidate_tokens):
        if len(user_tokens) <= len(candidate_tokens) + MAX_EXTRA_PHRASE_WORDS:
            return "phrase"

    return None


def has_word_level_match(user_answer: str, correct_answer: str) -> bool:
    """Return True if any word-overlap check accepts the submission."""
    return word_match_reason(user_answer, correct_answer) is not None


def _contains_phrase(normalized_text: str, phrase_tokens: list[str]) -> bool:
    phrase = " ".join(phrase_tokens)
    pattern = re.compile(rf"\b{re.escape(phrase)}\b", re.IGNORECASE)
    return pattern.search(normalized_text) is not None
