"""Levenshtein distance and length-scaled typo tolerance."""

from riddle_answer_match.matching.normalize import standardize


def levenshtein_distance(a: str, b: str) -> int:
    """Classic edit distance with unit-cost insertion, deletion and substitution."""
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    matrix = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        matrix[i][0] = i
    for j in range(len(b) + 1):
        matrix[0][j] = j

    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,
                matrix[i][j - 1] + 1,
                matrix[i - 1][j - 1] + cost,
            )

    return matrix[len(a)][len(b)]


def edit_tolerance(max_length: int) -> int:
    """Number of edits allowed for answers whose longer side has ``max_length`` characters."""
    if max_length <= 4:
        return 1
    if max_length <= 8:
        return 2
    return 3


def within_edit_tolerance(user_answer: str, correct_answer: str) -> bool:
    """Compare compact forms and accept small typos, scaled by answer length."""
    normalized_user = standardize(user_answer)
    normalized_correct = standardize(correct_answer)
    if not normalized_user or not normalized_correct:
        return False

    distance = levenshtein_distance(normalized_user, normalized_correct)
    max_length = max(len(normalized_user), len(normalized_correct))
    return distance <= edit_tolerance(max_length)
