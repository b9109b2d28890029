"""Type definitions for riddle answer matching."""

from typing import Literal, TypedDict

RuleName = Literal["exact", "singular", "numeric", "word_overlap", "edit_distance", "semantic"]


class MatchDecision(TypedDict):
    """Outcome of checking one submission against a riddle's answers."""

    accepted: bool
    candidate: str | None
    rule: RuleName | None
