"""Answer matcher service: synchronous rules plus a semantic second opinion."""

import logging
from collections.abc import Iterable

from riddle_answer_match.config import settings
from riddle_answer_match.matching.engine import candidate_answers, explain_answer, is_answer_correct
from riddle_answer_match.semantic import SemanticSimilarityService, SemanticState
from riddle_answer_match.types import MatchDecision

logger = logging.getLogger(__name__)


class AnswerMatcher:
    """Decides whether a free-text submission solves a riddle."""

    def __init__(
        self,
        semantic: SemanticSimilarityService | None = None,
        threshold: float | None = None,
        min_ai_input_length: int | None = None,
        semantic_enabled: bool | None = None,
    ):
        """
        Initialize the matcher.

        Args:
            semantic: Embedding similarity service. Defaults to one built from settings.
            threshold: Minimum cosine similarity for a semantic accept.
            min_ai_input_length: Shorter trimmed submissions skip the semantic check.
            semantic_enabled: False turns the semantic check off entirely.
        """
        self.semantic = semantic or SemanticSimilarityService()
        self.threshold = settings.semantic_threshold if threshold is None else threshold
        self.min_ai_input_length = (
            settings.min_ai_input_length if min_ai_input_length is None else min_ai_input_length
        )
        self.semantic_enabled = settings.semantic_enabled if semantic_enabled is None else semantic_enabled

    @property
    def state(self) -> SemanticState:
        """State shared with the semantic service."""
        return self.semantic.state

    @property
    def semantic_available(self) -> bool:
        """False once the semantic check is switched off or has failed."""
        return self.semantic_enabled and not self.state.unavailable

    def is_answer_correct(
        self,
        user_input: str,
        correct_answer: str,
        alternate_answers: Iterable[str] | None = None,
    ) -> bool:
        """Synchronous check against the canonical answer and alternates."""
        return is_answer_correct(user_input, correct_answer, alternate_answers)

    def explain(
        self,
        user_input: str,
        correct_answer: str,
        alternate_answers: Iterable[str] | None = None,
    ) -> MatchDecision:
        """Synchronous check reporting the accepting candidate and rule."""
        return explain_answer(user_input, correct_answer, alternate_answers)

    async def is_answer_correct_with_ai(
        self,
        user_input: str,
        correct_answer: str,
        alternate_answers: Iterable[str] | None = None,
    ) -> bool:
        """
        Semantic second opinion, meant for submissions the rules rejected.

        Never raises: a backend failure disables the semantic check for the
        lifetime of this matcher's state and the call returns False.

        Args:
            user_input: Raw submission.
            correct_answer: The riddle's canonical answer.
            alternate_answers: Other accepted answers.

        Returns:
            True if any candidate's similarity reaches the threshold.
        """
        candidate = await self._semantic_candidate(user_input, correct_answer, alternate_answers)
        return candidate is not None

    async def check(
        self,
        user_input: str,
        correct_answer: str,
        alternate_answers: Iterable[str] | None = None,
    ) -> MatchDecision:
        """Run the rules, then ask the semantic check only if the rules rejected."""
        alternates = list(alternate_answers or [])
        decision = self.explain(user_input, correct_answer, alternates)
        if decision["accepted"]:
            return decision

        candidate = await self._semantic_candidate(user_input, correct_answer, alternates)
        if candidate is not None:
            return {"accepted": True, "candidate": candidate, "rule": "semantic"}
        return decision

    async def _semantic_candidate(
        self,
        user_input: str,
        correct_answer: str,
        alternate_answers: Iterable[str] | None,
    ) -> str | None:
        if len(user_input.strip()) < self.min_ai_input_length:
            return None
        if not self.semantic_available:
            return None

        try:
            for candidate in candidate_answers(correct_answer, alternate_answers):
                similarity = await self.semantic.get_semantic_similarity(user_input, candidate)
                if similarity is not None and similarity >= self.threshold:
                    logger.debug(f"Semantic accept {user_input!r} for {candidate!r} ({similarity:.3f})")
                    return candidate
        except Exception as e:
            self._disable_semantic(e)

        return None

    def _disable_semantic(self, error: Exception) -> None:
        self.state.unavailable = True
        if not self.state.warning_logged:
            logger.warning(f"Semantic answer check disabled after failure: {error}")
            self.state.warning_logged = True

    def __repr__(self) -> str:
        """String representation."""
        return f"AnswerMatcher(threshold={self.threshold}, semantic_available={self.semantic_available})"


# Process-wide instance behind the module-level coroutines
_default_matcher: AnswerMatcher | None = None


def get_default_matcher() -> AnswerMatcher:
    """Get or create the shared matcher instance."""
    global _default_matcher
    if _default_matcher is None:
        _default_matcher = AnswerMatcher()
    return _default_matcher


def reset_default_matcher() -> None:
    """Drop the shared instance, with its cache and availability state."""
    global _default_matcher
    _default_matcher = None


async def is_answer_correct_with_ai(
    user_input: str,
    correct_answer: str,
    alternate_answers: Iterable[str] | None = None,
) -> bool:
    """Semantic second opinion using the shared matcher."""
    return await get_default_matcher().is_answer_correct_with_ai(user_input, correct_answer, alternate_answers)


async def get_semantic_similarity(text_a: str, text_b: str) -> float | None:
    """Cosine similarity of two texts using the shared matcher's backend."""
    return await get_default_matcher().semantic.get_semantic_similarity(text_a, text_b)
