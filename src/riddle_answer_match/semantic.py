"""Embedding-based similarity used as a second opinion on rejected answers."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

import numpy as np

from riddle_answer_match.config import Settings, settings
from riddle_answer_match.embeddings import Embedder, build_embedder

logger = logging.getLogger(__name__)


@dataclass
class SemanticState:
    """
    Mutable state of one semantic similarity service.

    Both fields only move one way: the cache gains entries and never changes
    or drops them, and ``unavailable`` flips to True at most once.
    """

    embedding_cache: dict[str, np.ndarray] = field(default_factory=dict)
    unavailable: bool = False
    warning_logged: bool = False


def to_cache_key(text: str) -> str:
    """Embedding cache key: trimmed, lower-cased text."""
    return text.strip().lower()


def cosine_similarity(a: np.ndarray, b: np.ndarray) -> float:
    """Dot product over the shared dimensions of two unit-length vectors."""
    size = min(len(a), len(b))
    return float(np.dot(a[:size], b[:size]))


class SemanticSimilarityService:
    """Lazily loaded embedding backend with a process-lifetime embedding cache."""

    def __init__(
        self,
        embedder_factory: Callable[[], Embedder] | None = None,
        state: SemanticState | None = None,
        config: Settings | None = None,
    ):
        """
        Initialize the service. Nothing is loaded until the first embedding is needed.

        Args:
            embedder_factory: Blocking callable that builds a ready embedder.
                Defaults to the backend selected in settings.
            state: Cache and availability state. A fresh one by default.
            config: Settings used by the default factory.
        """
        self.config = config or settings
        self.state = state or SemanticState()
        self._embedder_factory = embedder_factory or self._build_default_embedder
        self._embedder_task: asyncio.Future | None = None

    def _build_default_embedder(self) -> Embedder:
        embedder = build_embedder(self.config)
        # Reading dim forces the model weights to load now rather than on first encode
        logger.info(f"Embedding dimension: {embedder.dim}")
        return embedder

    async def _load_embedder(self) -> Embedder:
        logger.info("Loading semantic embedding backend")
        loop = asyncio.get_running_loop()
        embedder = await loop.run_in_executor(None, self._embedder_factory)
        logger.info(f"Semantic embedding backend ready: {embedder!r}")
        return embedder

    async def get_embedder(self) -> Embedder:
        """
        Return the embedding backend, loading it on first use.

        Concurrent first callers await the same in-flight load. A caller that
        is cancelled while waiting does not cancel the load for the others.
        A failed load stays failed: later calls re-raise the same error.
        """
        if self._embedder_task is None or self._embedder_task.cancelled():
            self._embedder_task = asyncio.ensure_future(self._load_embedder())
        return await asyncio.shield(self._embedder_task)

    @property
    def loaded(self) -> bool:
        """Whether the backend finished loading successfully."""
        task = self._embedder_task
        return task is not None and task.done() and not task.cancelled() and task.exception() is None

    @property
    def cache_size(self) -> int:
        """Number of cached embeddings."""
        return len(self.state.embedding_cache)

    async def get_embedding(self, text: str) -> np.ndarray | None:
        """
        Embed one text, using the cache when possible.

        Args:
            text: Raw text; trimmed and lower-cased before embedding.

        Returns:
            Unit-length vector, or None if the text is blank or the backend
            returned nothing usable.
        """
        key = to_cache_key(text)
        if not key:
            return None

        cached = self.state.embedding_cache.get(key)
        if cached is not None:
            logger.debug(f"Embedding cache hit: {key!r}")
            return cached

        embedder = await self.get_embedder()
        loop = asyncio.get_running_loop()
        vectors = await loop.run_in_executor(None, embedder.encode, [key])

        embedding = _first_vector(vectors)
        if embedding is None:
            return None

        return self.state.embedding_cache.setdefault(key, embedding)

    async def get_semantic_similarity(self, text_a: str, text_b: str) -> float | None:
        """
        Cosine similarity between the meanings of two texts.

        Args:
            text_a: First text.
            text_b: Second text.

        Returns:
            Similarity in [-1, 1], or None when either side could not be
            embedded (blank input, empty vector). Backend errors propagate.
        """
        if not to_cache_key(text_a) or not to_cache_key(text_b):
            return None

        try:
            embedding_a, embedding_b = await asyncio.gather(
                self.get_embedding(text_a),
                self.get_embedding(text_b),
            )
        except Exception as e:
            logger.warning(f"Semantic similarity calculation failed: {e}")
            raise

        if embedding_a is None or embedding_b is None:
            return None

        return cosine_similarity(embedding_a, embedding_b)


def _first_vector(vectors) -> np.ndarray | None:
    if vectors is None:
        return None
    array = np.asarray(vectors, dtype=np.float32)
    if array.ndim > 1:
        array = array[0] if len(array) else array.reshape(-1)
    if array.ndim == 0 or array.size == 0:
        return None
    return array.copy()
