"""Pytest configuration and fixtures."""

import numpy as np
import pytest


class FakeEmbedder:
    """Deterministic embedder keyed by exact text."""

    def __init__(self, vectors: dict[str, list[float]] | None = None, dim: int = 4):
        self.vectors = vectors or {}
        self._dim = dim
        self.calls: list[list[str]] = []

    @property
    def dim(self) -> int:
        return self._dim

    def encode(self, texts: list[str]) -> np.ndarray:
        self.calls.append(list(texts))
        rows = []
        for text in texts:
            if text in self.vectors:
                vector = np.array(self.vectors[text], dtype=np.float32)
            else:
                # Unknown texts get a one-hot vector derived from their characters
                vector = np.zeros(self._dim, dtype=np.float32)
                vector[sum(map(ord, text)) % self._dim] = 1.0
            rows.append(vector / np.linalg.norm(vector))
        return np.array(rows, dtype=np.float32)


@pytest.fixture
def riddle_vectors():
    """Embeddings for a handful of riddle answers and paraphrases."""
    return {
        "needle": [1.0, 0.0, 0.0, 0.0],
        "a sewing needle": [0.9, 0.1, 0.0, 0.0],
        "pin": [0.8, 0.6, 0.0, 0.0],
        "echo": [0.0, 0.0, 1.0, 0.0],
        "a sound that comes back": [0.0, 0.0, 0.95, 0.3],
    }


@pytest.fixture
def fake_embedder(riddle_vectors):
    """Fake embedder preloaded with riddle vectors."""
    return FakeEmbedder(riddle_vectors)


@pytest.fixture
def embedder_factory(fake_embedder):
    """Spy factory returning the fake embedder."""
    from unittest.mock import MagicMock

    return MagicMock(return_value=fake_embedder)


@pytest.fixture
def sample_riddles():
    """Sample riddles with their accepted answers."""
    return {
        "What has an eye but cannot see?": ("A needle", ["pin"]),
        "What can you hear but not see, and only answers when spoken to?": ("An echo", []),
        "The more you take, the more you leave behind.": ("Footsteps", ["steps"]),
        "How many months have 28 days?": ("Twelve", ["all of them"]),
    }
