"""Embedding backend contract for the semantic answer check."""

from typing import Protocol

import numpy as np


class Embedder(Protocol):
    """
    Anything that turns short answer texts into unit-length vectors.

    The semantic service compares rows with a plain dot product, so every
    backend must L2-normalize its output. Implementations may block (model
    load, network call); the service runs them in an executor.
    """

    @property
    def dim(self) -> int:
        """Vector length. Reading it may trigger the model load."""
        ...

    def encode(self, texts: list[str]) -> np.ndarray:
        """
        Embed a batch of already-normalized cache keys.

        Args:
            texts: Trimmed, lower-cased answer texts.

        Returns:
            float32 array of shape (len(texts), dim) whose rows have unit
            norm; an empty array for an empty batch. Errors are raised, never
            replaced by placeholder vectors.
        """
        ...
