"""Sentence Transformers local embedding provider."""

import logging

import numpy as np
from sentence_transformers import SentenceTransformer, models

logger = logging.getLogger(__name__)


class SentenceTransformerEmbedder:
    """Local embedding provider: transformer, mean pooling, L2 normalization."""

    def __init__(self, model_name: str = "sentence-transformers/all-MiniLM-L6-v2"):
        """
        Initialize the embedder. The model is not downloaded until first use.

        Args:
            model_name: Hugging Face id of the transformer to pool over.
        """
        self.model_name = model_name
        self._model: SentenceTransformer | None = None
        self._dim: int | None = None

    @property
    def model(self) -> SentenceTransformer:
        """Lazy load the model."""
        if self._model is None:
            logger.info(f"Loading sentence transformer model: {self.model_name}")
            transformer = models.Transformer(self.model_name)
            pooling = models.Pooling(
                transformer.get_word_embedding_dimension(),
                pooling_mode="mean",
            )
            self._model = SentenceTransformer(modules=[transformer, pooling, models.Normalize()])
            self._dim = self._model.get_sentence_embedding_dimension()
        return self._model

    @property
    def dim(self) -> int:
        """Return the dimension of embeddings."""
        if self._dim is None:
            self._dim = self.model.get_sentence_embedding_dimension()
        return self._dim

    def encode(self, texts: list[str]) -> np.ndarray:
        """
        Encode texts into embeddings.

        Args:
            texts: List of text strings to encode.

        Returns:
            numpy array of shape (N, dim) with L2-normalized float32 rows.
        """
        if not texts:
            return np.array([])

        embeddings = self.model.encode(
            texts,
            convert_to_numpy=True,
            normalize_embeddings=True,
            show_progress_bar=False,
        )

        if embeddings.ndim == 1:
            embeddings = embeddings.reshape(1, -1)

        return embeddings.astype(np.float32, copy=False)

    def __repr__(self) -> str:
        """String representation."""
        return f"SentenceTransformerEmbedder(model={self.model_name})"
