"""Unit tests for embedding providers (with stubbed backends)."""

import io
import json
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import numpy as np
import pytest

from riddle_answer_match.config import Settings
from riddle_answer_match.embeddings import build_embedder
from riddle_answer_match.embeddings.st_local import SentenceTransformerEmbedder
from riddle_answer_match.embeddings.titan_embedder import TitanEmbedder


class TestSentenceTransformerEmbedder:
    """Test sentence transformer embedder."""

    def test_model_loaded_lazily(self):
        """Test that construction does not build the model."""
        with patch("riddle_answer_match.embeddings.st_local.SentenceTransformer") as mock_st:
            SentenceTransformerEmbedder()
            mock_st.assert_not_called()

    def test_mean_pooling_and_normalize_modules(self):
        """Test that the model is assembled with mean pooling and L2 normalization."""
        with patch("riddle_answer_match.embeddings.st_local.SentenceTransformer") as mock_st, patch(
            "riddle_answer_match.embeddings.st_local.models"
        ) as mock_models:
            mock_models.Transformer.return_value.get_word_embedding_dimension.return_value = 384
            mock_st.return_value.get_sentence_embedding_dimension.return_value = 384

            embedder = SentenceTransformerEmbedder(model_name="sentence-transformers/all-MiniLM-L6-v2")

            assert embedder.dim == 384
            mock_models.Transformer.assert_called_once_with("sentence-transformers/all-MiniLM-L6-v2")
            mock_models.Pooling.assert_called_once_with(384, pooling_mode="mean")
            mock_st.assert_called_once_with(
                modules=[
                    mock_models.Transformer.return_value,
                    mock_models.Pooling.return_value,
                    mock_models.Normalize.return_value,
                ]
            )

    def test_encode_single_text_is_2d(self):
        """Test that a 1-D model output is reshaped to one row."""
        with patch("riddle_answer_match.embeddings.st_local.SentenceTransformer") as mock_st, patch(
            "riddle_answer_match.embeddings.st_local.models"
        ):
            mock_st.return_value.encode.return_value = np.array([0.6, 0.8], dtype=np.float64)

            embeddings = SentenceTransformerEmbedder().encode(["echo"])

            assert embeddings.shape == (1, 2)
            assert embeddings.dtype == np.float32
            _, kwargs = mock_st.return_value.encode.call_args
            assert kwargs["normalize_embeddings"] is True

    def test_encode_empty_list(self):
        """Test encoding of empty list."""
        embedder = SentenceTransformerEmbedder()

        assert embedder.encode([]).shape == (0,)

    def test_repr(self):
        """Test string representation."""
        assert "all-MiniLM-L6-v2" in repr(SentenceTransformerEmbedder())


class TestTitanEmbedder:
    """Test Titan embedder with a stubbed Bedrock client."""

    @staticmethod
    def _client(vectors):
        client = MagicMock()
        client.invoke_model.side_effect = [
            {"body": io.BytesIO(json.dumps({"embedding": vector}).encode("utf-8"))} for vector in vectors
        ]
        return client

    def test_encode_normalizes(self):
        """Test that Titan vectors are scaled to unit length."""
        client = self._client([[3.0, 4.0], [0.0, 2.0]])
        embedder = TitanEmbedder(vector_dim=2, client=client)

        embeddings = embedder.encode(["echo", "needle"])

        assert embeddings.shape == (2, 2)
        np.testing.assert_allclose(embeddings[0], [0.6, 0.8], rtol=1e-6)
        np.testing.assert_allclose(embeddings[1], [0.0, 1.0], rtol=1e-6)
        _, kwargs = client.invoke_model.call_args_list[0]
        assert kwargs["modelId"] == "amazon.titan-embed-text-v1"
        assert json.loads(kwargs["body"]) == {"inputText": "echo"}

    def test_errors_propagate(self):
        """Test that Bedrock errors are not replaced by zero vectors."""
        client = MagicMock()
        client.invoke_model.side_effect = RuntimeError("throttled")
        embedder = TitanEmbedder(client=client)

        with pytest.raises(RuntimeError, match="throttled"):
            embedder.encode(["echo"])

    def test_default_client_uses_boto3(self):
        """Test client construction from credentials."""
        with patch("riddle_answer_match.embeddings.titan_embedder.boto3") as mock_boto3:
            TitanEmbedder(aws_access_key_id="AKIA", aws_secret_access_key="secret", aws_region="eu-west-1")

            _, kwargs = mock_boto3.client.call_args
            assert kwargs["service_name"] == "bedrock-runtime"
            assert kwargs["region_name"] == "eu-west-1"
            assert kwargs["aws_access_key_id"] == "AKIA"


class TestBuildEmbedder:
    """Test backend selection."""

    def test_st_local(self):
        """Test the default local provider."""
        embedder = build_embedder(Settings(embed_provider="st_local", embed_model_name="my/model"))

        assert isinstance(embedder, SentenceTransformerEmbedder)
        assert embedder.model_name == "my/model"

    def test_titan(self):
        """Test the Bedrock provider."""
        with patch("riddle_answer_match.embeddings.titan_embedder.boto3"):
            embedder = build_embedder(Settings(embed_provider="titan"))

        assert isinstance(embedder, TitanEmbedder)

    def test_unknown_provider(self):
        """Test an unsupported provider name."""
        with pytest.raises(ValueError, match="Unknown embed provider"):
            build_embedder(SimpleNamespace(embed_provider="openai"))
