"""Amazon Titan embedding provider via Bedrock."""

import json
import logging

import boto3
import numpy as np
from botocore.config import Config as BotoConfig

logger = logging.getLogger(__name__)


class TitanEmbedder:
    """AWS Bedrock Titan embedding provider."""

    def __init__(
        self,
        model_id: str = "amazon.titan-embed-text-v1",
        aws_access_key_id: str | None = None,
        aws_secret_access_key: str | None = None,
        aws_region: str = "us-east-1",
        vector_dim: int = 1536,
        client=None,
    ):
        """
        Initialize the Titan embedder.

        Args:
            model_id: Bedrock Titan model ID.
            aws_access_key_id: AWS access key ID (optional, uses credentials chain if not provided).
            aws_secret_access_key: AWS secret access key (optional).
            aws_region: AWS region for Bedrock.
            vector_dim: Dimension of embeddings (1536 for Titan v1).
            client: Pre-built bedrock-runtime client, mainly for tests.
        """
        self.model_id = model_id
        self._dim = vector_dim

        if client is None:
            client_kwargs = {
                "service_name": "bedrock-runtime",
                "region_name": aws_region,
                "config": BotoConfig(
                    region_name=aws_region,
                    retries={"max_attempts": 3, "mode": "adaptive"},
                ),
            }
            if aws_access_key_id and aws_secret_access_key:
                client_kwargs["aws_access_key_id"] = aws_access_key_id
                client_kwargs["aws_secret_access_key"] = aws_secret_access_key
            client = boto3.client(**client_kwargs)

        self.client = client
        logger.info(f"Initialized Titan embedder with model: {model_id}")

    @property
    def dim(self) -> int:
        """Return the dimension of embeddings."""
        return self._dim

    def encode(self, texts: list[str]) -> np.ndarray:
        """
        Encode texts into embeddings using Titan.

        Titan vectors are not unit length, so each one is L2-normalized here.
        Bedrock errors propagate to the caller.

        Args:
            texts: List of texts to encode.

        Returns:
            Numpy array of embeddings with shape (len(texts), dim).
        """
        if not texts:
            return np.array([])

        embeddings = []
        for text in texts:
            response = self.client.invoke_model(
                modelId=self.model_id,
                body=json.dumps({"inputText": text}).encode("utf-8"),
                contentType="application/json",
            )
            response_body = json.loads(response["body"].read())
            embedding = np.array(response_body["embedding"], dtype=np.float32)

            norm = np.linalg.norm(embedding)
            if norm > 0:
                embedding = embedding / norm
            embeddings.append(embedding)

        return np.array(embeddings, dtype=np.float32)

    def __repr__(self) -> str:
        """String representation."""
        return f"TitanEmbedder(model={self.model_id}, dim={self.dim})"
