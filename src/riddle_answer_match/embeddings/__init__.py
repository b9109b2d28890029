"""Embedding providers for the semantic answer check."""

from riddle_answer_match.config import Settings
from riddle_answer_match.embeddings.base import Embedder


def build_embedder(config: Settings) -> Embedder:
    """
    Create the embedding backend selected by ``config.embed_provider``.

    Backend modules are imported here so that the synchronous matcher never
    pulls in torch or boto3.

    Raises:
        ValueError: If the provider name is unknown.
    """
    if config.embed_provider == "st_local":
        from riddle_answer_match.embeddings.st_local import SentenceTransformerEmbedder

        return SentenceTransformerEmbedder(model_name=config.embed_model_name)

    if config.embed_provider == "titan":
        from riddle_answer_match.embeddings.titan_embedder import TitanEmbedder

        return TitanEmbedder(
            model_id=config.titan_embed_model,
            aws_access_key_id=config.aws_access_key_id,
            aws_secret_access_key=config.aws_secret_access_key,
            aws_region=config.aws_region,
        )

    raise ValueError(f"Unknown embed provider: {config.embed_provider}")


__all__ = ["Embedder", "build_embedder"]
