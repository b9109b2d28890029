"""Configuration management for riddle answer matching."""

from typing import Literal

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Embedding configuration
    # Options: "st_local" (Sentence Transformers - local) or "titan" (AWS Bedrock Titan)
    embed_provider: Literal["st_local", "titan"] = "st_local"
    # Hugging Face model id for st_local
    embed_model_name: str = "sentence-transformers/all-MiniLM-L6-v2"
    titan_embed_model: str = "amazon.titan-embed-text-v1"

    # AWS/Bedrock configuration (titan only)
    aws_region: str = "us-east-1"
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None

    # Semantic second opinion
    semantic_enabled: bool = True
    semantic_threshold: float = 0.82
    # Shorter submissions are never sent to the embedding backend
    min_ai_input_length: int = 3

    log_level: str = "INFO"


# Global settings instance
settings = Settings()
