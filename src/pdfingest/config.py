"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Embedding API (OpenAI compatible, e.g. Text Embeddings Inference)
    embedding_api_url: str = Field(
        default="http://localhost:8080/v1",
        description="OpenAI-compatible embedding API URL",
    )
    embedding_api_key: str = Field(description="Embedding API key")
    embedding_model: str = Field(
        default="intfloat/multilingual-e5-large",
        description="Embedding model name",
    )
    embedding_dimensions: int | None = Field(
        default=1024,
        description="Expected vector length; unset to skip the check",
    )
    embedding_batch_size: int = Field(default=10, gt=0, description="Chunks embedded concurrently")
    embedding_max_attempts: int = Field(default=3, gt=0, description="Attempts per chunk")
    embedding_backoff_seconds: float = Field(
        default=1.0, ge=0, description="Base of exponential retry backoff"
    )
    embedding_batch_delay_ms: int = Field(default=100, ge=0, description="Pause between batches")

    # Pinecone
    pinecone_api_key: str = Field(description="Pinecone API key")
    pinecone_index_name: str = Field(description="Pinecone index name")
    pinecone_namespace: str = Field(default="", description="Pinecone namespace (default if empty)")
    storage_batch_size: int = Field(default=50, gt=0, description="Vectors per upsert request")
    storage_batch_delay_ms: int = Field(default=100, ge=0, description="Pause between upserts")

    # Chunking
    chunk_size: int = Field(default=3000, gt=0, description="Target chunk size in characters")
    chunk_overlap: int = Field(default=300, ge=0, description="Overlap between chunks in characters")

    # Uploads
    max_upload_bytes: int = Field(default=10 * 1024 * 1024, gt=0, description="Maximum PDF size")
    upload_dir: str = Field(default="uploads", description="Directory for temporary uploads")

    # Server
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3000, description="Bind port")
    cors_origins: str = Field(default="*", description="Comma-separated allowed origins")

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=True, description="Render logs as JSON")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
