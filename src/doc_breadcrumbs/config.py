"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from doc_breadcrumbs.core import DEFAULT_CLASSIFICATION, KindClassification, NodeKind


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DOC_BREADCRUMBS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Discovery settings
    max_file_size_bytes: int = 1_000_000  # 1MB
    skip_directories: frozenset[str] = frozenset({
        ".git",
        ".svn",
        ".hg",
        "node_modules",
        "dist",
        "build",
        "out",
        "coverage",
        ".next",
        ".turbo",
        ".venv",
        "venv",
    })

    # Worker settings
    worker_count: int = 4

    # Classification extensions, as NodeKind values (e.g. ["function"])
    extra_container_kinds: list[NodeKind] = []
    extra_member_kinds: list[NodeKind] = []

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return upper

    @field_validator("worker_count")
    @classmethod
    def validate_worker_count(cls, v: int) -> int:
        if v < 1:
            raise ValueError("worker_count must be >= 1")
        return v

    @property
    def classification(self) -> KindClassification:
        """Default classification table extended with the configured kinds."""
        return DEFAULT_CLASSIFICATION.with_container_kinds(
            *self.extra_container_kinds
        ).with_member_kinds(*self.extra_member_kinds)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
