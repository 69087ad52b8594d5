"""
Configuration management - environment driven settings via Pydantic Settings
"""
from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class KeywordMatchMode(str, Enum):
    """How taxonomy keywords are matched against document text"""
    SUBSTRING = "substring"
    WORD = "word"


class Settings(BaseSettings):
    """Application settings - every field can be overridden through the environment"""

    # API
    api_v1_prefix: str = Field(default="/api/v1", description="API route prefix")
    project_name: str = Field(default="Standards Compare", description="Project name")
    version: str = Field(default="1.0.0", description="Version")
    environment: str = Field(default="development", description="development or production")

    # Server
    host: str = Field(default="0.0.0.0", description="Bind address for uvicorn")
    port: int = Field(default=8000, description="Listen port for uvicorn")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    json_logs: bool = Field(default=False, description="Render logs as JSON")
    enable_metrics: bool = Field(default=True, description="Expose Prometheus metrics at /metrics")

    # Comparison engine
    taxonomy_path: Optional[str] = Field(
        default=None,
        description="Topic taxonomy JSON file (defaults to the bundled taxonomy)",
    )
    keyword_match_mode: KeywordMatchMode = Field(
        default=KeywordMatchMode.SUBSTRING,
        description="substring keeps plain containment, word requires word boundaries",
    )
    extraction_timeout_seconds: float = Field(
        default=5.0,
        description="Upper bound for pulling text out of a document view",
    )

    # Documents
    search_result_limit: int = Field(default=50, description="Maximum search hits per query")
    search_snippet_radius: int = Field(default=40, description="Context characters around a search hit")
    max_upload_bytes: int = Field(default=50 * 1024 * 1024, description="Maximum upload size")

    # CORS, comma separated, e.g. "http://localhost:5173,https://your.app"
    cors_allow_origins: str = Field(default="http://localhost:5173", description="Allowed CORS origins")
    cors_allow_credentials: bool = Field(default=False, description="Allow credentials")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @property
    def whole_word_matching(self) -> bool:
        return self.keyword_match_mode == KeywordMatchMode.WORD

    def get_cors_origins(self) -> list[str]:
        """Return the list of allowed CORS origins"""
        raw = (self.cors_allow_origins or "").strip()
        if not raw:
            return ["*"]
        return [o.strip() for o in raw.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """
    Cached settings instance for the default composition root.
    The app factory also accepts an explicit Settings object.
    """
    return Settings()
