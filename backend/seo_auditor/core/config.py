"""
Centralized configuration for the SEO Page Auditor backend.
Uses Pydantic Settings to load from environment variables and .env file.
"""

from pathlib import Path
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables / .env file."""

    # ── Page fetcher ──
    fetch_timeout: float = 10.0
    user_agent: str = "SEO-Auditor-Bot/1.0"
    allow_private_hosts: bool = False

    # ── Density analyzer ──
    density_top_k: int = 15

    # ── LLM (optional AI analysis; the key always comes from the caller) ──
    llm_provider: str = "openai"       # openai | anthropic | ollama | google
    llm_model: str = ""
    llm_temperature: float = 0.2
    llm_max_tokens: int = 4096
    ollama_base_url: str = "http://localhost:11434"

    # ── CORS ──
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

    # ── Rate Limiting ──
    rate_limit_per_minute: int = 30

    # ── Application ──
    app_version: str = "1.0.0"
    host: str = "127.0.0.1"
    port: int = 3001
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parent.parent.parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Cached singleton for application settings."""
    return Settings()
