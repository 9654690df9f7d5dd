from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "NFL Media Here and Now"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Static assets (logo, CKEditor bundle), relative to the working directory;
    # mounted only when the directory exists
    static_dir: str = "public"
    logo_url: str = "/logo.webp"
    editor_script_url: str = "/ckeditor/ckeditor.js"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_articles: str = "INFO"         # Article service, store and pages

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
