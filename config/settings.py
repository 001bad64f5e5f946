"""
config/settings.py
──────────────────
Application configuration loaded from environment variables.
"""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    # Server
    DEBUG: bool = os.getenv("DEBUG", "true").lower() == "true"
    PORT: int = int(os.getenv("PORT", "8050"))
    HOST: str = os.getenv("HOST", "0.0.0.0")

    # Static site (local directory, or a deployed base URL when SITE_URL is set)
    SITE_DIR: str = os.getenv("SITE_DIR", "site")
    SITE_URL: str = os.getenv("SITE_URL", "")
    CONTENT_DIR: str = os.getenv("CONTENT_DIR", "content")

    # Persisted visitor preferences (SQLite path)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "site_i18n.db")

    # HTTP
    HTTP_TIMEOUT_S: float = float(os.getenv("HTTP_TIMEOUT_S", "10"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
