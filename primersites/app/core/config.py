# File: primersites/app/core/config.py
# Version: v0.1.0
"""
Centralized application settings using Pydantic Settings.

Controls:
- App metadata and API prefix
- CORS origins
- Directory holding the editable search parameters (binding_param.json)
- Log level
"""
from __future__ import annotations

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # --- App ---
    API_PREFIX: str = "/api"
    APP_NAME: str = "PrimerSites"
    APP_VERSION: str = "0.1.0"

    # --- CORS ---
    CORS_ORIGINS: str = "*"  # comma-separated or '*' for all

    # --- Parameters ---
    PARAMS_DIR: Path = Path("primersites/data")

    # --- Logging ---
    LOG_LEVEL: str = "info"

    model_config = SettingsConfigDict(env_prefix="PRIMERSITES_", env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def cors_origins_list(self) -> list[str]:
        raw = self.CORS_ORIGINS.strip()
        if raw == "*":
            return ["*"]
        return [o.strip() for o in raw.split(",") if o.strip()]

settings = Settings()
