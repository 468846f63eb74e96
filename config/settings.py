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

    # Keys inside the browser's localStorage preference payload
    LANG_STORAGE_KEY: str = os.getenv("LANG_STORAGE_KEY", "mines-predictor-lang")
    MUTE_STORAGE_KEY: str = os.getenv("MUTE_STORAGE_KEY", "mines-predictor-sound-muted")

    # i18n
    DEFAULT_LANG: str = os.getenv("DEFAULT_LANG", "en")
    TRANSLATIONS_PATH: str = os.getenv("TRANSLATIONS_PATH", "")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
