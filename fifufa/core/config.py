# fifufa/core/config.py
import logging
from typing import List, Set
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

logger = logging.getLogger("fifufa.core.config")  # Logger for this module

class Settings(BaseSettings):
    PROJECT_NAME: str = "FiFuFa Bilingual API"
    VERSION: str = "2.0.0"
    PLATFORM: str = "FastAPI"
    API_PREFIX: str = ""  # e.g. "/api" when served behind the frontend's host

    # Please set your Gemini API Key in the .env file
    GEMINI_API_KEY: str = "YOUR_GEMINI_API_KEY_HERE"
    GEMINI_MODEL: str = "gemini-2.0-flash"
    # Hosting platforms cut requests at ~30s, keep a buffer for building the response
    INFERENCE_TIMEOUT_SECONDS: float = 28.0

    # Comma-separated list, e.g. "https://fifufa.app,https://www.fifufa.app"
    ALLOWED_ORIGINS: str = ""
    # Full URL of the deployed frontend, e.g. "https://fifufa.app"
    SITE_URL: str = ""
    # Host only (no scheme) as exported by the hosting platform, e.g. "fifufa-git-main.vercel.app"
    DEPLOYMENT_URL: str = ""
    LOCAL_DEV_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5000",
        "http://127.0.0.1:5173",
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def gemini_configured(self) -> bool:
        return bool(self.GEMINI_API_KEY) and self.GEMINI_API_KEY != "YOUR_GEMINI_API_KEY_HERE"

    @property
    def allowed_origins(self) -> Set[str]:
        """Explicit origins, the site URL variables and the local development defaults."""
        origins = {o.strip().rstrip("/") for o in self.ALLOWED_ORIGINS.split(",") if o.strip()}
        if self.SITE_URL.strip():
            origins.add(self.SITE_URL.strip().rstrip("/"))
        if self.DEPLOYMENT_URL.strip():
            host = self.DEPLOYMENT_URL.strip().rstrip("/")
            origins.add(host if host.startswith(("http://", "https://")) else f"https://{host}")
        origins.update(self.LOCAL_DEV_ORIGINS)
        return origins

@lru_cache()
def get_settings():
    settings_instance = Settings()
    if not settings_instance.gemini_configured:
        logger.warning("GEMINI_API_KEY is not configured. Facts will fail and random words will use fallback lists.")
    return settings_instance

settings = get_settings()
