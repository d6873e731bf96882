# tests/core/test_config.py
from fifufa.core.config import get_settings, Settings

def test_get_settings_loads_defaults():
    settings = get_settings()
    assert isinstance(settings, Settings)
    assert settings.PROJECT_NAME == "FiFuFa Bilingual API" # Check a default value
    assert settings.INFERENCE_TIMEOUT_SECONDS == 28.0

def test_allowed_origins_from_environment(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://fifufa.app/, https://www.fifufa.app ,")
    monkeypatch.setenv("SITE_URL", "https://fifufa.example.com")
    monkeypatch.setenv("DEPLOYMENT_URL", "fifufa-git-main.vercel.app")
    settings = Settings(_env_file=None)

    origins = settings.allowed_origins
    assert "https://fifufa.app" in origins
    assert "https://www.fifufa.app" in origins
    assert "https://fifufa.example.com" in origins
    assert "https://fifufa-git-main.vercel.app" in origins
    assert "http://localhost:5173" in origins
    assert "" not in origins

def test_gemini_configured_rejects_placeholder():
    assert Settings(_env_file=None, GEMINI_API_KEY="YOUR_GEMINI_API_KEY_HERE").gemini_configured is False
    assert Settings(_env_file=None, GEMINI_API_KEY="").gemini_configured is False
    assert Settings(_env_file=None, GEMINI_API_KEY="abc123").gemini_configured is True
