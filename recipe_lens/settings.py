from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # AI
    ai_mode: str = "openrouter"  # "openrouter", "gemini" or "mock"
    ai_max_tokens: int = 2000
    ai_temperature: float = 0.7

    # OpenRouter (OpenAI-compatible chat completions)
    openrouter_api_key: Optional[str] = None
    openrouter_url: str = "https://openrouter.ai/api/v1/chat/completions"
    openrouter_model: str = "google/gemini-2.0-flash-001"
    site_url: str = "http://localhost:3000"
    app_title: str = "AI Recipe Generator"

    # Direct Gemini access
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.0-flash"

    # Uploads
    max_image_bytes: int = 10 * 1024 * 1024

    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://0.0.0.0:3000",
        "http://localhost",
        "http://127.0.0.1",
    ]


settings = Settings()
