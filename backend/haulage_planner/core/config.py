from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Nigerian Haulage Journey Planner"
    environment: str = "local"
    log_level: str = "INFO"

    llm_provider: str = Field("gemini", description="gemini or ollama")
    llm_timeout_seconds: float = 90.0

    gemini_api_key: str = Field(default="", description="Google AI Studio API key")
    gemini_model: str = "gemini-2.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"

    ollama_host: str = "http://localhost:11434"
    ollama_model: str = "llama3"

    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", case_sensitive=False)


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
