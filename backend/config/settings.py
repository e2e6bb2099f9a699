from typing import List, Optional
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from .constants import LLM_CONFIG

class Settings(BaseSettings):
    """Loads all environment variables into a single, accessible object."""
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    GEMINI_API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"),
    )

    GEMINI_MODEL: str = LLM_CONFIG.DEFAULT_MODEL
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com"
    REQUEST_TIMEOUT: float = LLM_CONFIG.REQUEST_TIMEOUT

    ALLOWED_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    @property
    def GEMINI_ENDPOINT(self) -> str:
        return f"{self.GEMINI_BASE_URL}/v1beta/models/{self.GEMINI_MODEL}:generateContent"

    @property
    def origins(self) -> List[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]
