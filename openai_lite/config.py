# openai_lite/config.py
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.openai.com/v1"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Upstream API
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_BASE_URL: str = DEFAULT_BASE_URL
    OPENAI_ORGANIZATION: Optional[str] = None

    # Timeouts (LLM_TIMEOUT_S retro-compat)
    REQUEST_TIMEOUT_S: float = Field(
        default=240.0,
        validation_alias=AliasChoices("REQUEST_TIMEOUT_S", "LLM_TIMEOUT_S"),
    )

    # Logging
    LOG_LEVEL: str = "INFO"
