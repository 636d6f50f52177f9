"""
Configuration management using Pydantic Settings
Reads A11YSCAN_* environment variables and an optional .env file
"""
from functools import lru_cache
from typing import Annotated, List, Literal, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_UA = (
    "A11yScan/0.4 (+https://example.local; accessibility audit) "
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    """Settings for the HTTP service and CLI. The scan engine takes these as arguments."""

    model_config = SettingsConfigDict(
        env_prefix="A11YSCAN_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = "A11yScan"
    app_version: str = "0.4.0"

    fetch_timeout_ms: int = Field(default=30000, gt=0)
    max_redirects: int = Field(default=5, ge=0)
    user_agent: str = DEFAULT_UA
    batch_concurrency: int = Field(default=4, ge=1)
    disabled_rules: Annotated[List[str], NoDecode] = Field(default_factory=list)

    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"

    cors_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )

    openai_api_key: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("OPENAI_API_KEY", "openai_api_key")
    )
    openai_model: str = "gpt-4o-mini"

    @field_validator("disabled_rules", "cors_origins", mode="before")
    @classmethod
    def split_csv(cls, value):
        # comma separated in the environment
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


@lru_cache()
def get_settings() -> Settings:
    return Settings()
