# hexdirectory/common/settings.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List
from pydantic import BaseModel, Field, field_validator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict
from hexdirectory.common.strings.splitters import csv_to_list


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False

    @field_validator("cors_allow_origins", "cors_allow_methods", "cors_allow_headers", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return csv_to_list(v)


class SourceConfig(BaseModel):
    people_file: Path = Path("data/people.json")


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "hexdirectory"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    source: SourceConfig = SourceConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # ===== Convenience =====
    @computed_field  # type: ignore[misc]
    @property
    def people_file(self) -> Path:
        return self.source.people_file

    @computed_field  # type: ignore[misc]
    @property
    def is_dev(self) -> bool:
        return self.app_env.lower() == "development"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from hexdirectory.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
