"""Application settings, loaded from the environment via pydantic-settings.

Every variable is prefixed with ``COMMERCE_`` (``COMMERCE_DATA_DIR``,
``COMMERCE_LOG_LEVEL`` ...) and may also come from a ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from commerce.domain.exceptions import UnsupportedCurrencyError
from commerce.domain.model.value_objects import Currency


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="COMMERCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    data_dir: Path = Field(default=Path("data"))
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: Literal["console", "json"] = Field(default="console")
    default_currency: str = Field(default="USD")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @field_validator("default_currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        try:
            return Currency.from_code(v).value
        except UnsupportedCurrencyError as exc:
            raise ValueError(str(exc)) from exc

    @property
    def currency(self) -> Currency:
        return Currency.from_code(self.default_currency)


@lru_cache
def get_settings() -> Settings:
    return Settings()
