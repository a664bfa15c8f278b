from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import UnknownLocaleError
from .i18n import Locale

# Load .env file explicitly
ENV_FILE_NAME = ".env"
env_path = Path(__file__).parent.parent.parent / ENV_FILE_NAME
load_dotenv(env_path, override=False)


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./data/board.db"
    DEFAULT_LOCALE: str = "en"
    I18N_ATTRIBUTE: str = "data-i18n"
    LOG_DEBUG: bool = False
    LOG_FILE: bool = False

    @field_validator("DEFAULT_LOCALE", mode="before")
    @classmethod
    def parse_default_locale(cls, v):  # type: ignore
        if v in (None, ""):
            return Locale.EN.value
        try:
            return Locale.parse(v).value
        except UnknownLocaleError as e:
            raise ValueError(str(e)) from e

    @field_validator("I18N_ATTRIBUTE")
    @classmethod
    def check_attribute(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("I18N_ATTRIBUTE must not be empty")
        return v

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_NAME,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def default_locale(self) -> Locale:
        return Locale(self.DEFAULT_LOCALE)


settings = Settings()
