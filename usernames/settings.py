from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class GeneratorSettings(BaseSettings):
    model_config = SettingsConfigDict(extra="forbid", env_prefix="USERNAMES_")

    log_level: str = "info"

    # CLI defaults
    default_count: int = 5
    default_separator: str = "-"
    default_word_count: int = 2
    default_max_attempts: int = 100


SETTINGS = GeneratorSettings()
