"""
集中式配置（环境变量/ .env），保障可测性与可控性。
"""
# @file purpose: Centralized settings using Pydantic Settings.

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BS_", env_file=".env", extra="ignore")

    driver: Literal["lxml", "playwright"] = "lxml"
    headless: bool = True
    default_timeout_ms: int = 30_000
    slow_mo_ms: int = 0
    log_level: str = "INFO"


settings = Settings()
