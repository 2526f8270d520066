"""Settings for the task list MCP server, read from TASKLIST_* env vars or .env."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    storage_backend: Literal["file", "memory"] = "file"
    storage_dir: Path = Path("~/.local/share/tasklist-mcp")
    storage_key: str = "todoApp"
    export_dir: Path = Path(".")
    log_level: str = "INFO"
    log_file: Path | None = None

    model_config = SettingsConfigDict(env_prefix="TASKLIST_", env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
