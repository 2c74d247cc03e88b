import logging
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PYPI_CONFLICTS_",
        extra="ignore",
    )

    log_level: str = "WARNING"
    pyproject_path: Path = Path("pyproject.toml")
    json_indent: int = 2

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level


settings = Settings()
