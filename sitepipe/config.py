"""Runtime configuration loaded from the environment (``SITEPIPE_*``)."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Filesystem roots and logging level for the pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="SITEPIPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Generated Trees are written here, one directory per site.
    output_path: Path = Path("output")
    # Where the builder reads sites from; falls back to ``output_path``.
    build_input_path: Optional[Path] = None
    # Built Trees are written here.
    build_path: Path = Path("build")

    log_level: str = "INFO"

    @property
    def build_source_path(self) -> Path:
        return self.build_input_path or self.output_path


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
