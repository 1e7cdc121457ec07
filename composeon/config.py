import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Composeon"
    icons_dir: Path = Path.cwd() / "icons"
    manifest_path: Path = Path.cwd() / "icons-manifest.json"
    # Prepended to every relative path stored in the catalog, e.g. "lobe-icons/packages/static-svg/icons"
    icon_path_prefix: str = ""
    default_search_limit: int = Field(default=50, ge=1)
    page_size: int = Field(default=24, ge=1)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
