from pathlib import Path

from pydantic_settings import BaseSettings as PydanticBaseSettings
from pydantic_settings import SettingsConfigDict

BASE_PATH = Path(__file__).resolve().parent.parent


class BaseSettings(PydanticBaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_PATH / ".env", env_file_encoding="utf-8", extra="ignore"
    )
