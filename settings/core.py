from pydantic import Field
from pydantic_settings import SettingsConfigDict

from constants import MEBIBYTE
from enums import LLMName

from .base import BaseSettings


class CoreSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="core_")

    max_file_size: int = Field(default=10 * MEBIBYTE, title="Max file size")
    google_api_key: str = Field(default="", title="Google API key")
    github_api_key: str = Field(default="", title="GitHub API key")
    openai_api_key: str = Field(default="", title="OpenAI API key")
    host: str = Field(default="0.0.0.0", title="Server host")
    port: int = Field(default=8000, title="Server port")
    llm: LLMName | None = Field(default=None, title="Explicit LLM override")


core_settings = CoreSettings()
