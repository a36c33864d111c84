from pydantic import Field
from pydantic_settings import SettingsConfigDict

from schemas.summary import SummaryConfig

from .base import BaseSettings


class SummarySettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="summary_")

    max_chars: int = Field(default=180_000, title="Max extracted characters", gt=0)
    single_shot_threshold: int = Field(
        default=10_000, title="Single-shot length threshold", ge=0
    )
    chunk_size: int = Field(default=6000, title="Chunk size in characters", gt=0)
    chunk_overlap: int = Field(default=400, title="Chunk overlap", ge=0)
    executive_summary_cap: int = Field(default=12, title="Executive summary cap", ge=0)
    key_insights_cap: int = Field(default=20, title="Key insights cap", ge=0)
    risks_cap: int = Field(default=15, title="Risks cap", ge=0)
    action_items_cap: int = Field(default=15, title="Action items cap", ge=0)
    max_concurrency: int = Field(default=1, title="Parallel chunk calls", ge=1)
    temperature: float = Field(default=0.2, title="Generator temperature", ge=0)
    timeout: float = Field(default=120.0, title="Generator call timeout", gt=0)

    @property
    def config(self) -> SummaryConfig:
        """Config.

        Returns:
            Immutable pipeline configuration.

        """
        return SummaryConfig.model_validate(
            self.model_dump(include=set(SummaryConfig.model_fields))
        )


summary_settings = SummarySettings()
