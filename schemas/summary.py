from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    ValidationError,
    model_validator,
)

from enums import SummarySection
from exceptions import SchemaError


class Summary(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    executive_summary: list[StrictStr] = Field(
        default_factory=list, description="Executive summary"
    )
    key_insights: list[StrictStr] = Field(
        default_factory=list, description="Key insights"
    )
    risks: list[StrictStr] = Field(default_factory=list, description="Risks")
    action_items: list[StrictStr] = Field(
        default_factory=list, description="Action items"
    )

    def section(self, name: SummarySection) -> list[str]:
        return getattr(self, name.value)


def validate_summary(payload: Any) -> Summary:
    """Validate a parsed generator payload as a summary.

    Missing sections default to empty lists, unknown keys are dropped and
    anything else that is not a list of strings is rejected.

    Args:
        payload: The parsed JSON value.

    Returns:
        The validated summary.

    Raises:
        SchemaError: If the payload does not match the summary shape.

    """
    if not isinstance(payload, dict):
        msg = f"Expected a JSON object, got {type(payload).__name__}"
        raise SchemaError(message=msg)

    try:
        return Summary.model_validate(payload)
    except ValidationError as error:
        fields = ", ".join(
            sorted({str(item["loc"][0]) for item in error.errors() if item["loc"]})
        )
        raise SchemaError(message=f"Invalid summary fields: {fields}") from error


class Chunk(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int = Field(default=..., description="Position in the document", ge=0)
    start: int = Field(default=..., description="Offset in the source text", ge=0)
    overlap: int = Field(
        default=0, description="Characters shared with the previous chunk", ge=0
    )
    text: str = Field(default=..., description="Chunk text")

    @property
    def end(self) -> int:
        return self.start + len(self.text)


class SummaryConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_chars: int
    single_shot_threshold: int
    chunk_size: int
    chunk_overlap: int
    executive_summary_cap: int
    key_insights_cap: int
    risks_cap: int
    action_items_cap: int
    max_concurrency: int

    @model_validator(mode="after")
    def check_overlap(self) -> "SummaryConfig":
        if self.chunk_overlap >= self.chunk_size:
            msg = "chunk_overlap must be smaller than chunk_size"
            raise ValueError(msg)
        return self

    def cap(self, section: SummarySection) -> int:
        return getattr(self, f"{section.value}_cap")


class SummaryResponse(BaseModel):
    markdown: str = Field(default=..., description="Rendered Markdown summary")


class ErrorResponse(BaseModel):
    error: str = Field(default=..., description="Error message")
