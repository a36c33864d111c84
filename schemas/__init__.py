from schemas.health import LivenessResponse
from schemas.summary import (
    Chunk,
    ErrorResponse,
    Summary,
    SummaryConfig,
    SummaryResponse,
    validate_summary,
)

__all__ = [
    "Chunk",
    "ErrorResponse",
    "LivenessResponse",
    "Summary",
    "SummaryConfig",
    "SummaryResponse",
    "validate_summary",
]
