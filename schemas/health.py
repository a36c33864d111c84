from pydantic import BaseModel, Field


class LivenessResponse(BaseModel):
    status: bool = Field(default=True, description="Service status")
