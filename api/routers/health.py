from fastapi import APIRouter

from schemas import LivenessResponse

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(path="/liveness")
async def liveness() -> LivenessResponse:
    return LivenessResponse()
