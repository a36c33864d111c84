from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from api.dependencies import summary
from schemas import ErrorResponse, SummaryResponse

router = APIRouter(prefix="/summarize", tags=["Summary"])


@router.post(
    path="",
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def summarize_document(
    usecase: Annotated[
        summary.SummaryUsecase, Depends(dependency=summary.get_summary_usecase)
    ],
    file: Annotated[UploadFile | None, File()] = None,
) -> SummaryResponse:
    return await usecase.summarize_document(
        content=await file.read() if file else None,
        filename=file.filename if file else None,
        content_type=file.content_type if file else None,
    )
