from http import HTTPStatus

import logfire
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routers import health, summary
from exceptions import BaseError
from settings import core_settings

app = FastAPI(title="Document Brief")


logger = logfire.configure(send_to_logfire="if-token-present")
logfire.instrument_fastapi(app=app)
logfire.instrument_pydantic_ai()

app.add_middleware(
    middleware_class=CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(exc_class_or_status_code=BaseError)
async def exception_handler(request: Request, exc: BaseError) -> JSONResponse:
    """Exception handler.

    Args:
        request: The request.
        exc: The exception.

    Returns:
        The JSON response.

    """
    return JSONResponse(content={"error": exc.message}, status_code=exc.status_code)


@app.exception_handler(exc_class_or_status_code=Exception)
async def unexpected_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    logfire.exception("summarize error: {error}", error=str(exc), _exc_info=exc)
    return JSONResponse(
        content={"error": "Unexpected server error."},
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
    )


app.include_router(router=health.router)
app.include_router(router=summary.router)


if __name__ == "__main__":
    uvicorn.run(app="main:app", host=core_settings.host, port=core_settings.port)
