from http import HTTPStatus

from exceptions.base import BaseError


class SchemaError(BaseError):
    def __init__(
        self,
        message: str = "Generated summary does not match the expected shape",
        status_code: HTTPStatus = HTTPStatus.BAD_GATEWAY,
    ):
        super().__init__(message=message, status_code=status_code)


class GenerationParseError(BaseError):
    def __init__(
        self,
        message: str = "Generated summary is not valid JSON",
        status_code: HTTPStatus = HTTPStatus.BAD_GATEWAY,
    ):
        super().__init__(message=message, status_code=status_code)


class GenerationCallError(BaseError):
    def __init__(
        self,
        message: str = "Summary generation failed",
        status_code: HTTPStatus = HTTPStatus.BAD_GATEWAY,
    ):
        super().__init__(message=message, status_code=status_code)


class EmptyInputError(BaseError):
    def __init__(
        self,
        message: str = "Nothing to summarize",
        status_code: HTTPStatus = HTTPStatus.BAD_REQUEST,
    ):
        super().__init__(message=message, status_code=status_code)
