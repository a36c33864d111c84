from http import HTTPStatus

from exceptions.base import BaseError


class DocumentMissingError(BaseError):
    def __init__(
        self,
        message: str = "No file found in request.",
        status_code: HTTPStatus = HTTPStatus.BAD_REQUEST,
    ):
        super().__init__(message=message, status_code=status_code)


class DocumentNotSupportedError(BaseError):
    def __init__(
        self,
        message: str = "Only PDF (.pdf) or DOCX (.docx) are allowed.",
        status_code: HTTPStatus = HTTPStatus.BAD_REQUEST,
    ):
        super().__init__(message=message, status_code=status_code)


class DocumentTooLargeError(BaseError):
    def __init__(
        self,
        message: str = "File is larger than the upload limit.",
        status_code: HTTPStatus = HTTPStatus.BAD_REQUEST,
    ):
        super().__init__(message=message, status_code=status_code)


class DocumentEmptyError(BaseError):
    def __init__(
        self,
        message: str = "Could not extract text from this file.",
        status_code: HTTPStatus = HTTPStatus.BAD_REQUEST,
    ):
        super().__init__(message=message, status_code=status_code)


class DocumentTextTooLongError(BaseError):
    def __init__(
        self,
        message: str = "This document is too large. Please upload a smaller file.",
        status_code: HTTPStatus = HTTPStatus.REQUEST_ENTITY_TOO_LARGE,
    ):
        super().__init__(message=message, status_code=status_code)
