from exceptions.base import BaseError
from exceptions.document import (
    DocumentEmptyError,
    DocumentMissingError,
    DocumentNotSupportedError,
    DocumentTextTooLongError,
    DocumentTooLargeError,
)
from exceptions.summary import (
    EmptyInputError,
    GenerationCallError,
    GenerationParseError,
    SchemaError,
)

__all__ = [
    "BaseError",
    "DocumentEmptyError",
    "DocumentMissingError",
    "DocumentNotSupportedError",
    "DocumentTextTooLongError",
    "DocumentTooLargeError",
    "EmptyInputError",
    "GenerationCallError",
    "GenerationParseError",
    "SchemaError",
]
