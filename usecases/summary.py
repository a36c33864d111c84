import asyncio
from pathlib import Path

import logfire

from ai.generator import Generator
from ai.summarize import choose_path, summarize
from constants import MEBIBYTE
from enums import DocumentType
from exceptions import (
    DocumentEmptyError,
    DocumentMissingError,
    DocumentNotSupportedError,
    DocumentTextTooLongError,
    DocumentTooLargeError,
)
from schemas import SummaryConfig, SummaryResponse
from settings import core_settings
from utils import clean_text, extract_text, render_markdown


def format_file_size(size: int) -> str:
    if size >= MEBIBYTE and size % MEBIBYTE == 0:
        return f"{size // MEBIBYTE} MB"

    return f"{size:,} bytes"


class SummaryUsecase:
    def __init__(self, generator: Generator, config: SummaryConfig):
        self._generator = generator
        self._config = config

    @staticmethod
    def _validate_document(
        file_size: int | None, filename: str, content_type: str | None
    ) -> DocumentType:
        """Validate the upload and resolve its type.

        Args:
            file_size: The file size.
            filename: The filename.
            content_type: The declared MIME type.

        Returns:
            The document type.

        """
        suffix = Path(filename).suffix.lower().removeprefix(".")
        for document_type in DocumentType:
            if content_type == document_type.mime_type or suffix == document_type:
                break
        else:
            raise DocumentNotSupportedError

        limit = core_settings.max_file_size
        if file_size is not None and file_size > limit:
            raise DocumentTooLargeError(
                message=f"File is larger than {format_file_size(size=limit)}."
            )

        return document_type

    async def summarize_document(
        self,
        content: bytes | None,
        filename: str | None,
        content_type: str | None,
    ) -> SummaryResponse:
        """Extract the upload's text and summarize it.

        Args:
            content: The raw file content.
            filename: The filename.
            content_type: The declared MIME type.

        Returns:
            The rendered Markdown summary.

        """
        if content is None:
            raise DocumentMissingError

        name = filename or "uploaded-file"
        document_type = self._validate_document(
            file_size=len(content), filename=name, content_type=content_type
        )

        text = clean_text(
            await asyncio.to_thread(
                extract_text, content=content, document_type=document_type
            )
        )
        if not text:
            raise DocumentEmptyError
        if len(text) > self._config.max_chars:
            raise DocumentTextTooLongError(
                message=(
                    f"This document is quite large ({len(text):,} chars). "
                    "Please upload a smaller file."
                )
            )

        with logfire.span(
            "summarize {filename}",
            filename=name,
            chars=len(text),
            path=choose_path(text=text, config=self._config),
        ):
            summary = await summarize(
                text=text, config=self._config, generator=self._generator
            )

        return SummaryResponse(
            markdown=render_markdown(summary=summary, filename=name)
        )
