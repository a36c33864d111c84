import json
import re
from typing import Any, Protocol

from pydantic_ai.messages import (
    ModelMessage,
    ModelRequest,
    ModelResponse,
    SystemPromptPart,
    TextPart,
    UserPromptPart,
)
from pydantic_ai.models import Model, ModelRequestParameters
from pydantic_ai.settings import ModelSettings

from ai.model import get_default_llm, get_model
from constants import EMPTY_PAYLOAD
from exceptions import GenerationCallError, GenerationParseError
from settings import summary_settings

_CODE_FENCE = re.compile(r"^\s*```(?:json)?\s*|\s*```\s*$", re.IGNORECASE)


class Generator(Protocol):
    async def generate(self, system: str, user: str) -> Any: ...


def strip_code_fences(content: str) -> str:
    return _CODE_FENCE.sub("", content)


def parse_json_content(content: str) -> Any:
    """Parse model output as JSON, tolerating one Markdown code fence.

    Args:
        content: The raw model text.

    Returns:
        The parsed JSON value.

    Raises:
        GenerationParseError: If neither the raw nor the unfenced text is JSON.

    """
    try:
        return json.loads(content)
    except json.JSONDecodeError:
        unfenced = strip_code_fences(content=content)

    try:
        return json.loads(unfenced)
    except json.JSONDecodeError as error:
        raise GenerationParseError(
            message=f"Generated summary is not valid JSON: {error.msg}"
        ) from error


def extract_content(response: ModelResponse) -> str:
    content = "".join(
        part.content for part in response.parts if isinstance(part, TextPart)
    )
    return content if content.strip() else EMPTY_PAYLOAD


class JsonGenerator:
    def __init__(self, model: Model, model_settings: ModelSettings | None = None):
        self._model = model
        self._model_settings = model_settings

    @classmethod
    def from_settings(cls) -> "JsonGenerator":
        """Build the generator from the configured provider.

        Returns:
            The generator.

        """
        model, model_settings = get_model(
            llm=get_default_llm(),
            temperature=summary_settings.temperature,
            timeout=summary_settings.timeout,
        )
        return cls(model=model, model_settings=model_settings)

    async def generate(self, system: str, user: str) -> Any:
        """Request one completion and parse it as JSON.

        Args:
            system: The system instruction.
            user: The user instruction.

        Returns:
            The parsed JSON value.

        Raises:
            GenerationCallError: If the model request fails.
            GenerationParseError: If the output is not JSON.

        """
        messages: list[ModelMessage] = [
            ModelRequest(
                parts=[SystemPromptPart(content=system), UserPromptPart(content=user)]
            ),
        ]

        # prompted output puts the provider in JSON mode
        parameters = ModelRequestParameters(output_mode="prompted")

        try:
            response = await self._model.request(
                messages=messages,
                model_settings=self._model_settings,
                model_request_parameters=parameters,
            )
        except Exception as error:
            raise GenerationCallError(
                message=f"Summary generation failed: {error}"
            ) from error

        return parse_json_content(content=extract_content(response=response))
