from pydantic_ai.models import Model, google, openai
from pydantic_ai.providers.github import GitHubProvider
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.openai import OpenAIProvider
from pydantic_ai.settings import ModelSettings

from enums import LLMName, Provider
from settings.core import core_settings


def get_default_llm() -> LLMName:
    """Pick the llm from the configured API keys.

    Returns:
        The explicit llm override, otherwise the first provider with a key.

    """
    if core_settings.llm:
        return core_settings.llm
    if core_settings.google_api_key:
        return LLMName.GEMINI_2_5_FLASH_LITE
    if core_settings.github_api_key:
        return LLMName.GITHUB_GPT_4_1_MINI
    if core_settings.openai_api_key:
        return LLMName.OPENAI_GPT_4_1_MINI

    msg = "Google API key or GitHub API key or OpenAI API key is required"
    raise ValueError(msg)


def get_model(
    llm: LLMName, temperature: float, timeout: float
) -> tuple[Model, ModelSettings]:
    """Get a model and its sampling settings by llm name.

    Args:
        llm: The llm name.
        temperature: The sampling temperature.
        timeout: The request timeout in seconds.

    Returns:
        The model and settings.

    """
    provider, model_name = llm.decompose()
    if provider == Provider.GOOGLE:
        return (
            google.GoogleModel(
                model_name=model_name,
                provider=GoogleProvider(api_key=core_settings.google_api_key),
            ),
            google.GoogleModelSettings(temperature=temperature, timeout=timeout),
        )
    if provider == Provider.GITHUB:
        return (
            openai.OpenAIChatModel(
                model_name=model_name,
                provider=GitHubProvider(api_key=core_settings.github_api_key),
            ),
            openai.OpenAIChatModelSettings(temperature=temperature, timeout=timeout),
        )
    if provider == Provider.OPENAI:
        return (
            openai.OpenAIChatModel(
                model_name=model_name,
                provider=OpenAIProvider(api_key=core_settings.openai_api_key),
            ),
            openai.OpenAIChatModelSettings(temperature=temperature, timeout=timeout),
        )

    msg = f"Provider {provider} not supported"
    raise ValueError(msg)
