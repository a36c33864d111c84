from enum import StrEnum


class Provider(StrEnum):
    GOOGLE = "google"
    GITHUB = "github"
    OPENAI = "openai"


class LLMName(StrEnum):
    # Google
    GEMINI_2_5_FLASH = f"{Provider.GOOGLE.value}:gemini-2.5-flash"
    GEMINI_2_5_FLASH_LITE = f"{Provider.GOOGLE.value}:gemini-2.5-flash-lite"
    # GitHub
    GITHUB_GPT_4_O_MINI = f"{Provider.GITHUB.value}:gpt-4o-mini"
    GITHUB_GPT_4_1_MINI = f"{Provider.GITHUB.value}:openai/gpt-4.1-mini"
    # OpenAI
    OPENAI_GPT_4_1_MINI = f"{Provider.OPENAI.value}:gpt-4.1-mini"
    OPENAI_GPT_5_MINI = f"{Provider.OPENAI.value}:gpt-5-mini"

    def decompose(self) -> tuple[Provider, str]:
        """Decompose the model into provider and llm name.

        Returns:
            The provider and model name.

        """
        provider, model_name = self.value.split(":")
        return Provider(provider), model_name
