from typing import Annotated

from fastapi import Depends

from ai.generator import Generator, JsonGenerator
from settings import summary_settings
from usecases import SummaryUsecase


def get_generator() -> Generator:
    """Get the JSON generator.

    Returns:
        The generator bound to the configured model.

    """
    return JsonGenerator.from_settings()


def get_summary_usecase(
    generator: Annotated[Generator, Depends(dependency=get_generator)],
) -> SummaryUsecase:
    """Get the summary usecase.

    Returns:
        The summary usecase.

    """
    return SummaryUsecase(generator=generator, config=summary_settings.config)
