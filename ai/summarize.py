import asyncio

from ai.generator import Generator
from ai.prompts import (
    CHUNK_SYSTEM_PROMPT,
    CHUNK_USER_PROMPT,
    SINGLE_SHOT_SYSTEM_PROMPT,
    SINGLE_SHOT_USER_PROMPT,
)
from enums import SummaryPath, SummarySection
from exceptions import EmptyInputError
from schemas import Chunk, Summary, SummaryConfig, validate_summary
from utils import cap_list, split_text, unique_normalized_lines


def choose_path(text: str, config: SummaryConfig) -> SummaryPath:
    if len(text) <= config.single_shot_threshold:
        return SummaryPath.SINGLE_SHOT

    return SummaryPath.MAP_REDUCE


def merge_partial_summaries(partials: list[Summary]) -> Summary:
    """Merge partial summaries section by section.

    Args:
        partials: The partial summaries in chunk order.

    Returns:
        The merged summary with normalized, de-duplicated lines.

    """
    return Summary.model_validate(
        {
            section.value: unique_normalized_lines(
                line for partial in partials for line in partial.section(section)
            )
            for section in SummarySection
        }
    )


def cap_summary(summary: Summary, config: SummaryConfig) -> Summary:
    return Summary.model_validate(
        {
            section.value: cap_list(
                items=summary.section(section), limit=config.cap(section)
            )
            for section in SummarySection
        }
    )


async def summarize_single(text: str, generator: Generator) -> Summary:
    """Summarize a short document with one generator call.

    Args:
        text: The document text.
        generator: The JSON generator.

    Returns:
        The validated summary.

    """
    payload = await generator.generate(
        system=SINGLE_SHOT_SYSTEM_PROMPT, user=SINGLE_SHOT_USER_PROMPT + text
    )
    return validate_summary(payload=payload)


async def summarize_chunk(chunk: Chunk, generator: Generator) -> Summary:
    payload = await generator.generate(
        system=CHUNK_SYSTEM_PROMPT, user=CHUNK_USER_PROMPT + chunk.text
    )
    return validate_summary(payload=payload)


async def _summarize_chunks_concurrently(
    chunks: list[Chunk], generator: Generator, max_concurrency: int
) -> list[Summary]:
    """Summarize chunks on a bounded pool of workers, keeping chunk order.

    Workers pull the next chunk only after finishing their current one, so
    the first failure cancels the calls in flight and no new call starts.

    """
    pending = iter(chunks)
    partials: dict[int, Summary] = {}

    async def _worker() -> None:
        for chunk in pending:
            partials[chunk.index] = await summarize_chunk(
                chunk=chunk, generator=generator
            )

    try:
        async with asyncio.TaskGroup() as group:
            for _ in range(min(max_concurrency, len(chunks))):
                group.create_task(_worker())
    except ExceptionGroup as error:
        raise error.exceptions[0] from None

    return [partials[chunk.index] for chunk in chunks]


async def summarize_chunked(
    text: str, config: SummaryConfig, generator: Generator
) -> Summary:
    """Summarize a long document chunk by chunk and merge the results.

    Args:
        text: The document text.
        config: The pipeline configuration.
        generator: The JSON generator.

    Returns:
        The merged summary, not yet capped.

    """
    chunks = split_text(
        text=text, chunk_size=config.chunk_size, chunk_overlap=config.chunk_overlap
    )

    if config.max_concurrency > 1 and len(chunks) > 1:
        partials = await _summarize_chunks_concurrently(
            chunks=chunks, generator=generator, max_concurrency=config.max_concurrency
        )
    else:
        partials = [
            await summarize_chunk(chunk=chunk, generator=generator) for chunk in chunks
        ]

    return merge_partial_summaries(partials=partials)


async def summarize(text: str, config: SummaryConfig, generator: Generator) -> Summary:
    """Summarize the document into the four summary sections.

    Short documents go through a single generator call, longer ones are
    chunked, summarized per chunk and merged. Every section is capped.

    Args:
        text: The extracted document text.
        config: The pipeline configuration.
        generator: The JSON generator.

    Returns:
        The final summary.

    Raises:
        EmptyInputError: If the text is blank.
        GenerationCallError: If a generator call fails.
        GenerationParseError: If a generator output is not JSON.
        SchemaError: If a generator output has the wrong shape.

    """
    if not text.strip():
        raise EmptyInputError

    if choose_path(text=text, config=config) == SummaryPath.SINGLE_SHOT:
        summary = await summarize_single(text=text, generator=generator)
    else:
        summary = await summarize_chunked(text=text, config=config, generator=generator)

    return cap_summary(summary=summary, config=config)
