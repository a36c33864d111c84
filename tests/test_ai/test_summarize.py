import asyncio
from typing import Any

import pytest

from ai.prompts import CHUNK_SYSTEM_PROMPT, SINGLE_SHOT_SYSTEM_PROMPT
from ai.summarize import (
    cap_summary,
    choose_path,
    merge_partial_summaries,
    summarize,
)
from enums import SummaryPath
from exceptions import (
    EmptyInputError,
    GenerationCallError,
    GenerationParseError,
    SchemaError,
)
from schemas import Summary
from settings.summary import SummarySettings
from tests.fakes import ScriptedGenerator

CONFIG = SummarySettings(
    single_shot_threshold=50, chunk_size=100, chunk_overlap=20
).config

TWO_PARAGRAPHS = "Alpha " * 9 + "Alpha\n\n" + "Beta " * 11 + "Beta"


class DelayedGenerator:
    """Finishes later calls first and records cancellations."""

    def __init__(self, fail_on: int | None = None):
        self.fail_on = fail_on
        self.calls = 0
        self.cancelled = 0

    async def generate(self, system: str, user: str) -> Any:
        call = self.calls
        self.calls += 1
        if call == self.fail_on:
            await asyncio.sleep(0.01)
            msg = f"call {call} failed"
            raise GenerationCallError(message=msg)

        try:
            await asyncio.sleep(0.05 if self.fail_on is not None else 0.01 * (8 - call))
        except asyncio.CancelledError:
            self.cancelled += 1
            raise

        return {"key_insights": [f"chunk {call}"]}


def test_choose_path_boundary() -> None:
    assert choose_path(text="x" * 50, config=CONFIG) == SummaryPath.SINGLE_SHOT
    assert choose_path(text="x" * 51, config=CONFIG) == SummaryPath.MAP_REDUCE


def test_merge_partial_summaries() -> None:
    merged = merge_partial_summaries(
        partials=[
            Summary(risks=["Data loss"], action_items=["Back up  nightly"]),
            Summary(risks=["data loss", "New risk"], action_items=[" "]),
        ]
    )

    assert merged == Summary(
        risks=["Data loss", "New risk"], action_items=["Back up nightly"]
    )


def test_cap_summary() -> None:
    summary = Summary(
        executive_summary=[str(i) for i in range(30)],
        key_insights=[str(i) for i in range(30)],
        risks=["only"],
    )

    capped = cap_summary(summary=summary, config=SummarySettings().config)

    assert capped.executive_summary == summary.executive_summary[:12]
    assert capped.key_insights == summary.key_insights[:20]
    assert capped.risks == ["only"]
    assert capped.action_items == []


@pytest.mark.asyncio
async def test_single_shot_at_threshold() -> None:
    generator = ScriptedGenerator(responses=[{"risks": ["Risk", "risk"]}])

    summary = await summarize(text="x" * 50, config=CONFIG, generator=generator)

    assert len(generator.calls) == 1
    assert generator.calls[0][0] == SINGLE_SHOT_SYSTEM_PROMPT
    assert generator.calls[0][1].endswith("x" * 50)
    assert summary.risks == ["Risk", "risk"]


@pytest.mark.asyncio
async def test_single_shot_is_capped() -> None:
    generator = ScriptedGenerator(
        responses=[{"key_insights": [f"insight {i}" for i in range(25)]}]
    )

    summary = await summarize(text="short text", config=CONFIG, generator=generator)

    assert summary.key_insights == [f"insight {i}" for i in range(20)]


@pytest.mark.asyncio
async def test_map_reduce_above_threshold() -> None:
    generator = ScriptedGenerator()

    await summarize(text="x" * 51, config=CONFIG, generator=generator)

    assert len(generator.calls) == 1
    assert generator.calls[0][0] == CHUNK_SYSTEM_PROMPT


@pytest.mark.asyncio
async def test_map_reduce_merges_partials() -> None:
    generator = ScriptedGenerator(
        responses=[
            {"risks": ["Data loss"], "executive_summary": ["Alpha matters."]},
            {"risks": ["data loss", "New risk"]},
        ]
    )

    summary = await summarize(text=TWO_PARAGRAPHS, config=CONFIG, generator=generator)

    assert len(generator.calls) == 2
    assert "Alpha" in generator.calls[0][1]
    assert generator.calls[1][1].endswith("Beta")
    assert summary.risks == ["Data loss", "New risk"]
    assert summary.executive_summary == ["Alpha matters."]
    assert summary.key_insights == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        GenerationCallError(),
        GenerationParseError(),
        {"risks": "not a list"},
    ],
)
async def test_map_reduce_fails_fast(error: Any) -> None:
    text = "\n\n".join(["Gamma " * 12] * 4)
    generator = ScriptedGenerator(responses=[{"risks": ["ok"]}, error, {}, {}])

    with pytest.raises((GenerationCallError, GenerationParseError, SchemaError)):
        await summarize(text=text, config=CONFIG, generator=generator)

    assert len(generator.calls) == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["", "   \n\t "])
async def test_empty_input(text: str) -> None:
    generator = ScriptedGenerator()

    with pytest.raises(EmptyInputError):
        await summarize(text=text, config=CONFIG, generator=generator)

    assert generator.calls == []


@pytest.mark.asyncio
async def test_concurrent_chunks_merge_in_chunk_order() -> None:
    config = CONFIG.model_copy(update={"max_concurrency": 8})
    text = "\n\n".join([f"Paragraph {i} " * 6 for i in range(5)])
    generator = DelayedGenerator()

    summary = await summarize(text=text, config=config, generator=generator)

    assert generator.calls == 5
    assert summary.key_insights == [f"chunk {i}" for i in range(5)]


@pytest.mark.asyncio
async def test_concurrent_chunks_cancel_on_failure() -> None:
    config = CONFIG.model_copy(update={"max_concurrency": 2})
    text = "\n\n".join([f"Paragraph {i} " * 6 for i in range(5)])
    generator = DelayedGenerator(fail_on=0)

    with pytest.raises(GenerationCallError, match="call 0 failed"):
        await summarize(text=text, config=config, generator=generator)

    assert generator.calls == 2
    assert generator.cancelled == 1
