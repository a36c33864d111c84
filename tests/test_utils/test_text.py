import pytest

from utils import cap_list, clean_text, unique_normalized_lines

LINES = [
    ["b", "a", "b", "c"],
    ["Risk A", "risk   a", "RISK A"],
    ["  padded\tline \n", "padded line", "", "   ", "Other"],
    ["multi\nline\n\nbullet", "MULTI LINE BULLET", "x"],
    [],
]


def test_unique_normalized_lines_is_case_insensitive() -> None:
    assert unique_normalized_lines(["Risk A", "risk   a", "RISK A"]) == ["Risk A"]


def test_unique_normalized_lines_keeps_first_seen_order() -> None:
    assert unique_normalized_lines(["b", "a", "b", "c"]) == ["b", "a", "c"]


def test_unique_normalized_lines_collapses_whitespace() -> None:
    result = unique_normalized_lines(["  padded\tline \n", "", "   ", "multi\n\nline"])

    assert result == ["padded line", "multi line"]


@pytest.mark.parametrize("lines", LINES)
def test_unique_normalized_lines_is_idempotent(lines: list[str]) -> None:
    once = unique_normalized_lines(lines)

    assert unique_normalized_lines(once) == once


@pytest.mark.parametrize("limit", [0, 1, 3, 4, 10])
def test_cap_list_returns_prefix(limit: int) -> None:
    items = ["a", "b", "c", "d"]

    capped = cap_list(items=items, limit=limit)

    assert len(capped) == min(len(items), limit)
    assert capped == items[: len(capped)]


def test_clean_text_keeps_newlines() -> None:
    raw = "\r\n  Title  \r\nline one   \nline two\t\n\n"

    assert clean_text(raw) == "Title\nline one\nline two"
