import re
from typing import Iterable

_WHITESPACE = re.compile(r"\s+")
_TRAILING_SPACES = re.compile(r"[ \t]+\n")


def clean_text(text: str) -> str:
    """Normalize extracted text while keeping line breaks for the chunker."""
    return _TRAILING_SPACES.sub("\n", text.replace("\r", "")).strip()


def unique_normalized_lines(lines: Iterable[str]) -> list[str]:
    """Return de-duplicated lines in first-seen order.

    Lines are trimmed and internal whitespace runs collapse to one space.
    Two lines are duplicates when they differ only by case; the first
    casing wins.

    Args:
        lines: The raw lines.

    Returns:
        The normalized, unique lines.

    """
    seen: set[str] = set()
    result: list[str] = []

    for raw in lines:
        normalized = _WHITESPACE.sub(" ", raw.strip())
        if not normalized:
            continue

        fingerprint = normalized.lower()
        if fingerprint not in seen:
            seen.add(fingerprint)
            result.append(normalized)

    return result


def cap_list(items: list[str], limit: int) -> list[str]:
    return items[:limit]
