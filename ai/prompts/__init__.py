from ai.prompts.summary import (
    CHUNK_SYSTEM_PROMPT,
    CHUNK_USER_PROMPT,
    SINGLE_SHOT_SYSTEM_PROMPT,
    SINGLE_SHOT_USER_PROMPT,
)

__all__ = [
    "CHUNK_SYSTEM_PROMPT",
    "CHUNK_USER_PROMPT",
    "SINGLE_SHOT_SYSTEM_PROMPT",
    "SINGLE_SHOT_USER_PROMPT",
]
