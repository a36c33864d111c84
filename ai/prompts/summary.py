OUTPUT_RULES = (
    "You are a precise analyst. Return ONLY valid JSON with keys: "
    "executive_summary, key_insights, risks, action_items "
    "(each an array of short bullet strings)."
)

SINGLE_SHOT_SYSTEM_PROMPT = OUTPUT_RULES

SINGLE_SHOT_USER_PROMPT = """Summarize the following document into those 4 sections.
Be concise, factually grounded, and avoid repetition.
Prefer bullets; keep each bullet under ~25 words.

Document:
"""

CHUNK_SYSTEM_PROMPT = (
    f"{OUTPUT_RULES} "
    "Do NOT invent information. Summarize only from the provided chunk."
)

CHUNK_USER_PROMPT = """Summarize this chunk into the 4 arrays.
Keep bullets short; leave a section empty rather than padding it.

Chunk:
"""
