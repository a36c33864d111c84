from utils.chunks import join_chunks, split_text
from utils.extract import extract_text
from utils.markdown import render_markdown
from utils.text import cap_list, clean_text, unique_normalized_lines

__all__ = [
    "cap_list",
    "clean_text",
    "extract_text",
    "join_chunks",
    "render_markdown",
    "split_text",
    "unique_normalized_lines",
]
