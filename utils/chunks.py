from langchain_text_splitters import RecursiveCharacterTextSplitter

from schemas import Chunk

SEPARATORS = ["\n\n", "\n", ". ", " ", ""]


def _overlap_start(text: str, start: int, chunk_overlap: int) -> int:
    """Find where the overlap borrowed from the previous chunk begins.

    The window is at most ``chunk_overlap`` characters before ``start``.
    The overlap opens at the first word start inside the window and falls
    back to a raw character cut when the window holds no word start.

    """
    low = max(0, start - chunk_overlap)
    for position in range(low, start):
        if position == 0 or text[position - 1].isspace():
            return position

    return low


def split_text(text: str, chunk_size: int, chunk_overlap: int) -> list[Chunk]:
    """Split the text into overlapping chunks.

    Args:
        text: The source text.
        chunk_size: The maximum chunk length in characters.
        chunk_overlap: The maximum overlap between consecutive chunks.

    Returns:
        The chunks in document order.

    Raises:
        ValueError: If the sizes are inconsistent.

    """
    if chunk_size <= 0:
        msg = "chunk_size must be positive"
        raise ValueError(msg)
    if chunk_overlap < 0 or chunk_overlap >= chunk_size:
        msg = "chunk_overlap must be in [0, chunk_size)"
        raise ValueError(msg)

    pieces = RecursiveCharacterTextSplitter(
        chunk_size=chunk_size - chunk_overlap,
        chunk_overlap=0,
        separators=SEPARATORS,
        keep_separator="end",
        strip_whitespace=False,
    ).split_text(text)

    chunks: list[Chunk] = []
    start = 0
    for index, piece in enumerate(pieces):
        chunk_start = _overlap_start(
            text=text, start=start, chunk_overlap=chunk_overlap
        )
        end = start + len(piece)
        chunks.append(
            Chunk(
                index=index,
                start=chunk_start,
                overlap=start - chunk_start,
                text=text[chunk_start:end],
            )
        )
        start = end

    return chunks


def join_chunks(chunks: list[Chunk]) -> str:
    return "".join(chunk.text[chunk.overlap :] for chunk in chunks)
