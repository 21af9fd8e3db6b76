"""Split large sources into bounded, overlapping chunks."""

from jsaudit.config.settings import DEFAULT_CHUNK_OVERLAP, DEFAULT_CHUNK_SIZE

from .models import CodeChunk


def split_code(
    code: str,
    max_size: int = DEFAULT_CHUNK_SIZE,
    overlap: int = DEFAULT_CHUNK_OVERLAP,
) -> list[CodeChunk]:
    """Partition ``code`` into windows of at most ``max_size`` characters.

    Each chunk after the first starts ``max_size - overlap`` characters after
    the previous one, so neighbours share exactly ``overlap`` characters. The
    last chunk ends at the end of the source. Findings duplicated across the
    shared region are removed later by the merger.
    """
    if max_size <= 0:
        raise ValueError(f"max_size must be positive (got {max_size})")
    if not 0 <= overlap < max_size:
        raise ValueError(f"overlap must be in [0, max_size) (got {overlap})")

    if len(code) <= max_size:
        return [CodeChunk(text=code, ordinal=0, offset=0)]

    step = max_size - overlap
    chunks: list[CodeChunk] = []
    start = 0
    while True:
        end = min(start + max_size, len(code))
        chunks.append(CodeChunk(text=code[start:end], ordinal=len(chunks), offset=start))
        if end == len(code):
            return chunks
        start += step
