"""Scan tuning settings shared by one scan."""

from dataclasses import dataclass

DEFAULT_CHUNK_SIZE = 500_000
DEFAULT_CHUNK_OVERLAP = 5_000
DEFAULT_HTTP_TIMEOUT = 30.0
DEFAULT_WORKERS = 1


def default_overlap_for(chunk_size: int) -> int:
    """Overlap used when none is configured: 1% of the chunk, capped at the default."""
    return min(DEFAULT_CHUNK_OVERLAP, chunk_size // 100)


@dataclass
class ScanSettings:
    """Runtime settings shared by one scan.

    ``chunk_overlap`` left as None is derived from ``chunk_size`` so a smaller
    chunk size never collides with the default overlap.
    """

    chunk_size: int = DEFAULT_CHUNK_SIZE
    chunk_overlap: int | None = None
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    workers: int = DEFAULT_WORKERS

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive (got {self.chunk_size})")
        if self.chunk_overlap is None:
            self.chunk_overlap = default_overlap_for(self.chunk_size)
        if not 0 <= self.chunk_overlap < self.chunk_size:
            raise ValueError(
                f"chunk_overlap must be in [0, chunk_size) (got {self.chunk_overlap} "
                f"for chunk_size {self.chunk_size})"
            )
        if self.http_timeout <= 0:
            raise ValueError(f"http_timeout must be positive (got {self.http_timeout})")
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1 (got {self.workers})")
