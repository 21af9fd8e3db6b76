"""Coordinator for discovering, retrieving and analyzing JavaScript assets."""

import asyncio
import logging
import time
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Protocol
from urllib.parse import urlsplit

from jsaudit.config.settings import ScanSettings
from jsaudit.tools.http import HTTPResponse

from .analyzer import Analyzer
from .chunking import split_code
from .errors import (
    EmptyAssetError,
    RetrievalError,
    TargetMalformedError,
    TargetUnreachableError,
    classify_error,
)
from .fetcher import AssetFetcher
from .merge import FindingsAccumulator
from .models import AssetReport, Domain, FindingsSet, ScanResult, ScanTarget, UrlList
from .resolver import resolve_script_urls

logger = logging.getLogger(__name__)

Progress = Callable[[str], None]


class Fetcher(Protocol):
    async def fetch(self, url: str) -> HTTPResponse: ...


def root_url_for(host: str) -> str:
    """Return the root document URL for a domain target.

    Raises TargetMalformedError for blank or unparsable hosts.
    """
    host = host.strip()
    if not host:
        raise TargetMalformedError("Domain cannot be empty.")
    url = host if "://" in host else f"https://{host}"
    try:
        parts = urlsplit(url)
        hostname = parts.hostname
    except ValueError as exc:
        raise TargetMalformedError(f"Invalid domain {host!r}: {exc}") from None
    if parts.scheme not in ("http", "https") or not hostname or any(c.isspace() for c in url):
        raise TargetMalformedError(f"Invalid domain {host!r}.")
    return url


def validate_target(target: ScanTarget) -> None:
    """Raise TargetMalformedError for an empty or unsupported target."""
    if isinstance(target, Domain):
        root_url_for(target.host)
    elif isinstance(target, UrlList):
        if not any(url.strip() for url in target.urls):
            raise TargetMalformedError("URL list cannot be empty.")
    else:
        raise TargetMalformedError(f"Unsupported scan target: {target!r}")


def describe_target(target: ScanTarget) -> str:
    if isinstance(target, Domain):
        return target.host.strip()
    return f"{len(target.urls)} URL(s)"


class ScanOrchestrator:
    """Run the resolve, retrieve, split, analyze and merge pipeline for one target.

    Assets are pulled from an ordered queue by ``settings.workers`` workers
    (one by default, which processes assets strictly one at a time). Reports
    are stored by resolution index, so output order never depends on timing.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        analyzer: Analyzer,
        settings: ScanSettings | None = None,
    ):
        self.fetcher = fetcher
        self.analyzer = analyzer
        self.settings = settings or ScanSettings()

    async def scan(self, target: ScanTarget, progress: Progress | None = None) -> ScanResult:
        """Scan a target and return one report per resolved asset.

        Raises TargetMalformedError before any I/O for an empty or invalid
        target, and TargetUnreachableError when a domain's root document
        cannot be retrieved. Per-asset failures are recorded on the reports.
        """
        validate_target(target)
        result = ScanResult(target=describe_target(target))
        assets = await self.resolve_targets(target)
        if progress:
            progress(f"● resolved {len(assets)} script(s)")
        result.reports = await self._run_pipeline(assets, progress)
        result.completed_at = datetime.now(UTC).isoformat()
        return result

    async def resolve_targets(self, target: ScanTarget) -> list[str]:
        """Return the ordered, deduplicated asset URLs for a target."""
        if isinstance(target, UrlList):
            return list(dict.fromkeys(url.strip() for url in target.urls if url.strip()))

        root_url = root_url_for(target.host)
        try:
            response = await self.fetcher.fetch(root_url)
        except RetrievalError as exc:
            error = classify_error(exc)
            raise TargetUnreachableError(
                f"Could not retrieve {root_url}: {error.message}", error
            ) from exc
        # Resolve against the final URL so redirects to another origin or path count.
        return resolve_script_urls(response.body, response.url)

    async def _run_pipeline(self, assets: list[str], progress: Progress | None) -> list[AssetReport]:
        if not assets:
            return []

        queue: asyncio.Queue[tuple[int, str]] = asyncio.Queue()
        for item in enumerate(assets):
            queue.put_nowait(item)
        reports: list[AssetReport | None] = [None] * len(assets)

        async def worker() -> None:
            while True:
                try:
                    index, url = queue.get_nowait()
                except asyncio.QueueEmpty:
                    return
                reports[index] = await self.scan_asset(url, progress)
                queue.task_done()

        pool_size = min(self.settings.workers, len(assets))
        await asyncio.gather(*(worker() for _ in range(pool_size)))
        return [report for report in reports if report is not None]

    async def scan_asset(self, url: str, progress: Progress | None = None) -> AssetReport:
        """Process one asset; failures become the report's error."""
        started = time.perf_counter()
        if progress:
            progress(f"● [{url}] started")
        try:
            findings = await self._analyze_asset(url)
        except Exception as exc:
            error = classify_error(exc)
            elapsed = time.perf_counter() - started
            logger.debug("Asset %s failed: %s", url, exc, exc_info=True)
            if progress:
                progress(f"! [{url}] failed after {elapsed:.1f}s: {error.message}")
            return AssetReport(asset_url=url, error=error)

        if progress:
            elapsed = time.perf_counter() - started
            progress(f"✓ [{url}] completed: {findings.total} findings ({elapsed:.1f}s)")
        return AssetReport(asset_url=url, findings=findings)

    async def _analyze_asset(self, url: str) -> FindingsSet:
        response = await self.fetcher.fetch(url)
        code = response.body
        if not code.strip():
            raise EmptyAssetError(f"{url} is empty")

        chunks = split_code(code, self.settings.chunk_size, self.settings.chunk_overlap)
        accumulator = FindingsAccumulator()
        for chunk in chunks:
            logger.debug("Analyzing %s chunk %d/%d", url, chunk.ordinal + 1, len(chunks))
            accumulator.add(await self.analyzer.analyze(chunk.text))
        return accumulator.result()


async def run_scan(
    target: ScanTarget,
    analyzer: Analyzer,
    settings: ScanSettings | None = None,
    progress: Progress | None = None,
) -> ScanResult:
    """Scan ``target`` with a fresh AssetFetcher bound to this scan."""
    settings = settings or ScanSettings()
    async with AssetFetcher(timeout=settings.http_timeout) as fetcher:
        orchestrator = ScanOrchestrator(fetcher, analyzer, settings)
        return await orchestrator.scan(target, progress=progress)
