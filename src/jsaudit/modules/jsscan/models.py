"""Data models for JavaScript asset scanning."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class Domain:
    """Scan target discovered from an origin's root document."""

    host: str


@dataclass(frozen=True)
class UrlList:
    """Scan target given as an explicit, ordered list of asset URLs."""

    urls: tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> UrlList:
        """Build a list from newline separated input, skipping blank lines."""
        return cls(tuple(line.strip() for line in text.splitlines() if line.strip()))


ScanTarget = Domain | UrlList


@dataclass
class CodeChunk:
    """A bounded slice of an asset's source submitted to the analyzer."""

    text: str
    ordinal: int
    offset: int = 0


@dataclass
class Secret:
    type: str
    snippet: str

    @property
    def identity(self) -> str:
        return self.snippet


@dataclass
class Endpoint:
    url: str

    @property
    def identity(self) -> str:
        return self.url


@dataclass
class Vulnerability:
    title: str
    description: str
    snippet: str

    @property
    def identity(self) -> str:
        return self.snippet


@dataclass
class FindingsSet:
    """Findings for one chunk or, once merged, for one asset."""

    secrets: list[Secret] = field(default_factory=list)
    endpoints: list[Endpoint] = field(default_factory=list)
    vulnerabilities: list[Vulnerability] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.secrets) + len(self.endpoints) + len(self.vulnerabilities)

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "secrets": [{"type": s.type, "snippet": s.snippet} for s in self.secrets],
            "endpoints": [e.url for e in self.endpoints],
            "vulnerabilities": [
                {"title": v.title, "description": v.description, "snippet": v.snippet}
                for v in self.vulnerabilities
            ],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FindingsSet:
        """Parse the analyzer wire format.

        Raises ValueError when a section is not a list or an entry lacks a
        required field. Endpoints may be given as strings or ``{"url": ...}``.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Findings must be an object, got {type(data).__name__}")

        def _section(name: str) -> list[Any]:
            value = data.get(name) or []
            if not isinstance(value, list):
                raise ValueError(f"'{name}' must be a list, got {type(value).__name__}")
            return value

        def _field(entry: Any, section: str, key: str) -> str:
            if not isinstance(entry, dict) or not isinstance(entry.get(key), str):
                raise ValueError(f"'{section}' entry missing string field '{key}': {entry!r}")
            return entry[key]

        secrets = [
            Secret(type=_field(e, "secrets", "type"), snippet=_field(e, "secrets", "snippet"))
            for e in _section("secrets")
        ]
        endpoints = [
            Endpoint(url=e if isinstance(e, str) else _field(e, "endpoints", "url"))
            for e in _section("endpoints")
        ]
        vulnerabilities = [
            Vulnerability(
                title=_field(e, "vulnerabilities", "title"),
                description=_field(e, "vulnerabilities", "description"),
                snippet=_field(e, "vulnerabilities", "snippet"),
            )
            for e in _section("vulnerabilities")
        ]
        return cls(secrets=secrets, endpoints=endpoints, vulnerabilities=vulnerabilities)


class ErrorKind(Enum):
    TARGET_MALFORMED = "target_malformed"
    ACCESS_DENIED = "access_denied"
    RATE_LIMITED = "rate_limited"
    EMPTY_ASSET = "empty_asset"
    RETRIEVAL_FAILED = "retrieval_failed"
    ANALYSIS_FAILED = "analysis_failed"
    UNCLASSIFIED = "unclassified"


@dataclass
class AssetError:
    """Classified, user-facing failure recorded on an asset report."""

    kind: ErrorKind
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "message": self.message}


@dataclass
class AssetReport:
    """Outcome for one asset: either merged findings or a classified error."""

    asset_url: str
    findings: FindingsSet | None = None
    error: AssetError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.findings is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "asset_url": self.asset_url,
            "findings": self.findings.to_dict() if self.findings is not None else None,
            "error": self.error.to_dict() if self.error is not None else None,
        }


def _now() -> str:
    return datetime.now(UTC).isoformat()


@dataclass
class ScanResult:
    """Ordered asset reports for one scan, in resolution order."""

    target: str
    reports: list[AssetReport] = field(default_factory=list)
    started_at: str = field(default_factory=_now)
    completed_at: str | None = None

    def __len__(self) -> int:
        return len(self.reports)

    def __iter__(self):
        return iter(self.reports)

    def __getitem__(self, index: int) -> AssetReport:
        return self.reports[index]

    def to_dict(self) -> dict[str, Any]:
        return {
            "target": self.target,
            "started_at": self.started_at,
            "completed_at": self.completed_at,
            "assets": [report.to_dict() for report in self.reports],
        }
