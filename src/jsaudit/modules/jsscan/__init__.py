"""JavaScript asset discovery, chunked analysis and findings consolidation."""

from .analyzer import Analyzer, LLMAnalyzer, parse_findings
from .chunking import split_code
from .errors import (
    AnalysisError,
    EmptyAssetError,
    JsScanError,
    RetrievalError,
    TargetMalformedError,
    TargetUnreachableError,
    classify_error,
)
from .fetcher import AssetFetcher
from .merge import FindingsAccumulator, merge_findings
from .models import (
    AssetError,
    AssetReport,
    CodeChunk,
    Domain,
    Endpoint,
    ErrorKind,
    FindingsSet,
    ScanResult,
    ScanTarget,
    Secret,
    UrlList,
    Vulnerability,
)
from .orchestrator import ScanOrchestrator, run_scan, validate_target
from .reporting import print_scan_summary, write_json_report
from .resolver import resolve_script_urls

__all__ = [
    "AnalysisError",
    "Analyzer",
    "AssetError",
    "AssetFetcher",
    "AssetReport",
    "CodeChunk",
    "Domain",
    "EmptyAssetError",
    "Endpoint",
    "ErrorKind",
    "FindingsAccumulator",
    "FindingsSet",
    "JsScanError",
    "LLMAnalyzer",
    "RetrievalError",
    "ScanOrchestrator",
    "ScanResult",
    "ScanTarget",
    "Secret",
    "TargetMalformedError",
    "TargetUnreachableError",
    "UrlList",
    "Vulnerability",
    "classify_error",
    "merge_findings",
    "parse_findings",
    "print_scan_summary",
    "resolve_script_urls",
    "run_scan",
    "split_code",
    "validate_target",
    "write_json_report",
]
