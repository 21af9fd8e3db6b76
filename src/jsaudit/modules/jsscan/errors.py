"""Scan error types and their mapping to user-facing error kinds."""

import re

from .models import AssetError, ErrorKind

_RATE_LIMIT_RE = re.compile(r"rate[ _-]?limit|quota|too many requests", re.IGNORECASE)

ACCESS_DENIED_MESSAGE = (
    "Access denied (403). The site's security (WAF) may be blocking retrieval."
)
RATE_LIMITED_MESSAGE = (
    "API quota limit reached. Please check your billing account or try again later."
)
ANALYZER_ACCESS_DENIED_MESSAGE = (
    "The analysis provider refused the request (403). Check the API key and its model access."
)
EMPTY_ASSET_MESSAGE = "File is empty."


class JsScanError(Exception):
    """Base class for scan pipeline errors."""


class TargetMalformedError(JsScanError):
    """The scan target is empty or invalid; raised before any network I/O."""


class TargetUnreachableError(JsScanError):
    """The root document of a domain target could not be retrieved."""

    def __init__(self, message: str, error: AssetError):
        super().__init__(message)
        self.error = error


class RetrievalError(JsScanError):
    """Retrieving a document failed; carries the HTTP status when there is one."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class EmptyAssetError(JsScanError):
    """The retrieved asset body is empty or whitespace only."""


class AnalysisError(JsScanError):
    """The analyzer produced no usable result for a chunk."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        rate_limited: bool = False,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.rate_limited = rate_limited or status_code == 429


def classify_error(exc: BaseException) -> AssetError:
    """Map a raw retrieval or analysis failure to an error kind.

    Errors carrying a ``status_code`` are classified from it (and the
    ``rate_limited`` flag) alone; the message text is only searched for
    status codes and rate-limit wording when no code is attached. First
    match wins.
    """
    message = str(exc) or type(exc).__name__
    status_code = getattr(exc, "status_code", None)
    rate_limited = bool(getattr(exc, "rate_limited", False))

    if status_code is not None:
        access_denied = status_code == 403
        rate_limited = rate_limited or status_code == 429
    else:
        access_denied = "403" in message
        rate_limited = rate_limited or "429" in message or bool(_RATE_LIMIT_RE.search(message))

    if access_denied:
        if isinstance(exc, AnalysisError):
            return AssetError(ErrorKind.ACCESS_DENIED, ANALYZER_ACCESS_DENIED_MESSAGE)
        return AssetError(ErrorKind.ACCESS_DENIED, ACCESS_DENIED_MESSAGE)
    if rate_limited:
        return AssetError(ErrorKind.RATE_LIMITED, RATE_LIMITED_MESSAGE)

    if isinstance(exc, EmptyAssetError):
        return AssetError(ErrorKind.EMPTY_ASSET, EMPTY_ASSET_MESSAGE)
    if isinstance(exc, TargetMalformedError):
        return AssetError(ErrorKind.TARGET_MALFORMED, message)
    if isinstance(exc, RetrievalError):
        return AssetError(ErrorKind.RETRIEVAL_FAILED, message)
    if isinstance(exc, AnalysisError):
        return AssetError(ErrorKind.ANALYSIS_FAILED, message)

    return AssetError(ErrorKind.UNCLASSIFIED, message)
