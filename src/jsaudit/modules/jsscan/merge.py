"""Merge per-chunk findings into one deduplicated set per asset."""

from collections.abc import Iterable

from .models import FindingsSet


class FindingsAccumulator:
    """Stable, identity-keyed deduplication across successive findings sets.

    The first occurrence of an identity wins and later duplicates are
    dropped, so feeding sets one at a time gives the same result as merging
    them all at once.
    """

    def __init__(self) -> None:
        self._merged = FindingsSet()
        self._secret_keys: set[str] = set()
        self._endpoint_keys: set[str] = set()
        self._vulnerability_keys: set[str] = set()

    def add(self, findings: FindingsSet) -> None:
        for secret in findings.secrets:
            if secret.identity not in self._secret_keys:
                self._secret_keys.add(secret.identity)
                self._merged.secrets.append(secret)
        for endpoint in findings.endpoints:
            if endpoint.identity not in self._endpoint_keys:
                self._endpoint_keys.add(endpoint.identity)
                self._merged.endpoints.append(endpoint)
        for vulnerability in findings.vulnerabilities:
            if vulnerability.identity not in self._vulnerability_keys:
                self._vulnerability_keys.add(vulnerability.identity)
                self._merged.vulnerabilities.append(vulnerability)

    def result(self) -> FindingsSet:
        return FindingsSet(
            secrets=list(self._merged.secrets),
            endpoints=list(self._merged.endpoints),
            vulnerabilities=list(self._merged.vulnerabilities),
        )


def merge_findings(results: Iterable[FindingsSet]) -> FindingsSet:
    """Merge findings sets in order, keeping the first entry per identity key."""
    accumulator = FindingsAccumulator()
    for findings in results:
        accumulator.add(findings)
    return accumulator.result()
