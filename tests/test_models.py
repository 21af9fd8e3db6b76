"""Tests for scan data models."""

import pytest

from jsaudit.modules.jsscan import (
    AssetError,
    AssetReport,
    Endpoint,
    ErrorKind,
    FindingsSet,
    ScanResult,
    Secret,
    UrlList,
)


class TestFindingsSet:
    """Tests for FindingsSet parsing and serialization."""

    def test_from_dict_accepts_string_and_object_endpoints(self) -> None:
        findings = FindingsSet.from_dict(
            {
                "secrets": [{"type": "JWT", "snippet": "token = 'eyJ'"}],
                "endpoints": ["/api/users", {"url": "https://api.example.com"}],
                "vulnerabilities": [],
            }
        )
        assert findings.secrets == [Secret(type="JWT", snippet="token = 'eyJ'")]
        assert findings.endpoints == [Endpoint("/api/users"), Endpoint("https://api.example.com")]
        assert findings.total == 3

    def test_missing_sections_default_to_empty(self) -> None:
        findings = FindingsSet.from_dict({"endpoints": None})
        assert findings.is_empty

    def test_to_dict_uses_wire_format(self) -> None:
        findings = FindingsSet(endpoints=[Endpoint("/a")])
        assert findings.to_dict() == {"secrets": [], "endpoints": ["/a"], "vulnerabilities": []}

    @pytest.mark.parametrize(
        "data",
        [
            {"secrets": "nope"},
            {"secrets": [{"type": "Key"}]},
            {"vulnerabilities": [{"title": "t", "snippet": "s"}]},
            {"endpoints": [42]},
        ],
    )
    def test_malformed_input_rejected(self, data: dict) -> None:
        with pytest.raises(ValueError):
            FindingsSet.from_dict(data)

    def test_non_dict_rejected(self) -> None:
        with pytest.raises(ValueError):
            FindingsSet.from_dict(["secrets"])  # type: ignore[arg-type]


class TestUrlList:
    """Tests for UrlList."""

    def test_from_text_trims_and_skips_blank_lines(self) -> None:
        urls = UrlList.from_text("  https://a.com/1.js \n\n\t\nhttps://a.com/2.js\n")
        assert urls.urls == ("https://a.com/1.js", "https://a.com/2.js")


class TestAssetReport:
    """Tests for AssetReport and ScanResult serialization."""

    def test_error_report_serializes_kind(self) -> None:
        report = AssetReport(
            asset_url="https://a.com/1.js",
            error=AssetError(ErrorKind.ACCESS_DENIED, "denied"),
        )
        assert not report.ok
        assert report.to_dict() == {
            "asset_url": "https://a.com/1.js",
            "findings": None,
            "error": {"kind": "access_denied", "message": "denied"},
        }

    def test_scan_result_to_dict(self) -> None:
        result = ScanResult(
            target="example.com",
            reports=[AssetReport(asset_url="https://a.com/1.js", findings=FindingsSet())],
        )
        data = result.to_dict()

        assert len(result) == 1
        assert result[0].ok
        assert data["target"] == "example.com"
        assert data["assets"][0]["findings"] == {
            "secrets": [],
            "endpoints": [],
            "vulnerabilities": [],
        }
        assert data["assets"][0]["error"] is None
