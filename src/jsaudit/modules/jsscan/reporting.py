"""Scan result output helpers."""

import json
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .models import AssetReport, ScanResult


def write_json_report(result: ScanResult, path: Path) -> Path:
    """Write the scan result as JSON and return the path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(result.to_dict(), indent=2), encoding="utf-8")
    return path


def print_scan_summary(result: ScanResult, console: Console) -> None:
    """Print a per-asset summary table followed by findings detail."""
    if not result.reports:
        console.print("[yellow]No scannable .js files found.[/yellow]")
        return

    table = Table(title=f"Scan results for {escape(result.target)}")
    table.add_column("Asset", overflow="fold")
    table.add_column("Vulns", justify="right")
    table.add_column("Secrets", justify="right")
    table.add_column("Endpoints", justify="right")
    table.add_column("Status")

    for report in result.reports:
        if report.findings is not None:
            table.add_row(
                escape(report.asset_url),
                str(len(report.findings.vulnerabilities)),
                str(len(report.findings.secrets)),
                str(len(report.findings.endpoints)),
                "[green]ok[/green]",
            )
        else:
            table.add_row(escape(report.asset_url), "-", "-", "-", "[red]error[/red]")
    console.print(table)

    for report in result.reports:
        _print_asset_detail(report, console)


def _print_asset_detail(report: AssetReport, console: Console) -> None:
    if report.error is not None:
        console.print(
            Panel(escape(report.error.message), title=escape(report.asset_url), border_style="red")
        )
        return

    findings = report.findings
    if findings is None or findings.is_empty:
        console.print(f"[dim]{escape(report.asset_url)}: no issues found[/dim]")
        return

    lines: list[str] = []
    for vuln in findings.vulnerabilities:
        lines.append(f"[bold red]{escape(vuln.title)}[/bold red]")
        lines.append(f"  {escape(vuln.description)}")
        lines.append(f"  [dim]{escape(vuln.snippet)}[/dim]")
    for secret in findings.secrets:
        lines.append(
            f"[bold yellow]{escape(secret.type)}[/bold yellow]: [dim]{escape(secret.snippet)}[/dim]"
        )
    if findings.endpoints:
        lines.append("[bold cyan]Endpoints[/bold cyan]")
        lines.extend(f"  {escape(endpoint.url)}" for endpoint in findings.endpoints)

    console.print(Panel("\n".join(lines), title=escape(report.asset_url), border_style="cyan"))
