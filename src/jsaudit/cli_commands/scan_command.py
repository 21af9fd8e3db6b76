"""Scan CLI command."""

import asyncio
from pathlib import Path

import typer
from rich.markup import escape

from jsaudit.modules.jsscan import (
    Domain,
    JsScanError,
    ScanTarget,
    TargetMalformedError,
    UrlList,
    validate_target,
)

from .deps import cli_module, open_llm, scan_settings
from .shared import app, configure_logging, console


def build_target(
    urls: list[str] | None,
    domain: str | None,
    urls_file: Path | None,
) -> ScanTarget:
    """Build a scan target from CLI input; a domain excludes explicit URLs."""
    if domain is not None:
        if urls or urls_file:
            raise typer.BadParameter("Use either --domain or URLs, not both.")
        return Domain(domain)

    collected = [url.strip() for url in urls or [] if url.strip()]
    if urls_file is not None:
        try:
            text = urls_file.read_text(encoding="utf-8")
        except OSError as exc:
            raise typer.BadParameter(f"Cannot read {urls_file}: {exc}") from exc
        collected.extend(UrlList.from_text(text).urls)
    return UrlList(tuple(collected))


@app.command()
def scan(
    urls: list[str] | None = typer.Argument(None, help="JavaScript file URLs to analyze"),
    domain: str | None = typer.Option(
        None, "--domain", "-d", help="Discover and analyze scripts referenced by this domain"
    ),
    urls_file: Path | None = typer.Option(
        None, "--urls-file", "-f", help="File with one JavaScript URL per line"
    ),
    json_out: Path | None = typer.Option(None, "--json", help="Write the results as JSON"),
    workers: int | None = typer.Option(
        None, "--workers", "-w", help="Assets analyzed concurrently (default 1)"
    ),
    chunk_size: int | None = typer.Option(
        None, "--chunk-size", help="Maximum characters sent to the analyzer per request"
    ),
    overlap: int | None = typer.Option(
        None, "--overlap", help="Characters shared between neighbouring chunks"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Analyze JavaScript files for secrets, endpoints and vulnerabilities."""
    cli = cli_module()
    configure_logging(verbose)

    try:
        target = build_target(urls, domain, urls_file)
        validate_target(target)
        settings = scan_settings(
            Path.cwd(), workers=workers, chunk_size=chunk_size, chunk_overlap=overlap
        )
    except (typer.BadParameter, TargetMalformedError, ValueError) as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(1)

    try:
        llm = open_llm(Path.cwd())
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1)

    def progress(line: str) -> None:
        console.print(f"[dim]{escape(line)}[/dim]")

    try:
        with llm:
            result = asyncio.run(
                cli.run_scan(target, cli.LLMAnalyzer(llm), settings, progress=progress)
            )
    except JsScanError as exc:
        console.print(f"[red]Scan failed: {escape(str(exc))}[/red]")
        raise typer.Exit(1)

    cli.print_scan_summary(result, console)
    if json_out is not None:
        path = cli.write_json_report(result, json_out)
        console.print(f"[green]Results written to[/green] {escape(str(path))}")
