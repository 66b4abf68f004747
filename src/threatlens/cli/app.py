# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import asyncio
import sys
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer

from threatlens import __version__
from threatlens.core.exceptions import ScanError
from threatlens.models.scan import AnalysisResult

app = typer.Typer(
    name="threatlens",
    help="Pattern-based malware and vulnerability scanner for files and source code",
    no_args_is_help=True,
)


class OutputFormat(StrEnum):
    CONSOLE = "console"
    JSON = "json"
    SUMMARY = "summary"


def _configure_logging(log_level: str | None) -> None:
    from threatlens.core.config import get_settings
    from threatlens.core.logging import setup_logging

    settings = get_settings()
    setup_logging(log_level or settings.log_level, settings.log_format)


@app.command(name="file")
def scan_file_command(
    path: Annotated[Path, typer.Argument(help="File to scan")],
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.CONSOLE,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path"),
    ] = None,
    mime_type: Annotated[
        str | None,
        typer.Option("--mime-type", help="MIME type (inferred from extension if omitted)"),
    ] = None,
    no_secondary: Annotated[
        bool,
        typer.Option("--no-secondary", help="Skip secondary scoring (pattern-only)"),
    ] = False,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Log level (overrides THREATLENS_LOG_LEVEL)"),
    ] = None,
) -> None:
    """Scan an uploaded file for malware indicators."""
    from threatlens.sdk import scan_path

    _configure_logging(log_level)
    try:
        result = asyncio.run(
            scan_path(path, mime_type=mime_type, use_secondary=not no_secondary)
        )
    except ScanError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc
    _output_result(result, fmt, output)


@app.command(name="code")
def scan_code_command(
    source: Annotated[
        str,
        typer.Argument(help="Source file to analyze, or '-' to read stdin"),
    ] = "-",
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.CONSOLE,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path"),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Seed for reproducible security scores"),
    ] = None,
    no_secondary: Annotated[
        bool,
        typer.Option("--no-secondary", help="Skip secondary scoring (pattern-only)"),
    ] = False,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Log level (overrides THREATLENS_LOG_LEVEL)"),
    ] = None,
) -> None:
    """Analyze source code for vulnerabilities."""
    from threatlens.models.scan import decode_content
    from threatlens.sdk import read_file_input, scan_code

    _configure_logging(log_level)
    try:
        if source == "-":
            code = decode_content(sys.stdin.buffer.read(), source="<stdin>")
        else:
            code = read_file_input(source).content
        result = asyncio.run(scan_code(code, use_secondary=not no_secondary, seed=seed))
    except ScanError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc
    _output_result(result, fmt, output)


@app.command()
def version() -> None:
    """Print the threatlens version."""
    from threatlens.signatures.catalog import SignatureCatalog

    typer.echo(f"threatlens {__version__} (signatures {SignatureCatalog.default().version})")


def _output_result(result: AnalysisResult, fmt: OutputFormat, output: Path | None) -> None:
    if fmt == OutputFormat.CONSOLE:
        from threatlens.cli.formatters.console import format_result

        format_result(result)
    elif fmt == OutputFormat.JSON:
        from threatlens.cli.formatters.json_fmt import format_json

        _write_output(format_json(result), output)
    elif fmt == OutputFormat.SUMMARY:
        from threatlens.cli.formatters.json_fmt import format_json_summary

        _write_output(format_json_summary(result), output)


def _write_output(text: str, output: Path | None) -> None:
    if output:
        output.write_text(text)
        typer.echo(f"Output written to {output}", err=True)
    else:
        sys.stdout.write(text + "\n")


if __name__ == "__main__":
    app()
