# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rich console output formatter for analysis results."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from threatlens import __version__
from threatlens.core.constants import Level
from threatlens.models.scan import AnalysisResult, CodeAnalysisResult

console = Console()

# Colors follow the security level: LOW security is rendered as danger.
SECURITY_COLORS = {
    Level.LOW: "bold red",
    Level.MEDIUM: "yellow",
    Level.HIGH: "bold green",
}

SEVERITY_COLORS = {
    Level.HIGH: "red",
    Level.MEDIUM: "yellow",
    Level.LOW: "cyan",
}


def format_result(result: AnalysisResult) -> None:
    """Print an analysis result to the console with Rich formatting."""
    console.print()
    console.print(f"[bold]threatlens v{__version__}[/bold] - File & Code Security Scanner")
    console.print()

    info_table = Table(show_header=False, box=None, padding=(0, 2))
    info_table.add_column("key", style="dim")
    info_table.add_column("value")
    info_table.add_row("Name:", result.metadata.name)
    info_table.add_row("Type:", result.metadata.type)
    info_table.add_row("Size:", f"{result.metadata.size} bytes")
    info_table.add_row("Hash:", result.metadata.content_hash)
    info_table.add_row("Scanned:", result.metadata.scan_timestamp.isoformat(timespec="seconds"))
    if isinstance(result, CodeAnalysisResult):
        info_table.add_row("Language:", result.detected_language)
        info_table.add_row("Lines:", str(result.lines_of_code))
    console.print(info_table)
    console.print()

    color = SECURITY_COLORS.get(result.security_level, "white")
    banner = (
        f"[{color}]SECURITY: {result.security_level}  RISK: {result.risk_level}[/{color}]"
        f"  (threats: {result.threat_count}, warnings: {result.warning_count})"
    )
    if isinstance(result, CodeAnalysisResult):
        banner += f"  score: {result.security_score}/100"
    console.print(Panel(banner, style=color))
    console.print()

    if result.findings:
        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 1))
        table.add_column("Rule", style="dim", width=13)
        table.add_column("Severity", width=8)
        table.add_column("Finding")
        table.add_column("Line", justify="right", width=5)
        for finding in result.findings:
            sev_color = SEVERITY_COLORS.get(finding.severity, "white")
            table.add_row(
                finding.rule_id,
                Text(finding.severity, style=sev_color),
                finding.label,
                str(finding.line_number) if finding.line_number else "-",
            )
        console.print(table)
        console.print()
    else:
        console.print("  No threats detected.", style="bold green")
        console.print()

    if result.vulnerabilities:
        console.print("[bold]Vulnerabilities[/bold]")
        for vuln in result.vulnerabilities:
            console.print(f"  - {vuln}")
        console.print()

    if result.suggestions:
        console.print("[bold]Suggestions[/bold]")
        for suggestion in result.suggestions:
            console.print(f"  - {suggestion}")
        console.print()

    if result.errors:
        console.print(f"  Errors: {len(result.errors)}", style="red")
        for error in result.errors:
            console.print(f"    {error}", style="dim red")
        console.print()
