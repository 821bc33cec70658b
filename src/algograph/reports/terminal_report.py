from __future__ import annotations

from collections import Counter
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from algograph.models import ValidationIssue


def print_check_summary(
    issues: List[ValidationIssue],
    *,
    check_name: str,
    console: Optional[Console] = None,
) -> None:
    """
    Prints a deterministic summary of a diagnostic run to the terminal.
    An empty issue list means the result passed every check.
    """
    console = console or Console()

    type_counts = Counter(i.issue_type for i in issues)
    severity_counts = Counter(i.severity for i in issues)

    table = Table(title=f"{check_name} Check Summary")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Errors", str(severity_counts.get("error", 0)))
    table.add_row("Warnings", str(severity_counts.get("warning", 0)))
    table.add_row("Total findings", str(len(issues)))
    console.print(table)

    if type_counts:
        t = Table(title="Findings by Type")
        t.add_column("Type")
        t.add_column("Count", justify="right")
        for k, v in sorted(type_counts.items()):
            t.add_row(str(k), str(v))
        console.print(t)

        for issue in issues[:10]:
            color = "red" if issue.severity == "error" else "yellow"
            console.print(f"[{color}]{issue.severity.upper()}[/{color}] {issue.issue_type}: {issue.message}")
        console.print(f"[bold red]{check_name} check FAILED[/bold red]")
    else:
        console.print(f"[bold green]{check_name} check passed[/bold green]")
