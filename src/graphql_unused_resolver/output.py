"""Output formatters - human-readable and JSON output."""

from __future__ import annotations

import json
import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .analyzer import AnalysisResult
from .extractors import ResolverMethod

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_UNUSED_FOUND = 2


class OutputFormatter:
    """Base class for output formatters."""

    def format(self, result: AnalysisResult, output: TextIO = sys.stdout) -> None:
        """Format and write the analysis result."""
        raise NotImplementedError


class HumanFormatter(OutputFormatter):
    """Human-readable colored terminal output using Rich."""

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize formatter."""
        self.console = console

    def format(self, result: AnalysisResult, output: TextIO = sys.stdout) -> None:
        """Format and print the analysis result."""
        console = self.console or Console(file=output)

        self._print_header(console)
        self._print_summary(console, result)

        if not result.has_unused:
            console.print("[green bold]✓ No unused resolvers found![/green bold]")
            return

        self._print_unused(console, result.unused_resolvers)
        self._print_footer(console, result)

    def _print_header(self, console: Console) -> None:
        title = Text("GraphQL Unused Resolver Analysis", style="bold blue")
        console.print()
        console.print(Panel(Text("Schema fields vs. Go resolvers", style="dim"), title=title, border_style="blue"))
        console.print()

    def _print_summary(self, console: Console, result: AnalysisResult) -> None:
        """Print the summary table."""
        table = Table(title="Summary", show_header=True, header_style="bold")
        table.add_column("Category", style="dim")
        table.add_column("Count", justify="right")

        table.add_row("Total Schema Fields", str(result.total_fields))
        table.add_row("Total Resolvers", str(result.total_resolvers))
        table.add_row(
            "Unused Resolvers",
            Text(str(result.unused_count), style="red" if result.has_unused else "green"),
        )

        console.print(table)
        console.print()

    def _print_unused(self, console: Console, unused: list[ResolverMethod]) -> None:
        console.print(f"[red bold]✗ Unused Resolvers ({len(unused)}):[/red bold]")
        console.print()

        for i, method in enumerate(unused, start=1):
            console.print(f"{i}. [bold]{method.graphql_name}[/bold]")
            console.print(f"   Receiver: {method.receiver_type}")
            console.print(f"   Method:   {method.method_name}")
            console.print(f"   [dim]Location: {method.get_location_str()}[/dim]")
            console.print()

    def _print_footer(self, console: Console, result: AnalysisResult) -> None:
        console.print(
            f"[yellow]Review and remove {result.unused_count} unused resolver(s)[/yellow]"
        )


class JSONFormatter(OutputFormatter):
    """JSON output for CI/CD integration."""

    def __init__(self, pretty: bool = True) -> None:
        """Initialize formatter."""
        self.pretty = pretty

    def format(self, result: AnalysisResult, output: TextIO = sys.stdout) -> None:
        """Format and write the analysis result as JSON."""
        data = result.to_dict()

        if self.pretty:
            json_str = json.dumps(data, indent=2, default=str)
        else:
            json_str = json.dumps(data, default=str)

        output.write(json_str)
        output.write("\n")


def get_formatter(format_name: str) -> OutputFormatter:
    """Get a formatter by name."""
    formatters = {
        "human": HumanFormatter,
        "json": JSONFormatter,
    }

    formatter_class = formatters.get(format_name.lower())
    if not formatter_class:
        raise ValueError(f"Unknown format: {format_name}")

    return formatter_class()


def get_exit_code(result: AnalysisResult) -> int:
    """
    Determine the exit code based on analysis results.

    Returns:
        0: No unused resolvers
        2: Unused resolvers found

    Failures to analyze at all exit with 1, which the CLI handles.
    """
    if result.has_unused:
        return EXIT_UNUSED_FOUND
    return EXIT_OK
