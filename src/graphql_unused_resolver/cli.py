"""CLI entry point for GraphQL Unused Resolver."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .analyzer import UnusedResolverAnalyzer
from .config import AnalyzerConfig, OutputFormat
from .errors import AnalysisError
from .output import EXIT_ERROR, get_exit_code, get_formatter

app = typer.Typer(
    name="graphql-unused-resolver",
    help="Detect Go GraphQL resolvers whose fields were removed from the schema.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from . import __version__
        console.print(f"graphql-unused-resolver v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route library logging through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version", "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """GraphQL Unused Resolver - find resolver code no longer backed by the schema."""
    pass


@app.command()
def analyze(
    schema: Annotated[
        Path,
        typer.Option(
            "--schema", "-s",
            help="Path to a GraphQL schema file, or a directory of .graphql files.",
        ),
    ],
    resolvers: Annotated[
        Path,
        typer.Option(
            "--resolvers", "-r",
            help="Path to the Go resolver directory.",
        ),
    ],
    output_format: Annotated[
        str,
        typer.Option(
            "--format", "-f",
            help="Output format: 'human' or 'json'.",
        ),
    ] = "human",
    schema_extensions: Annotated[
        Optional[list[str]],
        typer.Option(
            "--schema-ext",
            help="Schema file extension to load from a schema directory (repeatable, default .graphql).",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose", "-v",
            help="Show debug logging.",
        ),
    ] = False,
) -> None:
    """
    Analyze a schema and resolver directory for unused resolvers.

    Exit codes: 0 when every resolver matches a schema field, 2 when unused
    resolvers were found, 1 when the analysis could not run.

    Examples:

        graphql-unused-resolver analyze --schema graph/schema.graphql --resolvers graph/

        # Schema split across files, JSON output for CI
        graphql-unused-resolver analyze --schema graph/schema/ --resolvers graph/ --format json
    """
    configure_logging(verbose)

    # Validate output format
    try:
        fmt = OutputFormat(output_format.lower())
    except ValueError:
        err_console.print(f"[red]Error: Invalid format '{output_format}'. Use 'human' or 'json'.[/red]")
        raise typer.Exit(EXIT_ERROR)

    # Validate input paths
    if not schema.exists():
        err_console.print(f"[red]Error: schema file does not exist: {escape(str(schema))}[/red]")
        raise typer.Exit(EXIT_ERROR)
    if not resolvers.exists():
        err_console.print(f"[red]Error: resolver directory does not exist: {escape(str(resolvers))}[/red]")
        raise typer.Exit(EXIT_ERROR)
    if not resolvers.is_dir():
        err_console.print(f"[red]Error: resolver path is not a directory: {escape(str(resolvers))}[/red]")
        raise typer.Exit(EXIT_ERROR)

    config_args = {
        "schema_path": schema,
        "resolver_dir": resolvers,
        "output_format": fmt,
        "verbose": verbose,
    }
    if schema_extensions:
        config_args["schema_extensions"] = schema_extensions
    config = AnalyzerConfig(**config_args)

    try:
        result = UnusedResolverAnalyzer(config).analyze()
    except AnalysisError as e:
        err_console.print(f"[red]Error: analysis failed: {escape(str(e))}[/red]", highlight=False)
        raise typer.Exit(EXIT_ERROR)

    formatter = get_formatter(fmt.value)
    formatter.format(result, sys.stdout)

    raise typer.Exit(get_exit_code(result))


if __name__ == "__main__":
    app()
