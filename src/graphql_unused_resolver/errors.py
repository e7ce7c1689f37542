"""Exceptions raised while analyzing a schema and its resolvers."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .extractors import ResolverMethod


class AnalysisError(Exception):
    """Base class for every failure the analysis can report."""


class PathNotFoundError(AnalysisError, FileNotFoundError):
    """An input path does not exist."""

    def __init__(self, path: Path, kind: str = "path") -> None:
        self.path = Path(path)
        super().__init__(f"{kind} does not exist: {path}")


class PathNotADirectoryError(AnalysisError, NotADirectoryError):
    """The resolver path exists but is not a directory."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"resolver path is not a directory: {path}")


class SchemaReadError(AnalysisError, OSError):
    """A schema document could not be read."""


class SourceReadError(AnalysisError, OSError):
    """A Go source file could not be read."""


class SchemaParseError(AnalysisError):
    """The schema sources failed to parse or build as a single schema."""


class SourceParseError(AnalysisError):
    """
    A Go source file failed to parse.

    When raised out of a directory walk, ``errors`` holds every per-file
    failure that was collected and ``methods`` the resolvers extracted from
    the files that did parse.
    """

    def __init__(self, file_path: Path, line: int, message: str = "syntax error") -> None:
        self.file_path = Path(file_path)
        self.line = line
        self.errors: list[SourceParseError] = [self]
        self.methods: list[ResolverMethod] = []
        super().__init__(f"failed to parse {file_path}:{line}: {message}")


class AnalysisStageError(AnalysisError):
    """Wraps a failure with the name of the analysis stage that produced it."""

    SCHEMA = "schema parse error"
    RESOLVERS = "resolver analysis error"

    def __init__(self, stage: str, cause: Exception) -> None:
        self.stage = stage
        self.cause = cause
        super().__init__(f"{stage}: {cause}")

    @property
    def partial_methods(self) -> Optional[list[ResolverMethod]]:
        """Resolvers extracted before a source parse failure, if any."""
        if isinstance(self.cause, SourceParseError):
            return self.cause.methods
        return None
