"""Base extractor interface for extracting resolver methods from source files."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from ..naming import infer_graphql_name


@dataclass(frozen=True)
class ResolverMethod:
    """Represents a resolver method found in a source file."""

    receiver_type: str
    """Receiver type name, with a leading "*" for pointer receivers (e.g., "*queryResolver")."""

    method_name: str
    """Go method name (e.g., "User")."""

    file_path: Path
    """Path to the source file."""

    line: int
    """1-based line number of the method declaration."""

    graphql_name: str = field(init=False)
    """Inferred GraphQL field (e.g., "Query.user")."""

    def __post_init__(self) -> None:
        """Derive graphql_name from the receiver and method names."""
        object.__setattr__(
            self, "graphql_name", infer_graphql_name(self.receiver_type, self.method_name)
        )

    def get_location_str(self) -> str:
        """
        Get a formatted location string for reporting.

        Returns:
            Formatted string like "graph/schema.resolvers.go:42"
        """
        return f"{self.file_path}:{self.line}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "graphql_name": self.graphql_name,
            "receiver_type": self.receiver_type,
            "method_name": self.method_name,
            "file": str(self.file_path),
            "line": self.line,
        }


class BaseExtractor(ABC):
    """Abstract base class for resolver extractors."""

    extensions: list[str] = []
    """File extensions this extractor handles (e.g., ['.go'])."""

    excluded_suffixes: list[str] = []
    """File name endings that are never extracted (e.g., ['_test.go'])."""

    @abstractmethod
    def extract(self, file_path: Path, content: str) -> list[ResolverMethod]:
        """
        Extract all resolver methods from file content.

        Args:
            file_path: Path to the source file
            content: Raw content of the file

        Returns:
            List of resolver methods in declaration order

        Raises:
            SourceParseError: If the content is not valid source
        """
        ...

    def can_handle(self, file_path: Path) -> bool:
        """
        Check if this extractor can handle the given file.

        Args:
            file_path: Path to check

        Returns:
            True if this extractor should handle the file
        """
        if file_path.name.endswith(tuple(self.excluded_suffixes)):
            return False
        return file_path.suffix in self.extensions
