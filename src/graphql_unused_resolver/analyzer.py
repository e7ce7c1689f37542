"""Analyzer core - sequences schema extraction, resolver extraction and detection."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

from .config import AnalyzerConfig
from .detector import detect_unused
from .errors import AnalysisError, AnalysisStageError
from .extractors import ResolverMethod
from .resolver_collector import extract_resolver_methods
from .schema_fields import DEFAULT_SCHEMA_EXTENSIONS, SchemaField, extract_schema_fields

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Result of comparing resolver methods against a schema."""

    unused_resolvers: list[ResolverMethod] = field(default_factory=list)
    total_resolvers: int = 0
    total_fields: int = 0

    @property
    def unused_count(self) -> int:
        """Count unused resolvers."""
        return len(self.unused_resolvers)

    @property
    def has_unused(self) -> bool:
        """Check if any resolver has no matching schema field."""
        return bool(self.unused_resolvers)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "summary": {
                "total_fields": self.total_fields,
                "total_resolvers": self.total_resolvers,
                "unused_resolvers": self.unused_count,
            },
            "unused_resolvers": [r.to_dict() for r in self.unused_resolvers],
        }


class UnusedResolverAnalyzer:
    """
    Finds resolver methods that no longer match any schema field.

    Performs:
    1. Schema field extraction
    2. Resolver method extraction
    3. Unused detection
    """

    def __init__(self, config: AnalyzerConfig) -> None:
        """
        Initialize the analyzer.

        Args:
            config: Schema path, resolver directory and loading options
        """
        self.config = config

    def analyze(self) -> AnalysisResult:
        """
        Run the complete analysis.

        Returns:
            Analysis result with unused resolvers and totals

        Raises:
            AnalysisStageError: If either extraction stage fails; ``stage``
                names the stage and ``cause`` holds the original error
        """
        # Phase 1: Schema
        try:
            fields = extract_schema_fields(
                self.config.schema_path, self.config.schema_extensions
            )
        except (AnalysisError, OSError) as e:
            raise AnalysisStageError(AnalysisStageError.SCHEMA, e) from e
        logger.debug("Schema: %d fields", len(fields))

        # Phase 2: Resolvers
        try:
            methods = extract_resolver_methods(self.config.resolver_dir)
        except (AnalysisError, OSError) as e:
            raise AnalysisStageError(AnalysisStageError.RESOLVERS, e) from e
        logger.debug("Resolvers: %d methods", len(methods))

        # Phase 3: Detect
        return self.build_result(fields, methods)

    @staticmethod
    def build_result(
        fields: Sequence[SchemaField],
        methods: Sequence[ResolverMethod],
    ) -> AnalysisResult:
        """Assemble an AnalysisResult from extracted fields and methods."""
        unused = detect_unused(fields, methods)
        logger.debug("Unused: %d of %d resolvers", len(unused), len(methods))
        return AnalysisResult(
            unused_resolvers=unused,
            total_resolvers=len(methods),
            total_fields=len(fields),
        )


def analyze(
    schema_path: Path,
    resolver_dir: Path,
    schema_extensions: Optional[list[str]] = None,
) -> AnalysisResult:
    """
    Analyze a schema and a resolver directory.

    Args:
        schema_path: Schema file or directory of schema files
        resolver_dir: Directory containing Go resolver code
        schema_extensions: Schema file suffixes to load from a directory

    Returns:
        Analysis result
    """
    config = AnalyzerConfig(
        schema_path=schema_path,
        resolver_dir=resolver_dir,
        schema_extensions=schema_extensions or list(DEFAULT_SCHEMA_EXTENSIONS),
    )
    return UnusedResolverAnalyzer(config).analyze()
