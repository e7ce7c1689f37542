"""GraphQL Unused Resolver - find Go resolvers with no matching schema field."""

from .analyzer import AnalysisResult, UnusedResolverAnalyzer, analyze
from .errors import (
    AnalysisError,
    AnalysisStageError,
    PathNotADirectoryError,
    PathNotFoundError,
    SchemaParseError,
    SchemaReadError,
    SourceParseError,
    SourceReadError,
)
from .extractors import ResolverMethod
from .schema_fields import SchemaField

__version__ = "0.1.0"

__all__ = [
    "AnalysisError",
    "AnalysisResult",
    "AnalysisStageError",
    "PathNotADirectoryError",
    "PathNotFoundError",
    "ResolverMethod",
    "SchemaField",
    "SchemaParseError",
    "SchemaReadError",
    "SourceParseError",
    "SourceReadError",
    "UnusedResolverAnalyzer",
    "analyze",
    "__version__",
]
