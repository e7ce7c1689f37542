"""Schema field extractor - loads SDL documents and lists root fields."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence

from graphql import (
    DocumentNode,
    GraphQLObjectType,
    GraphQLSchema,
    Source,
    build_ast_schema,
    parse,
)
from graphql.error import GraphQLError

from .errors import PathNotFoundError, SchemaParseError, SchemaReadError

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_EXTENSIONS = (".graphql",)

QUERY_TYPE_NAME = "Query"
MUTATION_TYPE_NAME = "Mutation"

INTROSPECTION_FIELDS = ("__schema", "__type")
"""Meta fields every query root exposes; reported alongside declared fields."""


@dataclass(frozen=True)
class SchemaField:
    """A field declared on the root Query or Mutation type."""

    type_name: str
    """Root type label, either "Query" or "Mutation"."""

    field_name: str
    """Field name exactly as declared."""

    @property
    def full_name(self) -> str:
        """Qualified name such as ``Query.user``."""
        return f"{self.type_name}.{self.field_name}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "type": self.type_name,
            "field": self.field_name,
            "full_name": self.full_name,
        }


def load_schema_sources(
    path: Path,
    extensions: Sequence[str] = DEFAULT_SCHEMA_EXTENSIONS,
) -> list[Source]:
    """
    Load GraphQL schema sources from a file or a directory.

    A file is returned as the only source. For a directory, every direct child
    file whose name ends in one of ``extensions`` (case-sensitively) is
    loaded, ordered by name.

    Args:
        path: Schema file or directory of schema files
        extensions: File name suffixes to load from a directory

    Returns:
        List of graphql-core sources named after their files

    Raises:
        PathNotFoundError: If the path does not exist
        SchemaReadError: If a schema file cannot be read
        SchemaParseError: If a directory holds no schema files
    """
    path = Path(path)
    if not path.exists():
        raise PathNotFoundError(path, kind="schema path")

    if not path.is_dir():
        return [_load_single_file(path)]

    suffixes = tuple(extensions)
    try:
        entries = sorted(path.iterdir(), key=lambda entry: entry.name)
    except OSError as e:
        raise SchemaReadError(f"failed to read directory {path}: {e}") from e

    sources = [
        _load_single_file(entry)
        for entry in entries
        if entry.is_file() and entry.name.endswith(suffixes)
    ]

    if not sources:
        raise SchemaParseError(f"no schema files found in directory: {path}")

    logger.debug("Loaded %d schema files from %s", len(sources), path)
    return sources


def _load_single_file(path: Path) -> Source:
    """Read one schema document."""
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaReadError(f"failed to read schema file {path}: {e}") from e

    return Source(content, str(path))


def build_merged_schema(sources: Iterable[Source]) -> GraphQLSchema:
    """
    Parse every source and build them as one logical schema.

    Definitions from all sources are concatenated into a single document
    before building, so type extensions may live in a different file than
    the type they extend. SDL validation runs on the merged document:
    redefined types or fields fail the whole schema.

    Args:
        sources: Schema sources to merge

    Returns:
        Built GraphQL schema

    Raises:
        SchemaParseError: On any syntax or semantic failure
    """
    definitions = []
    for source in sources:
        try:
            document = parse(source)
        except GraphQLError as e:
            raise SchemaParseError(f"failed to parse schema: {e}") from e
        definitions.extend(document.definitions)

    try:
        return build_ast_schema(DocumentNode(definitions=tuple(definitions)))
    except (GraphQLError, TypeError) as e:
        # graphql-core reports SDL validation failures as a TypeError
        raise SchemaParseError(f"failed to parse schema: {e}") from e


def extract_schema_fields(
    path: Path,
    extensions: Sequence[str] = DEFAULT_SCHEMA_EXTENSIONS,
) -> list[SchemaField]:
    """
    Extract the root Query and Mutation fields of a schema.

    Query fields come first, followed by the ``__schema`` and ``__type``
    introspection fields, then Mutation fields. Subscription fields are not
    extracted.

    Args:
        path: Schema file or directory of schema files
        extensions: File name suffixes to load from a directory

    Returns:
        Schema fields in declaration order
    """
    schema = build_merged_schema(load_schema_sources(path, extensions))

    try:
        fields = _root_fields(QUERY_TYPE_NAME, schema.query_type)
        if schema.query_type is not None:
            fields.extend(SchemaField(QUERY_TYPE_NAME, name) for name in INTROSPECTION_FIELDS)
        fields.extend(_root_fields(MUTATION_TYPE_NAME, schema.mutation_type))
    except (GraphQLError, TypeError) as e:
        # Field maps are resolved lazily and may fail on first access
        raise SchemaParseError(f"failed to parse schema: {e}") from e

    logger.debug("Extracted %d schema fields from %s", len(fields), path)
    return fields


def _root_fields(type_name: str, root: Optional[GraphQLObjectType]) -> list[SchemaField]:
    if root is None:
        return []
    return [SchemaField(type_name, field_name) for field_name in root.fields]
