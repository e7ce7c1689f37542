"""Unused detector - reconciles resolver methods with schema fields."""

from __future__ import annotations

from typing import Iterable, Sequence

from .extractors import ResolverMethod
from .schema_fields import SchemaField


def schema_field_names(fields: Iterable[SchemaField]) -> set[str]:
    """Get the set of qualified field names (``Type.field``)."""
    return {f.full_name for f in fields}


def detect_unused(
    fields: Iterable[SchemaField],
    methods: Sequence[ResolverMethod],
) -> list[ResolverMethod]:
    """
    Find resolver methods whose inferred field is not in the schema.

    Args:
        fields: Fields declared on the schema root types
        methods: Resolver methods extracted from source

    Returns:
        The methods without a matching schema field, in their original order
    """
    known = schema_field_names(fields)
    return [m for m in methods if m.graphql_name not in known]
