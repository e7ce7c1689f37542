"""
Naming-convention helpers mapping gqlgen resolver methods to schema fields.

gqlgen generates one ``<type>Resolver`` receiver per GraphQL object type and
one exported method per field, so ``(*queryResolver).CreateUser`` implements
``Query.createUser``. Nothing in the Go source links the two explicitly; the
helpers below reconstruct the link from the names alone.
"""

from __future__ import annotations

RESOLVER_SUFFIX = "Resolver"
POINTER_PREFIX = "*"


def upper_first(value: str) -> str:
    """Upper-case the first character of ``value``."""
    if not value:
        return ""
    return value[:1].upper() + value[1:]


def lower_first(value: str) -> str:
    """Lower-case the first character of ``value``."""
    if not value:
        return ""
    return value[:1].lower() + value[1:]


def is_resolver_type(receiver_type: str) -> bool:
    """Check whether a receiver type name follows the resolver convention."""
    return receiver_type.lower().endswith(RESOLVER_SUFFIX.lower())


def infer_graphql_type(receiver_type: str) -> str:
    """
    Infer the GraphQL type name from a resolver receiver type.

    Examples:
        *queryResolver -> Query
        *mutationResolver -> Mutation
        userResolver -> User

    Only an exact-case ``Resolver`` suffix is removed, so ``*queryresolver``
    becomes ``Queryresolver``.
    """
    type_name = receiver_type.removeprefix(POINTER_PREFIX)
    type_name = type_name.removesuffix(RESOLVER_SUFFIX)
    return upper_first(type_name)


def infer_field_name(method_name: str) -> str:
    """Infer the GraphQL field name from a Go method name (``CreateUser`` -> ``createUser``)."""
    return lower_first(method_name)


def infer_graphql_name(receiver_type: str, method_name: str) -> str:
    """Build the ``Type.field`` identifier a resolver method presumably implements."""
    return f"{infer_graphql_type(receiver_type)}.{infer_field_name(method_name)}"
