"""Tests for resolver naming-convention inference."""

import pytest

from graphql_unused_resolver.naming import (
    infer_field_name,
    infer_graphql_name,
    infer_graphql_type,
    is_resolver_type,
    lower_first,
    upper_first,
)


class TestCaseHelpers:
    """Test first-character case helpers."""

    def test_upper_first(self):
        assert upper_first("query") == "Query"
        assert upper_first("Query") == "Query"

    def test_lower_first(self):
        assert lower_first("CreateUser") == "createUser"
        assert lower_first("ID") == "iD"

    def test_empty_string(self):
        assert upper_first("") == ""
        assert lower_first("") == ""


class TestIsResolverType:
    """Test receiver type qualification."""

    @pytest.mark.parametrize(
        "receiver",
        ["*queryResolver", "queryResolver", "*userresolver", "RESOLVER", "*Resolver"],
    )
    def test_resolver_types(self, receiver):
        assert is_resolver_type(receiver)

    @pytest.mark.parametrize(
        "receiver",
        ["*fooHandler", "resolverImpl", "*queryResolvers", ""],
    )
    def test_non_resolver_types(self, receiver):
        assert not is_resolver_type(receiver)


class TestInferGraphQLName:
    """Test Type.field inference from receiver and method names."""

    @pytest.mark.parametrize(
        "receiver, expected",
        [
            ("*queryResolver", "Query"),
            ("*mutationResolver", "Mutation"),
            ("userResolver", "User"),
            ("*orderItemResolver", "OrderItem"),
        ],
    )
    def test_infer_graphql_type(self, receiver, expected):
        assert infer_graphql_type(receiver) == expected

    def test_suffix_strip_is_case_sensitive(self):
        """Only an exact 'Resolver' suffix is removed."""
        assert infer_graphql_type("*queryresolver") == "Queryresolver"

    def test_only_one_pointer_marker_is_stripped(self):
        assert infer_graphql_type("**queryResolver") == "*query"

    @pytest.mark.parametrize(
        "method, expected",
        [("User", "user"), ("CreateUser", "createUser"), ("users", "users")],
    )
    def test_infer_field_name(self, method, expected):
        assert infer_field_name(method) == expected

    def test_infer_graphql_name(self):
        assert infer_graphql_name("*queryResolver", "User") == "Query.user"
        assert infer_graphql_name("*mutationResolver", "CreateUser") == "Mutation.createUser"

    def test_inference_is_deterministic(self):
        """The same inputs always produce the same name."""
        names = {infer_graphql_name("*userResolver", "Posts") for _ in range(5)}
        assert names == {"User.posts"}
