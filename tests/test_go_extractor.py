"""Tests for the tree-sitter Go resolver extractor."""

from pathlib import Path
from textwrap import dedent

import pytest

from graphql_unused_resolver.errors import SourceParseError
from graphql_unused_resolver.extractors import GoExtractor, ResolverMethod

FILE = Path("graph/schema.resolvers.go")


@pytest.fixture(scope="module")
def extractor():
    return GoExtractor()


def extract(extractor, source):
    return extractor.extract(FILE, dedent(source).lstrip())


class TestResolverMethod:
    """Test the ResolverMethod record."""

    def test_graphql_name_is_derived(self):
        method = ResolverMethod("*queryResolver", "User", FILE, 10)
        assert method.graphql_name == "Query.user"

    def test_is_immutable(self):
        method = ResolverMethod("*queryResolver", "User", FILE, 10)
        with pytest.raises(AttributeError):
            method.method_name = "Users"

    def test_location_str(self):
        method = ResolverMethod("*queryResolver", "User", FILE, 10)
        assert method.get_location_str() == "graph/schema.resolvers.go:10"

    def test_to_dict(self):
        method = ResolverMethod("*mutationResolver", "CreateUser", FILE, 3)
        assert method.to_dict() == {
            "graphql_name": "Mutation.createUser",
            "receiver_type": "*mutationResolver",
            "method_name": "CreateUser",
            "file": str(FILE),
            "line": 3,
        }


class TestGoExtractor:
    """Test method discovery in Go source."""

    def test_simple_resolver_file(self, extractor, simple_resolvers):
        path = simple_resolvers / "resolver.go"
        methods = extractor.extract(path, path.read_text())

        assert [m.graphql_name for m in methods] == [
            "Query.user",
            "Query.users",
            "Mutation.createUser",
            "Query.orders",
            "Query.legacyField",
            "Mutation.deleteUser",
        ]
        assert all(m.file_path == path for m in methods)

    def test_root_resolver_receiver_qualifies(self, extractor):
        """A bare "Resolver" receiver ends in "resolver" and is kept, with an empty type."""
        methods = extract(
            extractor,
            """
            package graph

            func (r *Resolver) Query() QueryResolver { return &queryResolver{r} }
            """,
        )

        assert [(m.receiver_type, m.graphql_name) for m in methods] == [
            ("*Resolver", ".query"),
        ]

    def test_pointer_and_value_receivers(self, extractor):
        methods = extract(
            extractor,
            """
            package graph

            func (r *queryResolver) User() {}

            func (r userResolver) Posts() {}
            """,
        )

        assert [(m.receiver_type, m.graphql_name) for m in methods] == [
            ("*queryResolver", "Query.user"),
            ("userResolver", "User.posts"),
        ]

    def test_line_numbers(self, extractor):
        methods = extract(
            extractor,
            """
            package graph

            // User is documented
            func (r *queryResolver) User() {}

            func (r *queryResolver) Users() {
            }
            """,
        )

        assert [m.line for m in methods] == [4, 6]

    def test_functions_without_receiver_are_skipped(self, extractor):
        methods = extract(
            extractor,
            """
            package graph

            func NewResolver() *Resolver { return &Resolver{} }

            func Query() *queryResolver { return nil }
            """,
        )

        assert methods == []

    def test_non_resolver_receivers_are_skipped(self, extractor):
        methods = extract(
            extractor,
            """
            package handlers

            type fooHandler struct{}

            func (h *fooHandler) Serve() {}

            func (h fooHandler) Close() error { return nil }
            """,
        )

        assert methods == []

    def test_case_insensitive_qualification(self, extractor):
        methods = extract(
            extractor,
            """
            package graph

            func (r *orderRESOLVER) Items() {}
            """,
        )

        assert [m.graphql_name for m in methods] == ["OrderRESOLVER.items"]

    def test_generic_receiver(self, extractor):
        methods = extract(
            extractor,
            """
            package graph

            func (r *connectionResolver[T]) Edges() []T { return nil }

            func (r pageResolver[K, V]) Items() {}
            """,
        )

        assert [m.receiver_type for m in methods] == ["*connectionResolver", "pageResolver"]
        assert [m.graphql_name for m in methods] == ["Connection.edges", "Page.items"]

    def test_unnamed_receiver(self, extractor):
        methods = extract(
            extractor,
            """
            package graph

            func (*queryResolver) Ping() string { return "pong" }
            """,
        )

        assert [m.graphql_name for m in methods] == ["Query.ping"]

    def test_nested_function_literals_are_ignored(self, extractor):
        methods = extract(
            extractor,
            """
            package graph

            func setup() {
                f := func() {}
                f()
            }

            func (r *queryResolver) User() {}
            """,
        )

        assert [m.method_name for m in methods] == ["User"]

    def test_empty_file(self, extractor):
        assert extract(extractor, "package graph\n") == []

    def test_missing_package_clause(self, extractor):
        with pytest.raises(SourceParseError, match="expected 'package'") as exc_info:
            extract(extractor, "func (r *queryResolver) User() {}\n")

        assert exc_info.value.line == 1

    def test_blank_file_has_no_package_clause(self, extractor):
        with pytest.raises(SourceParseError):
            extract(extractor, "\n")

    def test_comments_before_package_clause(self, extractor):
        methods = extract(
            extractor,
            """
            // Code generated by github.com/99designs/gqlgen, DO NOT EDIT.

            /* resolvers */
            package graph

            func (r *queryResolver) User() {}
            """,
        )

        assert [m.graphql_name for m in methods] == ["Query.user"]

    def test_syntax_error(self, extractor):
        with pytest.raises(SourceParseError) as exc_info:
            extract(
                extractor,
                """
                package graph

                func (r *queryResolver) User() {}

                func (r *queryResolver) Broken( {
                """,
            )

        assert exc_info.value.file_path == FILE
        assert 1 <= exc_info.value.line <= 6
        assert "failed to parse" in str(exc_info.value)


class TestCanHandle:
    """Test file selection."""

    def test_go_files(self, extractor):
        assert extractor.can_handle(Path("graph/resolver.go"))

    def test_test_files_are_excluded(self, extractor):
        assert not extractor.can_handle(Path("graph/resolver_test.go"))

    def test_other_extensions(self, extractor):
        assert not extractor.can_handle(Path("graph/schema.graphql"))
        assert not extractor.can_handle(Path("graph/resolver.go.orig"))
