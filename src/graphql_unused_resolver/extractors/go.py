"""Go extractor - finds gqlgen-style resolver methods in Go source files."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import tree_sitter_go as ts_go
from tree_sitter import Language, Node, Parser

from ..errors import SourceParseError
from ..naming import POINTER_PREFIX, is_resolver_type
from .base import BaseExtractor, ResolverMethod


class GoExtractor(BaseExtractor):
    """
    Extractor for Go files containing gqlgen resolver implementations.

    Recognizes top-level method declarations such as:

        func (r *queryResolver) User(ctx context.Context, id string) (*model.User, error)
        func (r mutationResolver) CreateUser(ctx context.Context, name string) (*model.User, error)

    Functions without a receiver are never resolvers, which keeps accessors like
    ``func (r *Resolver) Query() QueryResolver`` apart from constructors and
    helpers. Receivers whose type name does not end in "resolver"
    (case-insensitively) are skipped.
    """

    extensions = [".go"]
    excluded_suffixes = ["_test.go"]

    def __init__(self) -> None:
        """Initialize the tree-sitter parser for Go."""
        self._parser = Parser(Language(ts_go.language()))

    def extract(self, file_path: Path, content: str) -> list[ResolverMethod]:
        """
        Extract resolver methods from Go source.

        Args:
            file_path: Path to the Go file
            content: Go file content

        Returns:
            Resolver methods in declaration order

        Raises:
            SourceParseError: If the file contains syntax errors
        """
        source = content.encode("utf-8")
        tree = self._parser.parse(source)
        root = tree.root_node

        if root.has_error:
            error_node = self._first_error(root)
            line = error_node.start_point[0] + 1 if error_node else 1
            raise SourceParseError(file_path, line)

        # The grammar tolerates a missing package clause, the Go compiler does not
        declarations = [n for n in root.named_children if n.type != "comment"]
        if not declarations or declarations[0].type != "package_clause":
            raise SourceParseError(file_path, 1, "expected 'package'")

        methods: list[ResolverMethod] = []

        for node in root.named_children:
            if node.type != "method_declaration":
                continue

            method = self._extract_method(node, file_path)
            if method is not None:
                methods.append(method)

        return methods

    def _extract_method(self, node: Node, file_path: Path) -> Optional[ResolverMethod]:
        """Build a ResolverMethod from a method declaration, or None if it is not a resolver."""
        receiver_type = self._receiver_type(node.child_by_field_name("receiver"))
        if not receiver_type or not is_resolver_type(receiver_type):
            return None

        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None

        return ResolverMethod(
            receiver_type=receiver_type,
            method_name=self._node_text(name_node),
            file_path=file_path,
            line=node.start_point[0] + 1,
        )

    def _receiver_type(self, receiver: Optional[Node]) -> Optional[str]:
        """
        Get the receiver type name of a method.

        ``*T`` keeps its pointer marker, type arguments are dropped
        (``*T[K, V]`` -> ``*T``) and qualified or composite types yield None.

        Args:
            receiver: The ``receiver`` parameter list of a method declaration

        Returns:
            Receiver type name, or None if it cannot be determined
        """
        if receiver is None:
            return None

        for child in receiver.named_children:
            if child.type == "parameter_declaration":
                return self._type_name(child.child_by_field_name("type"))

        return None

    def _type_name(self, type_node: Optional[Node]) -> Optional[str]:
        if type_node is None:
            return None

        if type_node.type == "parenthesized_type":
            inner = type_node.named_children
            return self._type_name(inner[0]) if inner else None

        if type_node.type == "pointer_type":
            inner = type_node.named_children
            if not inner:
                return None
            name = self._type_name(inner[0])
            # Only a single level of indirection is meaningful for a receiver
            if name is None or name.startswith(POINTER_PREFIX):
                return None
            return POINTER_PREFIX + name

        if type_node.type == "generic_type":
            return self._type_name(type_node.child_by_field_name("type"))

        if type_node.type == "type_identifier":
            return self._node_text(type_node)

        return None

    def _first_error(self, node: Node) -> Optional[Node]:
        """Find the first ERROR or missing node in document order."""
        if node.is_error or node.is_missing:
            return node

        for child in node.children:
            if child.has_error or child.is_missing:
                found = self._first_error(child)
                if found is not None:
                    return found

        return None

    @staticmethod
    def _node_text(node: Node) -> str:
        return node.text.decode("utf-8")
