"""Shared fixtures for analyzer tests."""

from pathlib import Path
from textwrap import dedent

import pytest

TESTDATA = Path(__file__).parent / "testdata"


@pytest.fixture
def testdata() -> Path:
    """Path to the checked-in test fixtures."""
    return TESTDATA


@pytest.fixture
def simple_schema() -> Path:
    """Schema with Query.user, Query.users and Mutation.createUser."""
    return TESTDATA / "simple" / "schema.graphql"


@pytest.fixture
def simple_resolvers() -> Path:
    """Resolver package implementing three schema fields and three removed ones."""
    return TESTDATA / "simple" / "resolvers"


@pytest.fixture
def write_file(tmp_path):
    """Write dedented content to a file under tmp_path, creating parents."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(content).lstrip(), encoding="utf-8")
        return path

    return _write
