"""Setup file for backwards compatibility with older pip versions."""

from setuptools import setup, find_packages

setup(
    name="graphql-unused-resolver",
    version="0.1.0",
    description="CLI tool to detect Go GraphQL resolvers that no longer match any schema field",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "typer>=0.9.0",
        "graphql-core>=3.2.0",
        "rich>=13.0.0",
        "pydantic>=2.0.0",
        "tree-sitter>=0.23.0",
        "tree-sitter-go>=0.23.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "graphql-unused-resolver=graphql_unused_resolver.cli:app",
        ],
    },
)
