"""Configuration models for the GraphQL Unused Resolver analyzer."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class OutputFormat(str, Enum):
    """Output format options."""

    HUMAN = "human"
    JSON = "json"


class AnalyzerConfig(BaseModel):
    """Main configuration for the analyzer."""

    schema_path: Path = Field(
        ..., description="GraphQL schema file, or a directory of schema files"
    )
    resolver_dir: Path = Field(..., description="Directory containing Go resolver code")
    output_format: OutputFormat = Field(OutputFormat.HUMAN, description="Output format")
    schema_extensions: list[str] = Field(
        default_factory=lambda: [".graphql"],
        description="Schema file extensions loaded when schema_path is a directory",
    )
    verbose: bool = Field(False, description="Enable debug logging")

    @field_validator("schema_extensions")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        # ".graphql" and "graphql" are both accepted
        return [ext if ext.startswith(".") else f".{ext}" for ext in value]
