"""Resolver collector - walks a source tree and extracts resolver methods."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .errors import (
    PathNotADirectoryError,
    PathNotFoundError,
    SourceParseError,
    SourceReadError,
)
from .extractors import BaseExtractor, GoExtractor, ResolverMethod

logger = logging.getLogger(__name__)


@dataclass
class CollectionResult:
    """Resolver methods gathered from a directory, plus per-file parse failures."""

    methods: list[ResolverMethod] = field(default_factory=list)
    errors: list[SourceParseError] = field(default_factory=list)
    files_scanned: int = 0

    @property
    def has_errors(self) -> bool:
        """Check if any file failed to parse."""
        return bool(self.errors)

    def raise_for_errors(self) -> None:
        """
        Raise the first collected parse error, if any.

        The raised error carries every collected failure in ``errors`` and
        the methods extracted from the other files in ``methods``.
        """
        if not self.errors:
            return

        first = self.errors[0]
        first.errors = list(self.errors)
        first.methods = list(self.methods)
        raise first


class ResolverCollector:
    """
    Collects resolver methods from a directory tree.

    Uses a registry of extractors keyed by file extension.
    """

    def __init__(self) -> None:
        """Initialize with default extractors."""
        self._extractors: dict[str, BaseExtractor] = {}
        self.register_extractor(GoExtractor())

    def register_extractor(self, extractor: BaseExtractor) -> None:
        """
        Register an extractor.

        Args:
            extractor: Extractor instance to register
        """
        for ext in extractor.extensions:
            self._extractors[ext] = extractor

    def get_extractor(self, file_path: Path) -> Optional[BaseExtractor]:
        """
        Get the appropriate extractor for a file.

        Args:
            file_path: Path to the file

        Returns:
            Extractor if one handles this file, None otherwise
        """
        extractor = self._extractors.get(file_path.suffix)
        if extractor is None or not extractor.can_handle(file_path):
            return None
        return extractor

    def collect(self, directory: Path) -> CollectionResult:
        """
        Collect resolver methods from every source file under ``directory``.

        The tree is walked depth-first with entries sorted by name, so the
        result order does not depend on the file system. Files that fail to
        parse are recorded in ``errors`` and the walk continues.

        Args:
            directory: Root of the resolver source tree

        Returns:
            Collected methods and parse errors

        Raises:
            PathNotFoundError: If the directory does not exist
            PathNotADirectoryError: If the path is not a directory
            SourceReadError: If a file or directory cannot be read
        """
        directory = Path(directory)
        if not directory.exists():
            raise PathNotFoundError(directory, kind="resolver directory")
        if not directory.is_dir():
            raise PathNotADirectoryError(directory)

        result = CollectionResult()
        self._walk(directory, result)

        logger.debug(
            "Found %d resolver methods in %d files under %s (%d parse errors)",
            len(result.methods),
            result.files_scanned,
            directory,
            len(result.errors),
        )
        return result

    def _walk(self, directory: Path, result: CollectionResult) -> None:
        try:
            entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
        except OSError as e:
            raise SourceReadError(f"failed to read directory {directory}: {e}") from e

        for entry in entries:
            # Symlinked directories are not descended into, symlinked files are read
            if entry.is_dir() and entry.is_symlink():
                logger.debug("Skipping symlinked directory %s", entry)
            elif entry.is_dir():
                self._walk(entry, result)
            elif entry.is_file():
                self._process_file(entry, result)

    def _process_file(self, file_path: Path, result: CollectionResult) -> None:
        extractor = self.get_extractor(file_path)
        if extractor is None:
            logger.debug("Skipping %s", file_path)
            return

        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(f"failed to read {file_path}: {e}") from e

        result.files_scanned += 1
        try:
            result.methods.extend(extractor.extract(file_path, content))
        except SourceParseError as e:
            logger.debug("Parse error: %s", e)
            result.errors.append(e)


def extract_resolver_methods(directory: Path) -> list[ResolverMethod]:
    """
    Extract all resolver methods under ``directory``.

    Args:
        directory: Root of the resolver source tree

    Returns:
        Resolver methods in walk order

    Raises:
        SourceParseError: The first per-file parse failure, carrying the
            partial methods and the full error list
    """
    result = ResolverCollector().collect(directory)
    result.raise_for_errors()
    return result.methods
