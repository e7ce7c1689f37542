"""Resolver extractors for different source languages."""

from .base import BaseExtractor, ResolverMethod
from .go import GoExtractor

__all__ = [
    "BaseExtractor",
    "GoExtractor",
    "ResolverMethod",
]
