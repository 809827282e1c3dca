"""Domain port definitions for adapters."""

from __future__ import annotations

from .metadata import MetadataProvider, MetadataProviderFactory, MetadataReader

__all__ = [
    "MetadataProvider",
    "MetadataProviderFactory",
    "MetadataReader",
]
