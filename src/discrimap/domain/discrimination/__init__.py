"""Discriminator map resolution pipeline.

Data flows one way: registry descriptors are scanned for descendants of the
root, their entry declarations are collected, merged with the root's explicit
map and self-entry, and the result is written back through the provider.
"""

from __future__ import annotations

from .collector import collect_discriminators
from .merger import merge_discriminator_maps
from .naming import DEFAULT_NAMESPACE_DELIMITER, short_name
from .resolver import resolve_discriminator_map
from .scanner import find_subclasses

__all__ = [
    "DEFAULT_NAMESPACE_DELIMITER",
    "collect_discriminators",
    "find_subclasses",
    "merge_discriminator_maps",
    "resolve_discriminator_map",
    "short_name",
]
