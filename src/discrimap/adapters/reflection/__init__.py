"""Attribute-style declarations on Python classes and a provider reading them."""

from __future__ import annotations

from .declarations import (
    discriminator_entry,
    discriminator_map,
    inheritance_type,
    type_name,
)
from .metadata import ClassMetadata
from .provider import ClassMetadataProvider

__all__ = [
    "ClassMetadata",
    "ClassMetadataProvider",
    "discriminator_entry",
    "discriminator_map",
    "inheritance_type",
    "type_name",
]
