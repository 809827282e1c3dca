"""Public domain model surface."""

from __future__ import annotations

from .declarations import (
    DiscriminatorEntryDeclaration,
    DiscriminatorMapDeclaration,
    InheritanceDeclaration,
    TypeDescriptor,
)
from .enums import InheritanceKind
from .resolved import ResolvedDiscriminatorMap

__all__ = [
    "DiscriminatorEntryDeclaration",
    "DiscriminatorMapDeclaration",
    "InheritanceDeclaration",
    "InheritanceKind",
    "ResolvedDiscriminatorMap",
    "TypeDescriptor",
]
