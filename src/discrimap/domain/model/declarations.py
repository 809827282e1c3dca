"""Plain descriptor values supplied by a metadata provider.

None of these carry behaviour beyond validation; the resolver only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from .enums import InheritanceKind

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """Structural facts about one mapped type. Identity is ``name``."""

    name: str
    is_abstract: bool = False
    declared_parent: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Type descriptor requires a name")
        if self.declared_parent == self.name:
            raise ValueError(f"Type {self.name} cannot declare itself as parent")


@dataclass(frozen=True, slots=True)
class InheritanceDeclaration:
    kind: InheritanceKind = InheritanceKind.NONE

    @classmethod
    def of(cls, kind: str | InheritanceKind) -> InheritanceDeclaration:
        return cls(kind=InheritanceKind.parse(kind))


@dataclass(frozen=True, slots=True)
class DiscriminatorMapDeclaration:
    """Author-supplied ``name -> type name`` map on a root type, in author order."""

    entries: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))


@dataclass(frozen=True, slots=True)
class DiscriminatorEntryDeclaration:
    """Name a concrete type is identified by inside an ancestor's map."""

    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Discriminator entry name must not be empty")
