"""In-memory metadata provider for programmatic registries and tests."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from discrimap.domain.model import (
    DiscriminatorEntryDeclaration,
    DiscriminatorMapDeclaration,
    InheritanceDeclaration,
    InheritanceKind,
    TypeDescriptor,
)

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

log = logging.getLogger(__name__)


@dataclass(slots=True)
class InMemoryMetadataProvider:
    """Registry of descriptors and declarations held in plain dictionaries.

    Registration order is the registry order. Written-back entries are kept per
    root in the order they were registered.
    """

    _descriptors: dict[str, TypeDescriptor] = field(
        default_factory=dict["str", "TypeDescriptor"], repr=False
    )
    _inheritance: dict[str, InheritanceDeclaration] = field(
        default_factory=dict["str", "InheritanceDeclaration"], repr=False
    )
    _maps: dict[str, DiscriminatorMapDeclaration] = field(
        default_factory=dict["str", "DiscriminatorMapDeclaration"], repr=False
    )
    _entries: dict[str, DiscriminatorEntryDeclaration] = field(
        default_factory=dict["str", "DiscriminatorEntryDeclaration"], repr=False
    )
    _written: dict[str, dict[str, str]] = field(
        default_factory=dict["str", "dict[str, str]"], repr=False
    )

    def register(
        self,
        name: str,
        *,
        parent: str | None = None,
        abstract: bool = False,
        inheritance: str | InheritanceKind | None = None,
        discriminator_map: Mapping[str, str] | None = None,
        entry: str | None = None,
    ) -> TypeDescriptor:
        """Add a type and its declarations to the registry."""

        if name in self._descriptors:
            raise ValueError(f"Type {name} is already registered")

        descriptor = TypeDescriptor(name=name, is_abstract=abstract, declared_parent=parent)
        self._descriptors[name] = descriptor
        if inheritance is not None:
            self._inheritance[name] = InheritanceDeclaration.of(inheritance)
        if discriminator_map is not None:
            self._maps[name] = DiscriminatorMapDeclaration(entries=discriminator_map)
        if entry is not None:
            self._entries[name] = DiscriminatorEntryDeclaration(name=entry)
        return descriptor

    def all_type_names(self) -> Sequence[str]:
        return tuple(self._descriptors)

    def type_descriptor(self, name: str) -> TypeDescriptor:
        try:
            return self._descriptors[name]
        except KeyError:
            raise LookupError(f"Unknown mapped type: {name}") from None

    def is_subclass_of(self, name: str, ancestor: str) -> bool:
        seen = {name}
        parent = self.type_descriptor(name).declared_parent
        while parent is not None:
            if parent == ancestor:
                return True
            if parent in seen:
                raise ValueError(f"Inheritance cycle detected at {parent}")
            seen.add(parent)
            descriptor = self._descriptors.get(parent)
            parent = descriptor.declared_parent if descriptor is not None else None
        return False

    def inheritance_declaration(self, name: str) -> InheritanceDeclaration | None:
        return self._inheritance.get(name)

    def discriminator_map_declaration(self, name: str) -> DiscriminatorMapDeclaration | None:
        return self._maps.get(name)

    def discriminator_entry_declaration(self, name: str) -> DiscriminatorEntryDeclaration | None:
        return self._entries.get(name)

    def register_discriminator_map_entry(
        self, root_name: str, entry_name: str, type_name: str
    ) -> None:
        log.debug("Registering %s=%s on %s", entry_name, type_name, root_name)
        self._written.setdefault(root_name, {})[entry_name] = type_name

    def discriminator_map_for(self, root_name: str) -> dict[str, str]:
        """Entries written back for ``root_name`` so far."""

        return dict(self._written.get(root_name, {}))
