"""Ports for reading mapped-type metadata and writing back discriminator maps."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, TypeAlias, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from discrimap.domain.model import (
        DiscriminatorEntryDeclaration,
        DiscriminatorMapDeclaration,
        InheritanceDeclaration,
        TypeDescriptor,
    )


@runtime_checkable
class MetadataReader(Protocol):
    """Read-only view over the registry of mapped types."""

    def all_type_names(self) -> Sequence[str]: ...

    def type_descriptor(self, name: str) -> TypeDescriptor: ...

    def is_subclass_of(self, name: str, ancestor: str) -> bool: ...

    def inheritance_declaration(self, name: str) -> InheritanceDeclaration | None: ...

    def discriminator_map_declaration(self, name: str) -> DiscriminatorMapDeclaration | None: ...

    def discriminator_entry_declaration(
        self, name: str
    ) -> DiscriminatorEntryDeclaration | None: ...


@runtime_checkable
class MetadataProvider(MetadataReader, Protocol):
    """Registry plus the sink for resolved discriminator entries."""

    def register_discriminator_map_entry(
        self, root_name: str, entry_name: str, type_name: str
    ) -> None: ...


MetadataProviderFactory: TypeAlias = Callable[[], MetadataProvider | None]
