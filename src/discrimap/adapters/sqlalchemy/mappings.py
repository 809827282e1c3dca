"""SQLAlchemy imperative mapping driven by resolved discriminator maps."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from discrimap.domain.discrimination import (
    DEFAULT_NAMESPACE_DELIMITER,
    find_subclasses,
    resolve_discriminator_map,
)
from discrimap.domain.model import InheritanceKind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlalchemy import Table
    from sqlalchemy.engine import Engine
    from sqlalchemy.orm import registry

    from discrimap.adapters.reflection import ClassMetadataProvider
    from discrimap.domain.model import ResolvedDiscriminatorMap, TypeDescriptor

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HierarchyMapping:
    """Tables backing one inheritance hierarchy.

    ``tables`` holds per-subclass tables for joined inheritance; subclasses
    without one share the root table.
    """

    root: type
    table: Table
    discriminator: str = "type"
    tables: Mapping[type, Table] = field(default_factory=dict[type, "Table"])
    properties: Mapping[type, Mapping[str, Any]] = field(
        default_factory=dict[type, "Mapping[str, Any]"]
    )


def map_hierarchy(
    mapper_registry: registry,
    hierarchy: HierarchyMapping,
    provider: ClassMetadataProvider,
    *,
    delimiter: str = DEFAULT_NAMESPACE_DELIMITER,
) -> ResolvedDiscriminatorMap:
    """Resolve the root's discriminator map and map the hierarchy with it.

    Each resolved name becomes the ``polymorphic_identity`` of its class.
    Subclasses without a name are mapped as polymorphic-abstract.
    """

    root = provider.descriptor_for(hierarchy.root)
    declaration = provider.inheritance_declaration(root.name)
    if declaration is None or not declaration.kind.uses_discriminator:
        raise ValueError(f"{root.name} declares no single-table or joined inheritance")

    resolved = resolve_discriminator_map(root, provider, delimiter=delimiter)
    identities = {type_name: name for name, type_name in resolved.items()}

    log.info("Mapping %s hierarchy of %s", declaration.kind, root.name)
    mapper_registry.map_imperatively(
        hierarchy.root,
        hierarchy.table,
        properties=dict(hierarchy.properties.get(hierarchy.root, {})),
        polymorphic_on=hierarchy.table.c[hierarchy.discriminator],
        polymorphic_identity=identities.get(root.name),
    )

    registry_descriptors = [provider.type_descriptor(name) for name in provider.all_type_names()]
    subclasses = find_subclasses(root, registry_descriptors)
    for descriptor in _parents_first(subclasses, root):
        cls = provider.class_for(descriptor.name)
        parent = provider.class_for(descriptor.declared_parent or root.name)
        local_table = (
            hierarchy.tables.get(cls) if declaration.kind is InheritanceKind.JOINED else None
        )
        identity = identities.get(descriptor.name)
        options: dict[str, Any] = {"polymorphic_identity": identity}
        if identity is None:
            options = {"polymorphic_abstract": True}
        mapper_registry.map_imperatively(
            cls,
            local_table,
            inherits=parent,
            properties=dict(hierarchy.properties.get(cls, {})),
            **options,
        )

    mapper_registry.configure()
    return resolved


def create_all_tables(engine: Engine, mapper_registry: registry) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)


def _parents_first(
    subclasses: tuple[TypeDescriptor, ...], root: TypeDescriptor
) -> list[TypeDescriptor]:
    by_name = {descriptor.name: descriptor for descriptor in subclasses}

    def depth(descriptor: TypeDescriptor) -> int:
        level = 1
        parent = descriptor.declared_parent
        while parent is not None and parent != root.name:
            level += 1
            parent = by_name[parent].declared_parent
        return level

    return sorted(subclasses, key=depth)
