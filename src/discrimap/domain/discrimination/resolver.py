"""Discriminator map resolution for one root type."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from discrimap.domain.errors import DriverUnavailableError
from discrimap.domain.model import ResolvedDiscriminatorMap

from .collector import collect_discriminators
from .merger import merge_discriminator_maps
from .naming import DEFAULT_NAMESPACE_DELIMITER
from .scanner import find_subclasses

if TYPE_CHECKING:
    from discrimap.domain.model import TypeDescriptor
    from discrimap.domain.ports import MetadataProvider, MetadataReader

log = logging.getLogger(__name__)


def resolve_discriminator_map(
    root: TypeDescriptor,
    provider: MetadataProvider | None,
    *,
    delimiter: str = DEFAULT_NAMESPACE_DELIMITER,
) -> ResolvedDiscriminatorMap:
    """Resolve the discriminator map of ``root`` and write it back to ``provider``.

    Roots without a single-table or joined inheritance declaration are left
    untouched and yield an empty map. Either the whole map is written back or,
    on error, nothing is.
    """

    if provider is None:
        raise DriverUnavailableError

    declaration = provider.inheritance_declaration(root.name)
    if declaration is None or not declaration.kind.uses_discriminator:
        log.debug("Type %s does not use a discriminator, skipping", root.name)
        return ResolvedDiscriminatorMap(root.name)

    candidates = find_subclasses(root, _registry_snapshot(provider))
    discovered = collect_discriminators(candidates, provider)

    explicit = provider.discriminator_map_declaration(root.name)
    merged = merge_discriminator_maps(
        explicit.entries if explicit is not None else {},
        discovered,
        root,
        delimiter=delimiter,
    )
    resolved = ResolvedDiscriminatorMap(root.name, merged)

    for name, type_name in resolved.items():
        provider.register_discriminator_map_entry(root.name, name, type_name)

    log.info(
        "Applied discriminator map for %s (%s): %s",
        root.name,
        declaration.kind,
        ", ".join(f"{name}={type_name}" for name, type_name in resolved.items()) or "<empty>",
    )
    return resolved


def _registry_snapshot(metadata: MetadataReader) -> list[TypeDescriptor]:
    seen: set[str] = set()
    descriptors: list[TypeDescriptor] = []
    for name in metadata.all_type_names():
        if name in seen:
            continue
        seen.add(name)
        descriptors.append(metadata.type_descriptor(name))
    return descriptors
