"""Hierarchy traversal over registry descriptors."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from discrimap.domain.model import TypeDescriptor


def find_subclasses(
    root: TypeDescriptor, registry: Iterable[TypeDescriptor]
) -> tuple[TypeDescriptor, ...]:
    """Return registry entries that are strict, transitive descendants of ``root``.

    Order follows the registry. Ancestry is followed through ``declared_parent``
    links; a parent missing from the registry ends the chain.
    """

    descriptors = tuple(registry)
    by_name = {descriptor.name: descriptor for descriptor in descriptors}
    return tuple(
        descriptor
        for descriptor in descriptors
        if descriptor.declared_parent is not None and _descends_from(descriptor, root.name, by_name)
    )


def _descends_from(
    descriptor: TypeDescriptor, ancestor: str, by_name: Mapping[str, TypeDescriptor]
) -> bool:
    seen = {descriptor.name}
    parent = descriptor.declared_parent
    while parent is not None:
        if parent == ancestor:
            return True
        if parent in seen:
            raise ValueError(f"Inheritance cycle detected at {parent}")
        seen.add(parent)
        parent_descriptor = by_name.get(parent)
        if parent_descriptor is None:
            return False
        parent = parent_descriptor.declared_parent
    return False
