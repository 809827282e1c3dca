"""Metadata provider reflecting over decorated Python classes."""

from __future__ import annotations

import inspect
import logging
from abc import ABC
from typing import TYPE_CHECKING

from discrimap.domain.model import (
    DiscriminatorEntryDeclaration,
    DiscriminatorMapDeclaration,
    InheritanceDeclaration,
    TypeDescriptor,
)

from .declarations import declarations_of, type_name
from .metadata import ClassMetadata

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from types import ModuleType

log = logging.getLogger(__name__)


class ClassMetadataProvider:
    """Registry of mapped classes, in the order they were supplied.

    A class is abstract when it has abstract methods or lists ``ABC`` as a
    direct base. Its declared parent is the nearest registered ancestor in its
    MRO that belongs to a hierarchy with an inheritance declaration; only when
    there is none does it fall back to the nearest registered ancestor. Classes
    outside the registry are never parents.
    """

    def __init__(self, classes: Iterable[type]) -> None:
        self._classes: dict[str, type] = {}
        for cls in classes:
            name = type_name(cls)
            registered = self._classes.get(name)
            if registered is not None and registered is not cls:
                raise ValueError(f"Two different classes are registered as {name}")
            self._classes[name] = cls
        self._metadata: dict[str, ClassMetadata] = {}

    @classmethod
    def from_modules(cls, modules: Iterable[ModuleType]) -> ClassMetadataProvider:
        """Register every class defined (not merely imported) in ``modules``.

        Classes nested in a registered class body are registered as well.
        """

        classes: list[type] = []
        for module in modules:
            classes.extend(_defined_classes(vars(module).values(), module.__name__, prefix=""))
        return cls(classes)

    def class_for(self, name: str) -> type:
        try:
            return self._classes[name]
        except KeyError:
            raise LookupError(f"Unknown mapped type: {name}") from None

    def descriptor_for(self, cls: type) -> TypeDescriptor:
        return self.type_descriptor(type_name(cls))

    def metadata_for(self, cls: type | str) -> ClassMetadata:
        name = cls if isinstance(cls, str) else type_name(cls)
        self.class_for(name)
        metadata = self._metadata.get(name)
        if metadata is None:
            metadata = ClassMetadata(name=name)
            self._metadata[name] = metadata
        return metadata

    def all_type_names(self) -> Sequence[str]:
        return tuple(self._classes)

    def type_descriptor(self, name: str) -> TypeDescriptor:
        cls = self.class_for(name)
        return TypeDescriptor(
            name=name,
            is_abstract=_is_abstract(cls),
            declared_parent=self._declared_parent(cls),
        )

    def is_subclass_of(self, name: str, ancestor: str) -> bool:
        cls = self.class_for(name)
        ancestor_cls = self.class_for(ancestor)
        return cls is not ancestor_cls and issubclass(cls, ancestor_cls)

    def inheritance_declaration(self, name: str) -> InheritanceDeclaration | None:
        declarations = declarations_of(self.class_for(name))
        if declarations is None or declarations.inheritance is None:
            return None
        return InheritanceDeclaration(kind=declarations.inheritance)

    def discriminator_map_declaration(self, name: str) -> DiscriminatorMapDeclaration | None:
        declarations = declarations_of(self.class_for(name))
        if declarations is None or declarations.discriminator_map is None:
            return None
        return DiscriminatorMapDeclaration(
            entries={
                entry: target if isinstance(target, str) else type_name(target)
                for entry, target in declarations.discriminator_map.items()
            }
        )

    def discriminator_entry_declaration(self, name: str) -> DiscriminatorEntryDeclaration | None:
        declarations = declarations_of(self.class_for(name))
        if declarations is None or declarations.entry is None:
            return None
        return DiscriminatorEntryDeclaration(name=declarations.entry)

    def register_discriminator_map_entry(
        self, root_name: str, entry_name: str, type_name: str
    ) -> None:
        log.debug("Adding discriminator %s=%s to %s", entry_name, type_name, root_name)
        self.metadata_for(root_name).add_discriminator_map_class(entry_name, type_name)

    def _declared_parent(self, cls: type) -> str | None:
        registered = [base for base in cls.__mro__[1:] if self._is_registered(base)]
        for base in registered:
            if self._in_declared_hierarchy(base):
                return type_name(base)
        return type_name(registered[0]) if registered else None

    def _is_registered(self, cls: type) -> bool:
        return self._classes.get(type_name(cls)) is cls

    def _in_declared_hierarchy(self, cls: type) -> bool:
        # mixins sharing the module are registered but belong to no hierarchy
        for base in cls.__mro__:
            if not self._is_registered(base):
                continue
            declarations = declarations_of(base)
            if declarations is not None and declarations.inheritance is not None:
                return True
        return False


def _is_abstract(cls: type) -> bool:
    return inspect.isabstract(cls) or ABC in cls.__bases__


def _defined_classes(members: Iterable[object], module_name: str, *, prefix: str) -> list[type]:
    classes: list[type] = []
    for member in members:
        if not inspect.isclass(member) or member.__module__ != module_name:
            continue
        if member.__qualname__ != f"{prefix}{member.__name__}":
            continue
        classes.append(member)
        classes.extend(
            _defined_classes(vars(member).values(), module_name, prefix=f"{member.__qualname__}.")
        )
    return classes
