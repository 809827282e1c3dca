"""Class decorators attaching discriminator declarations to mapped classes.

Declarations live in the decorated class's own namespace and are never
inherited: a subclass of ``@discriminator_entry("dog")`` declares nothing
until it is decorated itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final, TypeAlias, TypeVar

from discrimap.domain.model import InheritanceKind

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

_DECLARATIONS_ATTR: Final[str] = "__discrimap_declarations__"

MapTarget: TypeAlias = type | str

T = TypeVar("T", bound=type)


@dataclass(slots=True)
class ClassDeclarations:
    inheritance: InheritanceKind | None = None
    discriminator_map: dict[str, MapTarget] | None = None
    entry: str | None = None
    _declared: set[str] = field(default_factory=set[str], repr=False)

    def declare(self, kind: str) -> None:
        if kind in self._declared:
            raise ValueError(f"{kind} is already declared on this class")
        self._declared.add(kind)


def type_name(cls: type) -> str:
    """Fully-qualified name used as the type's identity in the registry."""

    return f"{cls.__module__}.{cls.__qualname__}"


def declarations_of(cls: type) -> ClassDeclarations | None:
    """Declarations made directly on ``cls`` (ignores base classes)."""

    return vars(cls).get(_DECLARATIONS_ATTR)


def _own_declarations(cls: type) -> ClassDeclarations:
    declarations = declarations_of(cls)
    if declarations is None:
        declarations = ClassDeclarations()
        setattr(cls, _DECLARATIONS_ATTR, declarations)
    return declarations


def inheritance_type(kind: str | InheritanceKind) -> Callable[[T], T]:
    """Declare the inheritance strategy of a hierarchy root."""

    parsed = InheritanceKind.parse(kind)

    def decorate(cls: T) -> T:
        declarations = _own_declarations(cls)
        declarations.declare("inheritance_type")
        declarations.inheritance = parsed
        return cls

    return decorate


def discriminator_map(entries: Mapping[str, MapTarget]) -> Callable[[T], T]:
    """Declare an explicit discriminator map; values are classes or type names."""

    copied = dict(entries)

    def decorate(cls: T) -> T:
        declarations = _own_declarations(cls)
        declarations.declare("discriminator_map")
        declarations.discriminator_map = copied
        return cls

    return decorate


def discriminator_entry(name: str) -> Callable[[T], T]:
    """Declare the name this class is identified by in its ancestors' maps."""

    if not name:
        raise ValueError("Discriminator entry name must not be empty")

    def decorate(cls: T) -> T:
        declarations = _own_declarations(cls)
        declarations.declare("discriminator_entry")
        declarations.entry = name
        return cls

    return decorate
