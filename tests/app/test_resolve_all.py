from __future__ import annotations

import pytest

from discrimap.adapters.memory import InMemoryMetadataProvider
from discrimap.adapters.reflection import type_name
from discrimap.app import resolve_all, resolve_class
from discrimap.domain.errors import DuplicateDiscriminatorError
from discrimap.domain.model import InheritanceKind
from tests.support import zoo


def test_resolve_all_visits_every_discriminated_root(
    zoo_provider: InMemoryMetadataProvider,
) -> None:
    zoo_provider.register("Invoice", inheritance=InheritanceKind.JOINED)
    zoo_provider.register("Plain", inheritance=InheritanceKind.NONE)

    results = resolve_all(zoo_provider)

    assert list(results) == ["Animal", "Invoice"]
    assert results["Animal"].as_dict() == {"dog": "Dog", "cat": "Cat"}
    assert results["Invoice"].as_dict() == {"invoice": "Invoice"}
    assert zoo_provider.discriminator_map_for("Plain") == {}


def test_resolve_all_propagates_collisions() -> None:
    provider = InMemoryMetadataProvider()
    provider.register("Animal", abstract=True, inheritance=InheritanceKind.SINGLE_TABLE)
    provider.register("Dog", parent="Animal", entry="pet")
    provider.register("Cat", parent="Animal", entry="pet")

    with pytest.raises(DuplicateDiscriminatorError):
        resolve_all(provider)


def test_resolve_class_imports_target_module() -> None:
    resolved = resolve_class("tests.support.zoo:Animal")

    assert resolved.as_dict() == {
        "dog": type_name(zoo.Dog),
        "cat": type_name(zoo.Cat),
    }


@pytest.mark.parametrize("target", ["tests.support.zoo", ":Animal", "tests.support.zoo:"])
def test_resolve_class_requires_module_and_class(target: str) -> None:
    with pytest.raises(ValueError, match="MODULE:CLASS"):
        resolve_class(target)


def test_resolve_class_rejects_unknown_attribute() -> None:
    with pytest.raises(ValueError, match="has no attribute"):
        resolve_class("tests.support.zoo:Cow")


def test_resolve_class_accepts_nested_roots() -> None:
    resolved = resolve_class("tests.support.stable:Catalog.Product")

    assert resolved.as_dict() == {"book": "tests.support.stable.Catalog.Book"}
