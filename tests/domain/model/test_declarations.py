from __future__ import annotations

import pytest

from discrimap.domain.model import (
    DiscriminatorEntryDeclaration,
    DiscriminatorMapDeclaration,
    InheritanceDeclaration,
    InheritanceKind,
    ResolvedDiscriminatorMap,
    TypeDescriptor,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("SINGLE_TABLE", InheritanceKind.SINGLE_TABLE),
        ("joined", InheritanceKind.JOINED),
        (" None ", InheritanceKind.NONE),
        (InheritanceKind.JOINED, InheritanceKind.JOINED),
    ],
)
def test_inheritance_kind_parse(raw: str, expected: InheritanceKind) -> None:
    assert InheritanceKind.parse(raw) is expected


def test_inheritance_kind_parse_rejects_unknown_values() -> None:
    with pytest.raises(ValueError, match="Unknown inheritance kind"):
        InheritanceKind.parse("TABLE_PER_CLASS")


def test_only_single_table_and_joined_use_a_discriminator() -> None:
    assert {kind for kind in InheritanceKind if kind.uses_discriminator} == {
        InheritanceKind.SINGLE_TABLE,
        InheritanceKind.JOINED,
    }


def test_inheritance_declaration_defaults_to_none() -> None:
    assert InheritanceDeclaration().kind is InheritanceKind.NONE
    assert InheritanceDeclaration.of("joined").kind is InheritanceKind.JOINED


def test_type_descriptor_validation() -> None:
    with pytest.raises(ValueError, match="requires a name"):
        TypeDescriptor("")
    with pytest.raises(ValueError, match="cannot declare itself"):
        TypeDescriptor("Loop", declared_parent="Loop")


def test_discriminator_map_declaration_is_read_only_and_ordered() -> None:
    source = {"b": "TypeB", "a": "TypeA"}
    declaration = DiscriminatorMapDeclaration(entries=source)
    source["c"] = "TypeC"

    assert list(declaration.entries) == ["b", "a"]
    with pytest.raises(TypeError):
        declaration.entries["c"] = "TypeC"  # type: ignore[index]


def test_discriminator_entry_requires_a_name() -> None:
    with pytest.raises(ValueError, match="must not be empty"):
        DiscriminatorEntryDeclaration("")


def test_resolved_map_behaves_as_read_only_mapping() -> None:
    resolved = ResolvedDiscriminatorMap("Animal", {"dog": "Dog", "cat": "Cat"})

    assert resolved["dog"] == "Dog"
    assert list(resolved) == ["dog", "cat"]
    assert resolved.name_for("Cat") == "cat"
    assert resolved.name_for("Cow") is None
    assert resolved == ResolvedDiscriminatorMap("Animal", {"dog": "Dog", "cat": "Cat"})
    assert resolved != ResolvedDiscriminatorMap("Pet", {"dog": "Dog", "cat": "Cat"})
    assert hash(resolved) == hash(ResolvedDiscriminatorMap("Animal", resolved))


def test_resolved_map_equals_plain_mapping_by_entries() -> None:
    resolved = ResolvedDiscriminatorMap("Animal", {"dog": "Dog", "cat": "Cat"})

    assert resolved == {"cat": "Cat", "dog": "Dog"}
    assert resolved != {"dog": "Dog"}
    assert resolved != ResolvedDiscriminatorMap("Animal", {"cat": "Cat", "dog": "Dog"})
