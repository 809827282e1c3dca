from __future__ import annotations

import pytest

from discrimap.domain.discrimination import merge_discriminator_maps
from discrimap.domain.errors import DuplicateDiscriminatorError
from discrimap.domain.model import TypeDescriptor

ABSTRACT_ROOT = TypeDescriptor("App.Models.Animal", is_abstract=True)
CONCRETE_ROOT = TypeDescriptor("App.Models.Invoice")


def test_explicit_entries_are_kept_and_come_first() -> None:
    merged = merge_discriminator_maps(
        {"x": "TypeA"},
        {"b": "TypeB"},
        ABSTRACT_ROOT,
    )

    assert list(merged.items()) == [("x", "TypeA"), ("b", "TypeB")]


def test_discovered_type_already_bound_is_skipped_silently() -> None:
    merged = merge_discriminator_maps({"x": "TypeA"}, {"y": "TypeA"}, ABSTRACT_ROOT)

    assert merged == {"x": "TypeA"}


def test_discovered_name_bound_to_other_explicit_type_fails() -> None:
    with pytest.raises(DuplicateDiscriminatorError) as exc:
        merge_discriminator_maps({"x": "TypeA"}, {"x": "TypeB"}, ABSTRACT_ROOT)

    assert (exc.value.existing, exc.value.incoming) == ("TypeA", "TypeB")


def test_concrete_root_gets_short_name_self_entry() -> None:
    merged = merge_discriminator_maps({}, {"paper": "App.Models.PaperInvoice"}, CONCRETE_ROOT)

    assert merged == {
        "paper": "App.Models.PaperInvoice",
        "invoice": "App.Models.Invoice",
    }


def test_root_listed_explicitly_gets_no_extra_self_entry() -> None:
    merged = merge_discriminator_maps({"bill": "App.Models.Invoice"}, {}, CONCRETE_ROOT)

    assert merged == {"bill": "App.Models.Invoice"}


def test_abstract_root_gets_no_self_entry() -> None:
    assert merge_discriminator_maps({}, {}, ABSTRACT_ROOT) == {}


def test_self_entry_colliding_with_existing_key_fails() -> None:
    with pytest.raises(DuplicateDiscriminatorError) as exc:
        merge_discriminator_maps({"invoice": "App.Models.Receipt"}, {}, CONCRETE_ROOT)

    assert exc.value.name == "invoice"
    assert exc.value.existing == "App.Models.Receipt"
    assert exc.value.incoming == "App.Models.Invoice"


def test_self_entry_uses_given_delimiter() -> None:
    root = TypeDescriptor("App\\Models\\Invoice")

    assert merge_discriminator_maps({}, {}, root, delimiter="\\") == {
        "invoice": "App\\Models\\Invoice"
    }


def test_inputs_are_not_mutated() -> None:
    explicit = {"x": "TypeA"}
    discovered = {"b": "TypeB"}

    merge_discriminator_maps(explicit, discovered, CONCRETE_ROOT)

    assert explicit == {"x": "TypeA"}
    assert discovered == {"b": "TypeB"}
