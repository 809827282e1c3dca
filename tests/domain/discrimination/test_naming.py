from __future__ import annotations

import pytest

from discrimap.domain.discrimination import short_name


@pytest.mark.parametrize(
    ("type_name", "expected"),
    [
        ("App.Models.Invoice", "invoice"),
        ("Invoice", "invoice"),
        ("shop.ShippingAddress", "shippingaddress"),
    ],
)
def test_short_name_uses_lower_cased_last_segment(type_name: str, expected: str) -> None:
    assert short_name(type_name) == expected


def test_short_name_honours_custom_delimiter() -> None:
    assert short_name("App\\Models\\Invoice", delimiter="\\") == "invoice"
    assert short_name("App.Models.Invoice", delimiter="\\") == "app.models.invoice"


def test_short_name_rejects_empty_delimiter() -> None:
    with pytest.raises(ValueError, match="must not be empty"):
        short_name("Invoice", delimiter="")
