from __future__ import annotations

import pytest

from discrimap.adapters.memory import InMemoryMetadataProvider
from discrimap.domain.model import InheritanceKind


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DISCRIMAP_NAMESPACE_DELIMITER", raising=False)
    monkeypatch.delenv("DISCRIMAP_LOG_LEVEL", raising=False)


@pytest.fixture
def zoo_provider() -> InMemoryMetadataProvider:
    provider = InMemoryMetadataProvider()
    provider.register("Animal", abstract=True, inheritance=InheritanceKind.SINGLE_TABLE)
    provider.register("Dog", parent="Animal", entry="dog")
    provider.register("Cat", parent="Animal", entry="cat")
    provider.register("Puppy", parent="Dog")
    return provider
