"""Per-class metadata receiving resolved discriminator maps."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class ClassMetadata:
    name: str
    discriminator_map: dict[str, str] = field(default_factory=dict[str, str])
    discriminator_value: str | None = None

    def add_discriminator_map_class(self, name: str, type_name: str) -> None:
        self.discriminator_map[name] = type_name
        if type_name == self.name:
            self.discriminator_value = name
