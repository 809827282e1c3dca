"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class InheritanceKind(StrEnum):
    """Mapping strategy declared on the root of an entity hierarchy."""

    NONE = "none"
    SINGLE_TABLE = "single_table"
    JOINED = "joined"

    @classmethod
    def parse(cls, value: str | InheritanceKind) -> InheritanceKind:
        """Accept enum members or their names/values in any case."""

        if isinstance(value, InheritanceKind):
            return value
        normalized = value.strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown inheritance kind: {value!r}") from None

    @property
    def uses_discriminator(self) -> bool:
        match self:
            case InheritanceKind.SINGLE_TABLE | InheritanceKind.JOINED:
                return True
            case InheritanceKind.NONE:
                return False
