"""Errors raised while resolving discriminator maps."""

from __future__ import annotations


class DiscriminatorError(RuntimeError):
    """Base class for discriminator map resolution failures."""


class DriverUnavailableError(DiscriminatorError):
    """Raised when the metadata driver/registry cannot be obtained."""

    def __init__(self, message: str = "Metadata mapping driver could not be loaded") -> None:
        super().__init__(message)


class DuplicateDiscriminatorError(DiscriminatorError):
    """Raised when two distinct types claim the same discriminator name."""

    def __init__(self, name: str, existing: str, incoming: str) -> None:
        self.name = name
        self.existing = existing
        self.incoming = incoming
        super().__init__(
            f'Found duplicate discriminator map entry "{name}": '
            f"already bound to {existing}, also claimed by {incoming}"
        )
