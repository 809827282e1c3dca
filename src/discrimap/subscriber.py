"""Metadata-load hook wiring the resolver into a mapping bootstrap."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from discrimap.config import get_settings
from discrimap.domain.discrimination import resolve_discriminator_map

if TYPE_CHECKING:
    from discrimap.config import DiscriminatorSettings
    from discrimap.domain.model import ResolvedDiscriminatorMap, TypeDescriptor
    from discrimap.domain.ports import MetadataProviderFactory

log = logging.getLogger(__name__)

LOAD_CLASS_METADATA: Final[str] = "load_class_metadata"


class EntityDiscriminator:
    """Extends discriminator maps of hierarchy roots as their metadata loads.

    The provider is requested from ``provider_factory`` on every event, so the
    subscriber itself carries no state between calls.
    """

    def __init__(
        self,
        provider_factory: MetadataProviderFactory,
        *,
        settings: DiscriminatorSettings | None = None,
    ) -> None:
        self._provider_factory = provider_factory
        self._settings = settings or get_settings()

    def subscribed_events(self) -> tuple[str, ...]:
        return (LOAD_CLASS_METADATA,)

    def on_metadata_load(self, root: TypeDescriptor) -> ResolvedDiscriminatorMap:
        provider = self._provider_factory()
        resolved = resolve_discriminator_map(
            root,
            provider,
            delimiter=self._settings.namespace_delimiter,
        )
        log.debug("Metadata loaded for %s with %d discriminator entries", root.name, len(resolved))
        return resolved
