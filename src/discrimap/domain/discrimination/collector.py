"""Discriminator entry collection for discovered subclasses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from discrimap.domain.errors import DuplicateDiscriminatorError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from discrimap.domain.model import TypeDescriptor
    from discrimap.domain.ports import MetadataReader

log = logging.getLogger(__name__)


def collect_discriminators(
    candidates: Iterable[TypeDescriptor], metadata: MetadataReader
) -> dict[str, str]:
    """Accumulate ``entry name -> type name`` for concrete candidates.

    Abstract candidates and candidates without an entry declaration are skipped.
    Names are unique across the whole pass, not per branch.
    """

    discovered: dict[str, str] = {}
    for candidate in candidates:
        if candidate.is_abstract:
            log.debug("Skipping abstract type %s", candidate.name)
            continue

        entry = metadata.discriminator_entry_declaration(candidate.name)
        if entry is None:
            log.debug("Type %s declares no discriminator entry", candidate.name)
            continue

        existing = discovered.get(entry.name)
        if existing is not None and existing != candidate.name:
            raise DuplicateDiscriminatorError(entry.name, existing, candidate.name)
        discovered[entry.name] = candidate.name

    return discovered
