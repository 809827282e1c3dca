"""Merging explicit, discovered and self entries into one discriminator map."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from discrimap.domain.errors import DuplicateDiscriminatorError

from .naming import DEFAULT_NAMESPACE_DELIMITER, short_name

if TYPE_CHECKING:
    from collections.abc import Mapping

    from discrimap.domain.model import TypeDescriptor

log = logging.getLogger(__name__)


def merge_discriminator_maps(
    explicit: Mapping[str, str],
    discovered: Mapping[str, str],
    root: TypeDescriptor,
    *,
    delimiter: str = DEFAULT_NAMESPACE_DELIMITER,
) -> dict[str, str]:
    """Combine the three entry sources with explicit entries taking precedence.

    1. ``explicit`` is copied as-is and never overwritten.
    2. A discovered entry is added only if its type is not already a value;
       otherwise the existing entry wins silently.
    3. A concrete root not yet present as a value gets a self-entry named by
       :func:`short_name`. If that name is already a key, the collision is raised.
    """

    merged = dict(explicit)
    bound_types = set(merged.values())

    for name, type_name in discovered.items():
        if type_name in bound_types:
            log.debug("Keeping existing entry for %s, skipping %r", type_name, name)
            continue
        existing = merged.get(name)
        if existing is not None:
            raise DuplicateDiscriminatorError(name, existing, type_name)
        merged[name] = type_name
        bound_types.add(type_name)

    if not root.is_abstract and root.name not in bound_types:
        self_name = short_name(root.name, delimiter=delimiter)
        existing = merged.get(self_name)
        if existing is not None:
            raise DuplicateDiscriminatorError(self_name, existing, root.name)
        merged[self_name] = root.name

    return merged
