"""Application entry points for resolving whole registries."""

from __future__ import annotations

from importlib import import_module
from logging import getLogger
from typing import TYPE_CHECKING

from discrimap.adapters.reflection import ClassMetadataProvider
from discrimap.subscriber import EntityDiscriminator

if TYPE_CHECKING:
    from collections.abc import Sequence

    from discrimap.config import DiscriminatorSettings
    from discrimap.domain.model import ResolvedDiscriminatorMap
    from discrimap.domain.ports import MetadataProvider

log = getLogger(__name__)


def resolve_all(
    provider: MetadataProvider,
    *,
    settings: DiscriminatorSettings | None = None,
) -> dict[str, ResolvedDiscriminatorMap]:
    """Resolve every root carrying a single-table or joined declaration, in registry order."""

    subscriber = EntityDiscriminator(lambda: provider, settings=settings)
    results: dict[str, ResolvedDiscriminatorMap] = {}
    for name in provider.all_type_names():
        declaration = provider.inheritance_declaration(name)
        if declaration is None or not declaration.kind.uses_discriminator:
            continue
        results[name] = subscriber.on_metadata_load(provider.type_descriptor(name))

    log.info("Resolved discriminator maps for %d root(s)", len(results))
    return results


def resolve_class(
    target: str,
    *,
    modules: Sequence[str] = (),
    settings: DiscriminatorSettings | None = None,
) -> ResolvedDiscriminatorMap:
    """Resolve ``package.module:ClassName`` against classes defined in the given modules.

    The root's own module is always part of the registry.
    """

    module_name, separator, qualname = target.partition(":")
    if not separator or not module_name or not qualname:
        raise ValueError(f"Expected MODULE:CLASS, got {target!r}")

    root_module = import_module(module_name)
    loaded = [root_module, *(import_module(name) for name in modules if name != module_name)]
    provider = ClassMetadataProvider.from_modules(loaded)

    root_cls: object = root_module
    for part in qualname.split("."):
        root_cls = getattr(root_cls, part, None)
        if root_cls is None:
            raise ValueError(f"Module {module_name} has no attribute {qualname}")
    if not isinstance(root_cls, type):
        raise ValueError(f"{target} is not a class")

    subscriber = EntityDiscriminator(lambda: provider, settings=settings)
    return subscriber.on_metadata_load(provider.descriptor_for(root_cls))

