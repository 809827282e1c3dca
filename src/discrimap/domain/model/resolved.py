"""Resolver output value."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType


class ResolvedDiscriminatorMap(Mapping[str, str]):
    """Final ``discriminator name -> type name`` map for one root type.

    Instances are built fresh for every resolution pass. Two resolved maps are
    equal when root and entries (in order) match; against any other mapping
    only the entries are compared, as for ``dict``.
    """

    __slots__ = ("_entries", "_root")

    def __init__(self, root: str, entries: Mapping[str, str] | None = None) -> None:
        resolved = dict(entries or {})
        self._root = root
        self._entries: Mapping[str, str] = MappingProxyType(resolved)

    @property
    def root(self) -> str:
        return self._root

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResolvedDiscriminatorMap):
            return self._root == other._root and list(self.items()) == list(other.items())
        if isinstance(other, Mapping):
            return dict(self._entries) == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._root, tuple(self.items())))

    def __repr__(self) -> str:
        return f"ResolvedDiscriminatorMap(root={self._root!r}, entries={dict(self._entries)!r})"

    def name_for(self, type_name: str) -> str | None:
        """Return the discriminator name bound to ``type_name``, if any."""

        for name, bound in self._entries.items():
            if bound == type_name:
                return name
        return None

    def as_dict(self) -> dict[str, str]:
        return dict(self._entries)
