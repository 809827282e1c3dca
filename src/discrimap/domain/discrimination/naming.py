"""Fallback naming for synthesized self-entries."""

from __future__ import annotations

from typing import Final

DEFAULT_NAMESPACE_DELIMITER: Final[str] = "."


def short_name(type_name: str, *, delimiter: str = DEFAULT_NAMESPACE_DELIMITER) -> str:
    """Lower-cased last namespace segment of ``type_name`` (or the whole name)."""

    if not delimiter:
        raise ValueError("Namespace delimiter must not be empty")
    if delimiter not in type_name:
        return type_name.lower()
    return type_name.rsplit(delimiter, 1)[-1].lower()
