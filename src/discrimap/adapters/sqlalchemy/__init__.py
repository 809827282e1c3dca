"""SQLAlchemy adapter package for discrimap."""

from __future__ import annotations

from .mappings import HierarchyMapping, create_all_tables, map_hierarchy

__all__ = [
    "HierarchyMapping",
    "create_all_tables",
    "map_hierarchy",
]
