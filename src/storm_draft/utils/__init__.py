"""Utility modules for storm_draft."""

from storm_draft.utils.role_normalizer import (
    ROLE_ALIASES,
    ROLE_ORDER,
    normalize_role,
    normalize_role_strict,
    sort_by_role,
)
from storm_draft.utils.hero_roles import HeroCatalog, get_hero_role

__all__ = [
    "ROLE_ALIASES",
    "ROLE_ORDER",
    "normalize_role",
    "normalize_role_strict",
    "sort_by_role",
    "HeroCatalog",
    "get_hero_role",
]
