"""Centralized role normalization utility.

All role parsing should go through this module so free-text labels from
knowledge files, stats exports and API payloads resolve to the same `Role`.
Unrecognized labels resolve to `Role.UNKNOWN`.
"""

from typing import Optional

from storm_draft.models.hero import Role

# Mapping from known role spellings (lowercased) to the closed enumeration
ROLE_ALIASES: dict[str, Role] = {
    # Tank
    "tank": Role.TANK,
    "warrior": Role.TANK,
    "main tank": Role.TANK,

    # Bruiser
    "bruiser": Role.BRUISER,
    "offlaner": Role.BRUISER,
    "solo laner": Role.BRUISER,

    # Healer
    "healer": Role.HEALER,
    "heal": Role.HEALER,
    "main healer": Role.HEALER,

    # Ranged Assassin
    "ranged assassin": Role.RANGED_ASSASSIN,
    "rangedassassin": Role.RANGED_ASSASSIN,
    "ranged_assassin": Role.RANGED_ASSASSIN,
    "ranged": Role.RANGED_ASSASSIN,
    "mage": Role.RANGED_ASSASSIN,

    # Melee Assassin
    "melee assassin": Role.MELEE_ASSASSIN,
    "meleeassassin": Role.MELEE_ASSASSIN,
    "melee_assassin": Role.MELEE_ASSASSIN,
    "melee": Role.MELEE_ASSASSIN,

    # Support
    "support": Role.SUPPORT,
    "specialist": Role.SUPPORT,
    "utility": Role.SUPPORT,
}

# Role ordering for consistent display/sorting
ROLE_ORDER: list[Role] = list(Role)


def normalize_role(role: Optional[str]) -> Role:
    """Normalize a role label to a `Role`.

    Examples:
        >>> normalize_role("Ranged Assassin")
        <Role.RANGED_ASSASSIN: 'Ranged Assassin'>
        >>> normalize_role("HEALER")
        <Role.HEALER: 'Healer'>
        >>> normalize_role("Sniper")
        <Role.UNKNOWN: 'Unknown'>
    """
    if role is None:
        return Role.UNKNOWN
    return ROLE_ALIASES.get(role.strip().lower(), Role.UNKNOWN)


def normalize_role_strict(role: str) -> Role:
    """Normalize a role label, raising ValueError if unknown."""
    normalized = normalize_role(role)
    if normalized is Role.UNKNOWN:
        raise ValueError(f"Unknown role: {role}")
    return normalized


def sort_by_role(heroes: list[dict], role_key: str = "role") -> list[dict]:
    """Sort hero dicts by role order, then by name."""
    def sort_key(hero: dict) -> tuple[int, str]:
        role = normalize_role(hero.get(role_key))
        return ROLE_ORDER.index(role), hero.get("name", "")

    return sorted(heroes, key=sort_key)
