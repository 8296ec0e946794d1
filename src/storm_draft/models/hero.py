"""Hero metadata models."""

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Coarse combat-function category of a hero."""

    TANK = "Tank"
    BRUISER = "Bruiser"
    HEALER = "Healer"
    RANGED_ASSASSIN = "Ranged Assassin"
    MELEE_ASSASSIN = "Melee Assassin"
    SUPPORT = "Support"
    UNKNOWN = "Unknown"

    @property
    def is_damage(self) -> bool:
        return self in (Role.RANGED_ASSASSIN, Role.MELEE_ASSASSIN)


class SynergyStrength(str, Enum):
    """Qualitative strength of a catalogued hero pairing."""

    HIGH = "high"
    MEDIUM = "medium"


@dataclass(frozen=True)
class HeroIdentity:
    """A hero and its role."""

    name: str
    role: Role


@dataclass(frozen=True)
class SynergyEntry:
    """Two heroes that work well on the same team."""

    heroes: tuple[str, str]
    reason: str
    strength: SynergyStrength

    def partner_of(self, hero: str) -> str:
        """Return the other hero of the pair."""
        return self.heroes[1] if self.heroes[0] == hero else self.heroes[0]


@dataclass(frozen=True)
class CounterEntry:
    """`hero` holds an advantage when played against `countered`."""

    hero: str
    countered: str
    reason: str
    strength: SynergyStrength
