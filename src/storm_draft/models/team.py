"""Team composition models."""

from dataclasses import dataclass, field
from enum import Enum

from storm_draft.models.hero import Role


class RoleNeedKind(str, Enum):
    """Role categories a composition can be missing."""

    TANK = "Tank"
    HEALER = "Healer"
    DAMAGE = "Damage"
    SUPPORT = "Support"

    def matches(self, role: Role) -> bool:
        """Whether a hero of `role` fills this need."""
        if self is RoleNeedKind.DAMAGE:
            return role.is_damage
        return role.value == self.value


class NeedPriority(str, Enum):
    """Urgency of a role need, most urgent first."""

    CRITICAL = "critical"
    IMPORTANT = "important"
    SUGGESTED = "suggested"

    @property
    def rank(self) -> int:
        return list(NeedPriority).index(self)


@dataclass(frozen=True)
class RoleNeed:
    """An unmet role requirement."""

    kind: RoleNeedKind
    priority: NeedPriority


@dataclass
class RoleBalance:
    """Hero count per role for one team's picks."""

    counts: dict[Role, int] = field(default_factory=lambda: {role: 0 for role in Role})

    def count(self, role: Role) -> int:
        return self.counts.get(role, 0)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def damage(self) -> int:
        return self.count(Role.MELEE_ASSASSIN) + self.count(Role.RANGED_ASSASSIN)

    def to_dict(self) -> dict[str, int]:
        return {role.value: self.count(role) for role in Role}


@dataclass
class RoleAnalysis:
    """Role balance plus the needs derived from it."""

    balance: RoleBalance
    needs: list[RoleNeed] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "balance": self.balance.to_dict(),
            "needs": [
                {"role": need.kind.value, "priority": need.priority.value}
                for need in self.needs
            ],
        }
