"""Role balance analysis for a team's picks."""
import logging
from typing import Iterable, Optional

from storm_draft.models.hero import Role
from storm_draft.models.team import (
    NeedPriority,
    RoleAnalysis,
    RoleBalance,
    RoleNeed,
    RoleNeedKind,
)
from storm_draft.utils.hero_roles import HeroCatalog, get_default_catalog

logger = logging.getLogger(__name__)


class RoleBalanceAnalyzer:
    """Counts picks per role and derives the roles a composition still needs."""

    # Support is only suggested once the composition is mostly filled
    SUPPORT_MIN_PICKS = 4
    # More than this many heroes of one role is saturated
    SATURATION_THRESHOLD = 2

    def __init__(
        self,
        hero_catalog: Optional[HeroCatalog] = None,
        support_min_picks: int | None = None,
        saturation_threshold: int | None = None,
    ):
        self.hero_catalog = hero_catalog or get_default_catalog()
        if support_min_picks is not None:
            self.SUPPORT_MIN_PICKS = support_min_picks
        if saturation_threshold is not None:
            self.SATURATION_THRESHOLD = saturation_threshold

    def balance_of(self, picks: Iterable[str | None]) -> RoleBalance:
        balance = RoleBalance()
        for hero in picks:
            if not hero:
                continue
            role = self.hero_catalog.role_of(hero)
            balance.counts[role] = balance.count(role) + 1
        return balance

    def analyze(self, picks: Iterable[str | None]) -> RoleAnalysis:
        """Role counts and open needs, most urgent first."""
        balance = self.balance_of(picks)
        needs: list[RoleNeed] = []

        if balance.count(Role.TANK) == 0:
            needs.append(RoleNeed(RoleNeedKind.TANK, NeedPriority.CRITICAL))
        if balance.count(Role.HEALER) == 0:
            needs.append(RoleNeed(RoleNeedKind.HEALER, NeedPriority.CRITICAL))
        if balance.damage == 0:
            needs.append(RoleNeed(RoleNeedKind.DAMAGE, NeedPriority.IMPORTANT))
        if balance.count(Role.SUPPORT) == 0 and balance.total >= self.SUPPORT_MIN_PICKS:
            needs.append(RoleNeed(RoleNeedKind.SUPPORT, NeedPriority.SUGGESTED))

        kind_order = list(RoleNeedKind)
        needs.sort(key=lambda n: (n.priority.rank, kind_order.index(n.kind)))
        return RoleAnalysis(balance=balance, needs=needs)

    def is_saturated(self, balance: RoleBalance, role: Role) -> bool:
        """Whether the team already has more than the threshold of `role`."""
        if role is Role.UNKNOWN:
            return False
        return balance.count(role) > self.SATURATION_THRESHOLD
