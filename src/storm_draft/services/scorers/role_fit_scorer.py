"""Role need and saturation contributions."""
from storm_draft.models.hero import Role
from storm_draft.models.recommendations import ReasonType, RecommendationReason
from storm_draft.models.team import NeedPriority, RoleBalance, RoleNeed
from storm_draft.services.role_balance import RoleBalanceAnalyzer


class RoleFitScorer:
    """Rewards filling open role needs, penalizes stacking a role."""

    NEED_DELTA = {NeedPriority.CRITICAL: 4.0, NeedPriority.IMPORTANT: 2.0}
    SATURATION_PENALTY = -3.0

    def __init__(self, role_analyzer: RoleBalanceAnalyzer):
        self.role_analyzer = role_analyzer

    def role_reasons(
        self, role: Role, needs: list[RoleNeed], balance: RoleBalance
    ) -> list[RecommendationReason]:
        reasons = []
        # Needs are sorted by priority, only the first match counts
        for need in needs:
            if need.priority in self.NEED_DELTA and need.kind.matches(role):
                reasons.append(RecommendationReason(
                    type=ReasonType.ROLE_NEED,
                    label=f"Fills {need.priority.value} {need.kind.value} need",
                    delta=self.NEED_DELTA[need.priority],
                ))
                break

        if self.role_analyzer.is_saturated(balance, role):
            reasons.append(RecommendationReason(
                type=ReasonType.ROLE_PENALTY,
                label=f"Already {balance.count(role)} {role.value} heroes",
                delta=self.SATURATION_PENALTY,
            ))
        return reasons
