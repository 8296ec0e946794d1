"""Recommendation engine combining the draft scorers."""
import logging
from dataclasses import dataclass, field
from typing import Optional

from storm_draft.models.draft import DraftAction
from storm_draft.models.players import HeroStats, PlayerProfile
from storm_draft.models.recommendations import (
    DraftRecommendation,
    ReasonType,
    RecommendationReason,
)
from storm_draft.models.team import RoleNeed
from storm_draft.services.role_balance import RoleBalanceAnalyzer
from storm_draft.services.scorers import (
    MatchupScorer,
    MetaScorer,
    ProficiencyScorer,
    RoleFitScorer,
)
from storm_draft.services.synergy_service import SynergyService
from storm_draft.utils.hero_roles import HeroCatalog, get_default_catalog

logger = logging.getLogger(__name__)


@dataclass
class DraftContext:
    """Everything the engine needs to score one turn.

    "Own" is always the team currently acting. For a ban turn the heroes are
    scored as picks for the opposing team.
    """

    map_name: str | None
    action: DraftAction = DraftAction.PICK
    own_picks: list[str] = field(default_factory=list)
    enemy_picks: list[str] = field(default_factory=list)
    unavailable: set[str] = field(default_factory=set)
    players: list[PlayerProfile] = field(default_factory=list)
    hero_stats: dict[str, HeroStats] = field(default_factory=dict)
    map_hero_stats: dict[str, HeroStats] = field(default_factory=dict)
    role_needs: list[RoleNeed] | None = None


class RecommendationEngine:
    """Ranks every available hero by summed win-rate deltas."""

    def __init__(
        self,
        hero_catalog: Optional[HeroCatalog] = None,
        synergy_service: Optional[SynergyService] = None,
        role_analyzer: Optional[RoleBalanceAnalyzer] = None,
    ):
        self.hero_catalog = hero_catalog or get_default_catalog()
        self.synergy_service = synergy_service or SynergyService()
        self.role_analyzer = role_analyzer or RoleBalanceAnalyzer(self.hero_catalog)

        self.matchup_scorer = MatchupScorer(self.synergy_service)
        self.proficiency_scorer = ProficiencyScorer()
        self.role_fit_scorer = RoleFitScorer(self.role_analyzer)
        self.meta_scorer = MetaScorer()

    def recommend(self, context: DraftContext) -> list[DraftRecommendation]:
        """Full ranked list for the turn, best first.

        Returns an empty list while no map is selected.
        """
        if not context.map_name:
            return []

        is_ban = context.action is DraftAction.BAN
        # A banned hero is denied to the opponent, so score it as their pick
        if is_ban:
            allies, opponents = context.enemy_picks, context.own_picks
            players: list[PlayerProfile] = []
            role_needs = None
        else:
            allies, opponents = context.own_picks, context.enemy_picks
            players = context.players
            role_needs = context.role_needs

        analysis = self.role_analyzer.analyze(allies)
        if role_needs is None:
            role_needs = analysis.needs

        candidates = [
            h for h in self.hero_catalog.all_known_heroes() if h not in context.unavailable
        ]

        recommendations = []
        for hero in candidates:
            reasons: list[RecommendationReason] = []
            suggested_player = None

            reasons.extend(self.matchup_scorer.synergy_reasons(hero, allies))
            reasons.extend(self.matchup_scorer.counter_reasons(hero, opponents))

            if players:
                player_reasons, suggested_player = self.proficiency_scorer.player_reasons(hero, players)
                reasons.extend(player_reasons)

            role = self.hero_catalog.role_of(hero)
            reasons.extend(self.role_fit_scorer.role_reasons(role, role_needs, analysis.balance))

            if is_ban:
                reasons.extend(self.meta_scorer.ban_reasons(
                    hero, context.hero_stats, context.map_hero_stats, context.map_name
                ))
            else:
                reasons.extend(self.meta_scorer.pick_reasons(
                    hero, context.hero_stats, context.map_hero_stats, context.map_name
                ))

            recommendations.append(self._finalize(hero, reasons, suggested_player, is_ban))

        recommendations.sort(key=lambda r: (-r.net_delta, r.hero))

        if recommendations:
            top = recommendations[0]
            logger.debug(
                f"Scored {len(recommendations)} heroes for {context.action.value} "
                f"on {context.map_name}; top: {top.hero} ({top.net_delta:+.2f})"
            )
        return recommendations

    def _finalize(
        self,
        hero: str,
        reasons: list[RecommendationReason],
        suggested_player: str | None,
        is_ban: bool,
    ) -> DraftRecommendation:
        rounded = []
        for reason in reasons:
            delta = round(reason.delta, 2)
            if delta == 0:
                continue
            rounded.append(RecommendationReason(type=reason.type, label=reason.label, delta=delta))

        if is_ban:
            positive = [r for r in rounded if r.delta > 0]
            if positive:
                max(positive, key=lambda r: r.delta).type = ReasonType.BAN_WORTHY

        return DraftRecommendation(
            hero=hero,
            net_delta=round(sum(r.delta for r in rounded), 2),
            reasons=rounded,
            suggested_player=suggested_player,
        )
