"""Draft service: builds scoring context for a live draft."""
import logging
from typing import Optional

from storm_draft.models.draft import DraftAction
from storm_draft.models.recommendations import DraftRecommendation
from storm_draft.repositories.stats_repository import StatsRepository
from storm_draft.services.draft_controller import DraftController
from storm_draft.services.recommendation_engine import DraftContext, RecommendationEngine
from storm_draft.services.role_balance import RoleBalanceAnalyzer
from storm_draft.services.synergy_service import SynergyService
from storm_draft.utils.hero_roles import HeroCatalog, get_default_catalog

logger = logging.getLogger(__name__)


class DraftService:
    """Connects a draft controller to the recommendation engine and stats."""

    def __init__(
        self,
        hero_catalog: Optional[HeroCatalog] = None,
        synergy_service: Optional[SynergyService] = None,
        repository: Optional[StatsRepository] = None,
    ):
        self.hero_catalog = hero_catalog or get_default_catalog()
        self.synergy_service = synergy_service or SynergyService()
        self.repository = repository
        self.role_analyzer = RoleBalanceAnalyzer(self.hero_catalog)
        self.engine = RecommendationEngine(
            self.hero_catalog, self.synergy_service, self.role_analyzer
        )

    def build_context(
        self,
        controller: DraftController,
        map_name: str | None,
        battletags: list[str] | None = None,
    ) -> DraftContext | None:
        """Scoring context for the current turn, None when the draft is complete.

        Opponent turns are scored from the opponent's side ("likely enemy
        picks"), without player data.
        """
        turn = controller.current_turn()
        if turn is None:
            return None

        acting = turn.team
        context = DraftContext(
            map_name=map_name,
            action=turn.action,
            own_picks=[h for h in controller.picks_for_team(acting) if h],
            enemy_picks=[h for h in controller.picks_for_team(acting.opponent) if h],
            unavailable=controller.unavailable_heroes(),
        )

        if self.repository is None or not map_name:
            return context

        context.hero_stats = self.repository.get_hero_stats()
        context.map_hero_stats = self.repository.get_hero_stats(map_name)

        if acting is controller.our_team and turn.action is DraftAction.PICK:
            for battletag in controller.unassigned_battletags(battletags or []):
                profile = self.repository.get_player_profile(battletag, map_name)
                if profile is None:
                    logger.debug(f"No stats for {battletag}")
                    continue
                context.players.append(profile)
        return context

    def get_recommendations(
        self,
        controller: DraftController,
        map_name: str | None,
        battletags: list[str] | None = None,
        limit: int | None = None,
    ) -> list[DraftRecommendation]:
        """Ranked recommendations for the current turn, truncated to `limit`."""
        context = self.build_context(controller, map_name, battletags)
        if context is None:
            return []
        recommendations = self.engine.recommend(context)
        if limit is not None:
            recommendations = recommendations[:limit]
        return recommendations

    def evaluate_team(self, picks: list[str | None]) -> dict:
        """Role analysis and catalogued synergies for a team's picks."""
        return {
            "roles": self.role_analyzer.analyze(picks).to_dict(),
            "synergy": self.synergy_service.calculate_team_synergy(picks),
        }
