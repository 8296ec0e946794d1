"""Meta strength contributions from aggregate hero statistics."""
from storm_draft.models.players import HeroStats
from storm_draft.models.recommendations import ReasonType, RecommendationReason


class MetaScorer:
    """Scores heroes on global and per-map win, pick and ban rates."""

    GLOBAL_MIN_GAMES = 100
    MAP_MIN_GAMES = 20
    WIN_RATE_WEIGHT = 0.5
    BAN_RATE_THRESHOLD = 15.0
    BAN_RATE_WEIGHT = 0.1
    MAP_DOMINANCE_WIN_RATE = 55.0

    def _win_rate_delta(self, stats: HeroStats) -> float:
        return self.WIN_RATE_WEIGHT * (stats.win_rate - 50.0)

    def pick_reasons(
        self,
        hero: str,
        hero_stats: dict[str, HeroStats],
        map_hero_stats: dict[str, HeroStats],
        map_name: str | None = None,
    ) -> list[RecommendationReason]:
        reasons = []
        stats = hero_stats.get(hero)
        if stats is not None and stats.games >= self.GLOBAL_MIN_GAMES:
            reasons.append(RecommendationReason(
                type=ReasonType.HERO_WR,
                label=f"{stats.win_rate:.1f}% win rate",
                delta=self._win_rate_delta(stats),
            ))
        map_stats = map_hero_stats.get(hero)
        if map_stats is not None and map_stats.games >= self.MAP_MIN_GAMES:
            reasons.append(RecommendationReason(
                type=ReasonType.HERO_WR,
                label=f"{map_stats.win_rate:.1f}% on {map_name or 'this map'}",
                delta=self._win_rate_delta(map_stats),
            ))
        return reasons

    def ban_reasons(
        self,
        hero: str,
        hero_stats: dict[str, HeroStats],
        map_hero_stats: dict[str, HeroStats],
        map_name: str | None = None,
    ) -> list[RecommendationReason]:
        """Like pick_reasons, with heavily banned and map-dominant heroes tagged ban_worthy."""
        reasons = []
        stats = hero_stats.get(hero)
        if stats is not None:
            if stats.ban_rate >= self.BAN_RATE_THRESHOLD:
                delta = self.BAN_RATE_WEIGHT * (stats.ban_rate - self.BAN_RATE_THRESHOLD)
                if stats.games >= self.GLOBAL_MIN_GAMES:
                    delta += self._win_rate_delta(stats)
                reasons.append(RecommendationReason(
                    type=ReasonType.BAN_WORTHY,
                    label=f"{stats.ban_rate:.1f}% ban rate",
                    delta=delta,
                ))
            elif stats.games >= self.GLOBAL_MIN_GAMES:
                reasons.append(RecommendationReason(
                    type=ReasonType.HERO_WR,
                    label=f"{stats.win_rate:.1f}% win rate",
                    delta=self._win_rate_delta(stats),
                ))

        map_stats = map_hero_stats.get(hero)
        if map_stats is not None and map_stats.games >= self.MAP_MIN_GAMES:
            dominant = map_stats.win_rate >= self.MAP_DOMINANCE_WIN_RATE
            reasons.append(RecommendationReason(
                type=ReasonType.BAN_WORTHY if dominant else ReasonType.HERO_WR,
                label=f"{map_stats.win_rate:.1f}% on {map_name or 'this map'}",
                delta=self._win_rate_delta(map_stats),
            ))
        return reasons
