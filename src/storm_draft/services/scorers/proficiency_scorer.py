"""Player proficiency contributions from personal win rates."""
from storm_draft.models.players import PlayerProfile
from storm_draft.models.recommendations import ReasonType, RecommendationReason


class ProficiencyScorer:
    """Compares each tracked player's win rate on a hero to their overall win rate."""

    MIN_GAMES = 3
    WEIGHT = 0.25
    MAX_DELTA = 5.0
    # Percentage points above the player's overall win rate to count as a standout
    STANDOUT_MARGIN = 5.0
    MAP_MIN_GAMES = 3
    MAP_MIN_WIN_RATE = 60.0
    MAP_BONUS = 1.0

    def _score_player(self, hero: str, player: PlayerProfile) -> list[RecommendationReason] | None:
        record = player.heroes.get(hero)
        if record is None or record.games < self.MIN_GAMES:
            return None

        diff = record.win_rate - player.overall_win_rate
        delta = max(-self.MAX_DELTA, min(self.MAX_DELTA, self.WEIGHT * diff))
        standout = diff >= self.STANDOUT_MARGIN
        reason_type = ReasonType.PLAYER_STRONG if standout else ReasonType.HERO_WR
        name = player.display_name

        reasons = [RecommendationReason(
            type=reason_type,
            label=f"{name}: {record.win_rate:.0f}% on {hero} ({record.games} games)",
            delta=delta,
        )]

        map_record = player.map_heroes.get(hero)
        if (
            map_record is not None
            and map_record.games >= self.MAP_MIN_GAMES
            and map_record.win_rate >= self.MAP_MIN_WIN_RATE
        ):
            reasons.append(RecommendationReason(
                type=reason_type,
                label=f"{name}: {map_record.win_rate:.0f}% on this map",
                delta=self.MAP_BONUS,
            ))
        return reasons

    def player_reasons(
        self, hero: str, players: list[PlayerProfile]
    ) -> tuple[list[RecommendationReason], str | None]:
        """Reasons from the best-suited player and their battletag if a standout.

        Returns:
            (reasons, suggested_player). Empty reasons when no player has
            enough games on the hero.
        """
        # Standouts outrank everyone else, then the highest total delta
        best: tuple[tuple[bool, float], str, list[RecommendationReason]] | None = None
        for player in sorted(players, key=lambda p: p.battletag):
            reasons = self._score_player(hero, player)
            if reasons is None:
                continue
            standout = reasons[0].type is ReasonType.PLAYER_STRONG
            rank = (standout, sum(r.delta for r in reasons))
            if best is None or rank > best[0]:
                best = (rank, player.battletag, reasons)

        if best is None:
            return [], None

        _, battletag, reasons = best
        suggested = battletag if reasons[0].type is ReasonType.PLAYER_STRONG else None
        return reasons, suggested
