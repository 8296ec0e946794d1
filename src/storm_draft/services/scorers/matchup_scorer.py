"""Synergy and counter contributions from the curated catalogs."""
from storm_draft.models.hero import SynergyStrength
from storm_draft.models.recommendations import ReasonType, RecommendationReason
from storm_draft.services.synergy_service import SynergyService


class MatchupScorer:
    """Scores a candidate against allied and opposing picks."""

    STRENGTH_DELTA = {SynergyStrength.HIGH: 3.0, SynergyStrength.MEDIUM: 1.5}

    def __init__(self, synergy_service: SynergyService):
        self.synergy_service = synergy_service

    def synergy_reasons(self, hero: str, allies: list[str]) -> list[RecommendationReason]:
        reasons = []
        for ally in allies:
            entry = self.synergy_service.lookup_pair(hero, ally)
            if entry is None:
                continue
            reasons.append(RecommendationReason(
                type=ReasonType.SYNERGY,
                label=f"Synergy with {ally}",
                delta=self.STRENGTH_DELTA[entry.strength],
            ))
        return reasons

    def counter_reasons(self, hero: str, opponents: list[str]) -> list[RecommendationReason]:
        """Positive when `hero` counters an opponent, negative when countered."""
        reasons = []
        for opponent in opponents:
            entry = self.synergy_service.lookup_counter(hero, opponent)
            if entry is None:
                continue
            delta = self.STRENGTH_DELTA[entry.strength]
            if entry.hero == hero:
                label = f"Counters {opponent}"
            else:
                label = f"Countered by {opponent}"
                delta = -delta
            reasons.append(RecommendationReason(type=ReasonType.COUNTER, label=label, delta=delta))
        return reasons
