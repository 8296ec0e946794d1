"""Recommendation models for draft suggestions."""

from dataclasses import dataclass, field
from enum import Enum


class ReasonType(str, Enum):
    """Kinds of contribution to a recommendation score."""

    HERO_WR = "hero_wr"
    COUNTER = "counter"
    SYNERGY = "synergy"
    ROLE_NEED = "role_need"
    ROLE_PENALTY = "role_penalty"
    PLAYER_STRONG = "player_strong"
    BAN_WORTHY = "ban_worthy"


@dataclass
class RecommendationReason:
    """One signed contribution, in win-rate percentage points."""

    type: ReasonType
    label: str
    delta: float


@dataclass
class DraftRecommendation:
    """A scored candidate hero for the current turn."""

    hero: str
    net_delta: float
    reasons: list[RecommendationReason] = field(default_factory=list)
    suggested_player: str | None = None  # Battletag

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON response."""
        return {
            "hero": self.hero,
            "net_delta": self.net_delta,
            "reasons": [
                {"type": r.type.value, "label": r.label, "delta": r.delta}
                for r in self.reasons
            ],
            "suggested_player": self.suggested_player,
        }
