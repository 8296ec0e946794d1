"""Data models for the HotS Draft Assistant."""

from storm_draft.models.draft import (
    DraftAction,
    DraftState,
    DraftTurn,
    HistoryEntry,
    Team,
)
from storm_draft.models.hero import (
    CounterEntry,
    HeroIdentity,
    Role,
    SynergyEntry,
    SynergyStrength,
)
from storm_draft.models.players import HeroRecord, HeroStats, PlayerProfile
from storm_draft.models.recommendations import (
    DraftRecommendation,
    ReasonType,
    RecommendationReason,
)
from storm_draft.models.team import (
    NeedPriority,
    RoleAnalysis,
    RoleBalance,
    RoleNeed,
    RoleNeedKind,
)

__all__ = [
    "DraftAction",
    "DraftState",
    "DraftTurn",
    "HistoryEntry",
    "Team",
    "CounterEntry",
    "HeroIdentity",
    "Role",
    "SynergyEntry",
    "SynergyStrength",
    "HeroRecord",
    "HeroStats",
    "PlayerProfile",
    "DraftRecommendation",
    "ReasonType",
    "RecommendationReason",
    "NeedPriority",
    "RoleAnalysis",
    "RoleBalance",
    "RoleNeed",
    "RoleNeedKind",
]
