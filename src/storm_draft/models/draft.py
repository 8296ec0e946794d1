"""Draft sequence and state models."""

from dataclasses import dataclass, field
from enum import Enum


class Team(str, Enum):
    """Draft sides. Red bans first in Storm League."""

    BLUE = "blue"
    RED = "red"

    @property
    def opponent(self) -> "Team":
        return Team.RED if self is Team.BLUE else Team.BLUE


class DraftAction(str, Enum):
    """What a draft turn does."""

    BAN = "ban"
    PICK = "pick"


@dataclass(frozen=True)
class DraftTurn:
    """One step of the fixed draft sequence."""

    team: Team
    action: DraftAction
    phase: int  # 1-3
    number: int  # Ban/pick ordinal within its type for this team
    turn_index: int  # 0-15
    pick_slot: int | None = None  # 0-4, picks only


@dataclass(frozen=True)
class HistoryEntry:
    """A selection applied to the draft."""

    turn: DraftTurn
    hero: str
    timestamp: float


@dataclass
class DraftState:
    """Mutable state of one in-progress draft."""

    our_team: Team = Team.BLUE
    selections: dict[int, str] = field(default_factory=dict)  # turn_index -> hero
    current_turn_index: int = 0
    history: list[HistoryEntry] = field(default_factory=list)
    # Which tracked player drafted each of our picks: turn_index -> battletag
    player_assignments: dict[int, str] = field(default_factory=dict)
