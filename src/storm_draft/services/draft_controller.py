"""Draft state controller: applies selections, undo and reset over the fixed sequence."""
import logging
import time
from typing import Iterable, Optional

from storm_draft.exceptions import InvalidSelection, NothingToUndo
from storm_draft.models.draft import DraftAction, DraftState, DraftTurn, HistoryEntry, Team
from storm_draft.services.draft_sequence import (
    PICKS_PER_TEAM,
    ban_turns,
    get_turn,
    is_draft_complete,
    pick_turns,
)

logger = logging.getLogger(__name__)


class DraftController:
    """Owns one DraftState. Every mutation either fully applies or raises."""

    def __init__(self, our_team: Optional[Team] = None, state: Optional[DraftState] = None):
        if state is None:
            state = DraftState(our_team=our_team or Team.BLUE)
        elif our_team is not None:
            state.our_team = our_team
        self.state = state

    @property
    def our_team(self) -> Team:
        return self.state.our_team

    # -- Queries --

    def current_turn(self) -> DraftTurn | None:
        return get_turn(self.state.current_turn_index)

    def is_complete(self) -> bool:
        return is_draft_complete(self.state.current_turn_index)

    def is_our_turn(self) -> bool:
        turn = self.current_turn()
        return turn is not None and turn.team is self.our_team

    def unavailable_heroes(self) -> set[str]:
        return set(self.state.selections.values())

    def available_heroes(self, all_heroes: Iterable[str]) -> list[str]:
        """Heroes not yet picked or banned, in input order."""
        used = self.unavailable_heroes()
        return [h for h in all_heroes if h not in used]

    def picks_for_team(self, team: Team) -> list[str | None]:
        """Five pick slots for a team, None where the slot is still open."""
        slots: list[str | None] = [None] * PICKS_PER_TEAM
        for turn in pick_turns(team):
            hero = self.state.selections.get(turn.turn_index)
            if hero is not None:
                slots[turn.pick_slot] = hero
        return slots

    def bans_for_team(self, team: Team) -> list[str]:
        return [
            self.state.selections[t.turn_index]
            for t in ban_turns(team)
            if t.turn_index in self.state.selections
        ]

    def our_picks(self) -> list[str]:
        return [h for h in self.picks_for_team(self.our_team) if h]

    def enemy_picks(self) -> list[str]:
        return [h for h in self.picks_for_team(self.our_team.opponent) if h]

    def unassigned_battletags(self, battletags: Iterable[str]) -> list[str]:
        assigned = set(self.state.player_assignments.values())
        return [b for b in battletags if b not in assigned]

    # -- Mutations --

    def apply_selection(
        self,
        hero: str,
        team: Team | None = None,
        action: DraftAction | None = None,
    ) -> HistoryEntry:
        """Apply a pick or ban for the current turn and advance.

        Raises:
            InvalidSelection: Draft complete, blank or already used hero,
                or the given team/action does not match the current turn.
        """
        turn = self.current_turn()
        if turn is None:
            raise InvalidSelection("Draft is already complete")

        hero = (hero or "").strip()
        if not hero:
            raise InvalidSelection("Hero name is required")
        if hero in self.unavailable_heroes():
            raise InvalidSelection(f"Hero '{hero}' is not available (already picked or banned)")
        if team is not None and team is not turn.team:
            raise InvalidSelection(f"It is {turn.team.value}'s turn, not {team.value}'s")
        if action is not None and action is not turn.action:
            raise InvalidSelection(f"Current turn is a {turn.action.value}, not a {action.value}")

        entry = HistoryEntry(turn=turn, hero=hero, timestamp=time.time())
        self.state.selections[turn.turn_index] = hero
        self.state.history.append(entry)
        self.state.current_turn_index += 1

        logger.info(f"Turn {turn.turn_index}: {turn.team.value} {turn.action.value} {hero}")
        return entry

    def undo(self) -> HistoryEntry:
        """Revert the most recent selection.

        Raises:
            NothingToUndo: No selections have been made.
        """
        if not self.state.history:
            raise NothingToUndo("Nothing to undo")

        entry = self.state.history.pop()
        index = entry.turn.turn_index
        self.state.selections.pop(index, None)
        self.state.player_assignments.pop(index, None)
        self.state.current_turn_index = index

        logger.info(f"Undid turn {index} ({entry.hero})")
        return entry

    def reset(self) -> None:
        self.state.selections.clear()
        self.state.history.clear()
        self.state.player_assignments.clear()
        self.state.current_turn_index = 0
        logger.info("Draft reset")

    def assign_player(self, turn_index: int, battletag: str) -> None:
        """Record which tracked player took one of our completed picks.

        Raises:
            InvalidSelection: The turn is not one of our played picks, or the
                battletag is already assigned to another pick.
        """
        turn = get_turn(turn_index)
        if (
            turn is None
            or turn.team is not self.our_team
            or turn.action is not DraftAction.PICK
            or turn_index not in self.state.selections
        ):
            raise InvalidSelection(f"Turn {turn_index} is not one of your completed picks")

        battletag = (battletag or "").strip()
        if not battletag:
            raise InvalidSelection("Battletag is required")
        for other_index, other_tag in self.state.player_assignments.items():
            if other_tag == battletag and other_index != turn_index:
                raise InvalidSelection(f"{battletag} is already assigned to turn {other_index}")

        self.state.player_assignments[turn_index] = battletag
        logger.info(f"Assigned {battletag} to turn {turn_index}")
