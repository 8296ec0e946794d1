"""Tests for the draft state controller."""
import copy

import pytest

from storm_draft.exceptions import InvalidSelection, NothingToUndo
from storm_draft.models.draft import DraftAction, DraftState, Team
from storm_draft.services.draft_controller import DraftController

ALL_HEROES = [f"Hero{i:02d}" for i in range(30)]


@pytest.fixture
def controller():
    return DraftController(Team.BLUE)


def _snapshot(controller):
    state = controller.state
    return (
        dict(state.selections),
        state.current_turn_index,
        list(state.history),
        dict(state.player_assignments),
    )


def _play(controller, heroes):
    for hero in heroes:
        controller.apply_selection(hero)


class TestInit:
    def test_keeps_team_of_given_state(self):
        state = DraftState(our_team=Team.RED)
        controller = DraftController(state=state)
        assert controller.our_team is Team.RED
        assert state.our_team is Team.RED

    def test_explicit_team_overrides_state(self):
        controller = DraftController(Team.BLUE, state=DraftState(our_team=Team.RED))
        assert controller.our_team is Team.BLUE

    def test_defaults_to_blue(self):
        assert DraftController().our_team is Team.BLUE


class TestApplySelection:
    def test_first_selection_is_red_ban(self, controller):
        entry = controller.apply_selection("Muradin")
        assert entry.turn.team is Team.RED
        assert entry.turn.action is DraftAction.BAN
        assert controller.state.selections == {0: "Muradin"}
        assert controller.state.current_turn_index == 1
        assert controller.bans_for_team(Team.RED) == ["Muradin"]

    def test_full_draft(self, controller):
        heroes = ALL_HEROES[:16]
        _play(controller, heroes)

        assert controller.is_complete()
        assert controller.current_turn() is None
        available = controller.available_heroes(ALL_HEROES)
        assert not set(heroes) & set(available)
        assert len(available) == len(ALL_HEROES) - 16

    def test_available_heroes_shrinks_by_one_per_selection(self, controller):
        for n, hero in enumerate(ALL_HEROES[:10], start=1):
            controller.apply_selection(hero)
            assert len(controller.available_heroes(ALL_HEROES)) == len(ALL_HEROES) - n
            assert len(set(controller.state.selections.values())) == n

    def test_rejects_duplicate_and_leaves_state(self, controller):
        _play(controller, ["Muradin", "Johanna"])
        before = _snapshot(controller)

        with pytest.raises(InvalidSelection):
            controller.apply_selection("Muradin")
        assert _snapshot(controller) == before

    def test_rejects_blank_hero(self, controller):
        with pytest.raises(InvalidSelection):
            controller.apply_selection("   ")
        assert controller.state.current_turn_index == 0

    def test_rejects_after_complete(self, controller):
        _play(controller, ALL_HEROES[:16])
        with pytest.raises(InvalidSelection):
            controller.apply_selection(ALL_HEROES[20])
        assert len(controller.state.history) == 16

    def test_rejects_mismatched_team_or_action(self, controller):
        with pytest.raises(InvalidSelection):
            controller.apply_selection("Muradin", team=Team.BLUE)
        with pytest.raises(InvalidSelection):
            controller.apply_selection("Muradin", action=DraftAction.PICK)
        assert controller.state.selections == {}

        controller.apply_selection("Muradin", team=Team.RED, action=DraftAction.BAN)
        assert controller.state.current_turn_index == 1


class TestUndo:
    def test_undo_is_inverse_of_apply(self, controller):
        _play(controller, ALL_HEROES[:5])
        before = _snapshot(controller)

        controller.apply_selection("Valla")
        controller.undo()

        assert _snapshot(controller) == before

    def test_undo_from_every_position(self):
        for start in range(16):
            controller = DraftController(Team.RED)
            _play(controller, ALL_HEROES[:start])
            before = copy.deepcopy(_snapshot(controller))
            controller.apply_selection("Valla")
            controller.undo()
            assert _snapshot(controller) == before

    def test_undo_empty_history_raises(self, controller):
        with pytest.raises(NothingToUndo):
            controller.undo()

    def test_undo_clears_player_assignment(self, controller):
        _play(controller, ["B1", "B2", "Johanna"])  # Turn 2 is blue's first pick
        controller.assign_player(2, "Player#1234")
        assert controller.state.player_assignments == {2: "Player#1234"}

        controller.undo()
        assert controller.state.player_assignments == {}
        assert controller.unassigned_battletags(["Player#1234"]) == ["Player#1234"]


class TestReset:
    def test_reset_clears_everything(self, controller):
        _play(controller, ["B1", "B2", "Johanna"])
        controller.assign_player(2, "Player#1234")

        controller.reset()

        assert controller.state.selections == {}
        assert controller.state.history == []
        assert controller.state.player_assignments == {}
        assert controller.state.current_turn_index == 0


class TestAssignPlayer:
    def test_only_our_completed_picks(self, controller):
        _play(controller, ["B1", "B2", "Johanna", "Raynor"])
        with pytest.raises(InvalidSelection):
            controller.assign_player(0, "Player#1234")  # Red ban
        with pytest.raises(InvalidSelection):
            controller.assign_player(3, "Player#1234")  # Red pick
        with pytest.raises(InvalidSelection):
            controller.assign_player(8, "Player#1234")  # Not played yet

    def test_battletag_assigned_once(self, controller):
        _play(controller, ALL_HEROES[:10])
        controller.assign_player(2, "Player#1234")
        with pytest.raises(InvalidSelection):
            controller.assign_player(8, "Player#1234")

        controller.assign_player(8, "Other#5678")
        assert controller.unassigned_battletags(["Player#1234", "Other#5678", "Third#1"]) == ["Third#1"]


class TestQueries:
    def test_picks_for_team_has_gaps(self, controller):
        _play(controller, ["B1", "B2", "Johanna", "Kael'thas", "Jaina"])
        assert controller.picks_for_team(Team.BLUE) == ["Johanna", None, None, None, None]
        assert controller.picks_for_team(Team.RED) == ["Kael'thas", "Jaina", None, None, None]
        assert controller.our_picks() == ["Johanna"]
        assert controller.enemy_picks() == ["Kael'thas", "Jaina"]

    def test_is_our_turn(self, controller):
        assert not controller.is_our_turn()  # Red bans first
        controller.apply_selection("B1")
        assert controller.is_our_turn()

    def test_unavailable_heroes(self, controller):
        _play(controller, ["B1", "B2", "Johanna"])
        assert controller.unavailable_heroes() == {"B1", "B2", "Johanna"}
