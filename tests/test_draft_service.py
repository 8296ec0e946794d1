"""Tests for the draft service."""
from unittest.mock import MagicMock

import pytest

from storm_draft.models.draft import DraftAction, Team
from storm_draft.models.players import HeroRecord, HeroStats, PlayerProfile
from storm_draft.services.draft_controller import DraftController
from storm_draft.services.draft_service import DraftService


@pytest.fixture
def mock_repo():
    repo = MagicMock()
    repo.get_hero_stats.return_value = {"Valla": HeroStats(games=500, win_rate=52.0)}
    repo.get_player_profile.side_effect = lambda tag, map_name=None: PlayerProfile(
        tag, 50.0, heroes={"Valla": HeroRecord(10, 9)}
    )
    return repo


@pytest.fixture
def service(hero_catalog, synergy_service, mock_repo):
    return DraftService(hero_catalog, synergy_service, repository=mock_repo)


def _play(controller, heroes):
    for hero in heroes:
        controller.apply_selection(hero)


def test_build_context_our_pick_loads_players(service, mock_repo):
    controller = DraftController(Team.BLUE)
    _play(controller, ["Muradin", "Diablo"])  # Both bans, turn 2 is our pick

    context = service.build_context(controller, "Cursed Hollow", ["Alpha#1", "Bravo#2"])

    assert context.action is DraftAction.PICK
    assert context.unavailable == {"Muradin", "Diablo"}
    assert [p.battletag for p in context.players] == ["Alpha#1", "Bravo#2"]
    assert "Valla" in context.hero_stats
    mock_repo.get_hero_stats.assert_any_call("Cursed Hollow")


def test_build_context_skips_assigned_players(service, mock_repo):
    controller = DraftController(Team.BLUE)
    _play(controller, ["Muradin", "Diablo", "Johanna", "Kael'thas", "Jaina", "B3", "B4", "Raynor"])
    controller.assign_player(2, "Alpha#1")

    context = service.build_context(controller, "Cursed Hollow", ["Alpha#1", "Bravo#2"])

    assert [p.battletag for p in context.players] == ["Bravo#2"]
    assert context.own_picks == ["Johanna"]
    assert context.enemy_picks == ["Kael'thas", "Jaina", "Raynor"]


def test_build_context_enemy_turn_from_enemy_side(service, mock_repo):
    controller = DraftController(Team.BLUE)
    _play(controller, ["Muradin", "Diablo", "Johanna"])  # Turn 3 is red's pick

    context = service.build_context(controller, "Cursed Hollow", ["Alpha#1"])

    assert context.own_picks == []
    assert context.enemy_picks == ["Johanna"]
    assert context.players == []
    mock_repo.get_player_profile.assert_not_called()


def test_build_context_complete_draft(service):
    controller = DraftController(Team.BLUE)
    _play(controller, [f"Hero{i}" for i in range(16)])
    assert service.build_context(controller, "Cursed Hollow") is None
    assert service.get_recommendations(controller, "Cursed Hollow") == []


def test_get_recommendations_without_map(service):
    assert service.get_recommendations(DraftController(Team.BLUE), None) == []


def test_get_recommendations_limit_and_player(service):
    controller = DraftController(Team.BLUE)
    _play(controller, ["Muradin", "Diablo"])

    recommendations = service.get_recommendations(
        controller, "Cursed Hollow", ["Alpha#1"], limit=3
    )

    assert len(recommendations) == 3
    assert recommendations[0].hero == "Valla"
    assert recommendations[0].suggested_player == "Alpha#1"


def test_without_repository(hero_catalog, synergy_service):
    service = DraftService(hero_catalog, synergy_service)
    controller = DraftController(Team.BLUE)
    _play(controller, ["Muradin", "Diablo"])

    context = service.build_context(controller, "Cursed Hollow", ["Alpha#1"])
    assert context.players == []
    assert context.hero_stats == {}
    assert len(service.get_recommendations(controller, "Cursed Hollow")) == 14


def test_evaluate_team(service):
    result = service.evaluate_team(["Johanna", "Kael'thas", None, None, None])
    assert result["roles"]["balance"]["Tank"] == 1
    assert {"role": "Healer", "priority": "critical"} in result["roles"]["needs"]
    assert result["synergy"]["score"] == 1
    assert result["synergy"]["synergy_pairs"][0]["heroes"] == ["Johanna", "Kael'thas"]
