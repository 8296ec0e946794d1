"""Shared fixtures: a small hero knowledge base written to tmp_path."""
import json

import pytest

from storm_draft.services.synergy_service import SynergyService
from storm_draft.utils.hero_roles import HeroCatalog

TEST_ROLES = {
    "Johanna": "Tank",
    "Muradin": "Tank",
    "Diablo": "Tank",
    "Sonya": "Bruiser",
    "Xul": "Bruiser",
    "Anduin": "Healer",
    "Rehgar": "Healer",
    "Kael'thas": "Ranged Assassin",
    "Azmodan": "Ranged Assassin",
    "Raynor": "Ranged Assassin",
    "Valla": "Ranged Assassin",
    "Jaina": "Ranged Assassin",
    "Illidan": "Melee Assassin",
    "Zeratul": "Melee Assassin",
    "Abathur": "Support",
    "Medivh": "Support",
}

TEST_SYNERGIES = [
    {"heroes": ["Johanna", "Kael'thas"], "reason": "Blessed Shield into Flamestrike", "strength": "medium"},
    {"heroes": ["Azmodan", "Johanna"], "reason": "Frontline for stacking", "strength": "medium"},
    {"heroes": ["Muradin", "Raynor"], "reason": "Frontline with sustained backline", "strength": "medium"},
    {"heroes": ["Abathur", "Illidan"], "reason": "Symbiote on a diver", "strength": "high"},
    {"heroes": ["Kael'thas", "Jaina"], "reason": "Burst mage combo", "strength": "medium"},
]

TEST_COUNTERS = [
    {"hero": "Johanna", "counters": "Kael'thas", "reason": "Iron Skin blunts the combo", "strength": "medium"},
    {"hero": "Zeratul", "counters": "Valla", "reason": "Vorpal Blade follows Vault", "strength": "high"},
    {"hero": "Diablo", "counters": "Illidan", "reason": "Stuns interrupt dives", "strength": "medium"},
]


def write_knowledge(directory, roles=None, synergies=None, counters=None):
    """Write hero knowledge JSON files and return the directory."""
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "hero_roles.json").write_text(
        json.dumps({"heroes": TEST_ROLES if roles is None else roles})
    )
    (directory / "hero_synergies.json").write_text(
        json.dumps(TEST_SYNERGIES if synergies is None else synergies)
    )
    (directory / "hero_counters.json").write_text(
        json.dumps(TEST_COUNTERS if counters is None else counters)
    )
    return directory


@pytest.fixture
def knowledge_dir(tmp_path):
    return write_knowledge(tmp_path / "knowledge")


@pytest.fixture
def hero_catalog(knowledge_dir):
    return HeroCatalog(knowledge_dir)


@pytest.fixture
def synergy_service(knowledge_dir):
    return SynergyService(knowledge_dir)


@pytest.fixture
def anyio_backend():
    return "asyncio"
