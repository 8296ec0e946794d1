"""Curated hero synergy and counter catalogs."""
import json
import logging
from pathlib import Path
from typing import Optional

from storm_draft.models.hero import CounterEntry, SynergyEntry, SynergyStrength

logger = logging.getLogger(__name__)

DEFAULT_KNOWLEDGE_DIR = Path(__file__).parents[1] / "knowledge"


def _pair_key(hero_a: str, hero_b: str) -> tuple[str, str]:
    return tuple(sorted([hero_a, hero_b]))


class SynergyService:
    """Direction-agnostic lookups over the synergy and counter catalogs."""

    # Team synergy score points per catalogued pair
    STRENGTH_POINTS = {SynergyStrength.HIGH: 2, SynergyStrength.MEDIUM: 1}

    def __init__(self, knowledge_dir: Optional[Path] = None):
        if knowledge_dir is None:
            knowledge_dir = DEFAULT_KNOWLEDGE_DIR
        self.knowledge_dir = knowledge_dir
        self._synergies: dict[tuple[str, str], SynergyEntry] = {}
        self._counters: dict[tuple[str, str], CounterEntry] = {}
        self._load_data()

    def _read_json(self, filename: str) -> list:
        path = self.knowledge_dir / filename
        if not path.exists():
            logger.warning(f"{filename} not found at {path}")
            return []
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load {filename}: {e}")
            return []

    def _load_data(self):
        """Load curated synergy and counter data."""
        for syn in self._read_json("hero_synergies.json"):
            heroes = syn.get("heroes", [])
            if len(heroes) != 2:
                continue
            try:
                strength = SynergyStrength(syn.get("strength", "medium"))
            except ValueError:
                logger.warning(f"Skipping synergy {heroes} with strength {syn.get('strength')!r}")
                continue
            entry = SynergyEntry(
                heroes=(heroes[0], heroes[1]),
                reason=syn.get("reason", ""),
                strength=strength,
            )
            self._synergies[_pair_key(*heroes)] = entry

        for ctr in self._read_json("hero_counters.json"):
            hero, countered = ctr.get("hero"), ctr.get("counters")
            if not hero or not countered:
                continue
            try:
                strength = SynergyStrength(ctr.get("strength", "medium"))
            except ValueError:
                logger.warning(f"Skipping counter {hero}>{countered} with strength {ctr.get('strength')!r}")
                continue
            entry = CounterEntry(
                hero=hero,
                countered=countered,
                reason=ctr.get("reason", ""),
                strength=strength,
            )
            self._counters[_pair_key(hero, countered)] = entry

        logger.debug(
            f"Loaded {len(self._synergies)} synergies and {len(self._counters)} counters "
            f"from {self.knowledge_dir}"
        )

    def lookup_pair(self, hero_a: str, hero_b: str) -> SynergyEntry | None:
        """Synergy between two heroes, in either order."""
        return self._synergies.get(_pair_key(hero_a, hero_b))

    def lookup_counter(self, hero_a: str, hero_b: str) -> CounterEntry | None:
        """Counter relationship between two heroes, whichever holds the advantage."""
        return self._counters.get(_pair_key(hero_a, hero_b))

    def find_synergies(self, picks: list[str | None]) -> list[SynergyEntry]:
        """All catalogued synergies among a team's picks."""
        heroes = [h for h in picks if h]
        found = []
        for i, hero_a in enumerate(heroes):
            for hero_b in heroes[i + 1:]:
                entry = self.lookup_pair(hero_a, hero_b)
                if entry:
                    found.append(entry)
        return found

    def get_synergy_score(self, picks: list[str | None]) -> int:
        """Sum of strength points for synergies among the picks."""
        return sum(self.STRENGTH_POINTS[s.strength] for s in self.find_synergies(picks))

    def calculate_team_synergy(self, picks: list[str | None]) -> dict:
        """Synergy summary for a team."""
        synergies = self.find_synergies(picks)
        synergies.sort(key=lambda s: (-self.STRENGTH_POINTS[s.strength], s.heroes))
        return {
            "score": sum(self.STRENGTH_POINTS[s.strength] for s in synergies),
            "synergy_pairs": [
                {
                    "heroes": list(s.heroes),
                    "reason": s.reason,
                    "strength": s.strength.value,
                }
                for s in synergies
            ],
        }
