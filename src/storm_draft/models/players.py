"""Player and hero statistics models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class HeroRecord:
    """Games and wins on one hero."""

    games: int
    wins: int

    @property
    def win_rate(self) -> float:
        """Win rate in percent (0-100)."""
        if self.games <= 0:
            return 0.0
        return round(self.wins / self.games * 100, 2)


@dataclass
class PlayerProfile:
    """A tracked player's hero statistics."""

    battletag: str
    overall_win_rate: float  # Percent
    heroes: dict[str, HeroRecord] = field(default_factory=dict)
    map_heroes: dict[str, HeroRecord] = field(default_factory=dict)  # On the selected map

    @property
    def display_name(self) -> str:
        """Battletag without the #NNNN discriminator."""
        return self.battletag.split("#")[0]


@dataclass(frozen=True)
class HeroStats:
    """Global hero statistics, all rates in percent."""

    games: int
    win_rate: float
    pick_rate: float = 0.0
    ban_rate: float = 0.0
