"""DuckDB-based data access for player and hero statistics."""
import logging
from pathlib import Path

import duckdb
import pandas as pd

from storm_draft.models.players import HeroRecord, HeroStats, PlayerProfile

logger = logging.getLogger(__name__)


class StatsRepository:
    """Data access layer - DuckDB queries against pre-built database file."""

    def __init__(self, database_path: str | Path):
        """Initialize with path to DuckDB database.

        Args:
            database_path: Path to storm_stats.duckdb
                          (built from CSV exports by scripts/build_duckdb.py)

        Raises:
            FileNotFoundError: If the database file doesn't exist
        """
        self._db_path = Path(database_path)

        if not self._db_path.exists():
            raise FileNotFoundError(
                f"DuckDB database not found: {self._db_path}\n"
                f"Run: python scripts/build_duckdb.py"
            )

        # Verify we can connect
        with duckdb.connect(str(self._db_path), read_only=True) as conn:
            tables = conn.execute("SHOW TABLES").fetchall()
        logger.info(f"StatsRepository: Using {self._db_path} ({len(tables)} tables)")

    @property
    def database_path(self) -> Path:
        return self._db_path

    def _query(self, sql: str, params: list | None = None) -> list[dict]:
        """Execute query and return list of dicts."""
        # Read-only connection per query - no locks needed, thread-safe
        with duckdb.connect(str(self._db_path), read_only=True) as conn:
            df = conn.execute(sql, params or []).df()

        # Aggregates over empty groups come back as NaN
        df = df.astype(object).where(pd.notna(df), None)
        return df.to_dict(orient="records")

    def win_rate_for(
        self, battletag: str, hero: str, map_name: str | None = None
    ) -> HeroRecord | None:
        """A player's games and wins on a hero, optionally on one map."""
        sql = """
            SELECT SUM(games) AS games, SUM(wins) AS wins
            FROM player_hero_stats
            WHERE battletag = ? AND hero = ?
        """
        params = [battletag, hero]
        if map_name:
            sql += " AND map = ?"
            params.append(map_name)

        rows = self._query(sql, params)
        if not rows or not rows[0]["games"]:
            return None
        return HeroRecord(games=int(rows[0]["games"]), wins=int(rows[0]["wins"]))

    def get_player_profile(
        self, battletag: str, map_name: str | None = None
    ) -> PlayerProfile | None:
        """All hero records for a player, None when the player has no games."""
        rows = self._query(
            """
            SELECT hero, SUM(games) AS games, SUM(wins) AS wins
            FROM player_hero_stats
            WHERE battletag = ?
            GROUP BY hero
            ORDER BY hero
            """,
            [battletag],
        )
        if not rows:
            return None

        heroes = {
            row["hero"]: HeroRecord(games=int(row["games"]), wins=int(row["wins"]))
            for row in rows
        }
        total_games = sum(r.games for r in heroes.values())
        total_wins = sum(r.wins for r in heroes.values())
        overall = round(total_wins / total_games * 100, 2) if total_games else 0.0

        map_heroes: dict[str, HeroRecord] = {}
        if map_name:
            map_rows = self._query(
                """
                SELECT hero, SUM(games) AS games, SUM(wins) AS wins
                FROM player_hero_stats
                WHERE battletag = ? AND map = ?
                GROUP BY hero
                """,
                [battletag, map_name],
            )
            map_heroes = {
                row["hero"]: HeroRecord(games=int(row["games"]), wins=int(row["wins"]))
                for row in map_rows
            }

        return PlayerProfile(
            battletag=battletag,
            overall_win_rate=overall,
            heroes=heroes,
            map_heroes=map_heroes,
        )

    def get_hero_stats(self, map_name: str | None = None) -> dict[str, HeroStats]:
        """Aggregate hero statistics, across all maps or for one map.

        Rates are percentages of games (win rate) and of matches played
        (pick and ban rate).
        """
        sql = """
            SELECT
                hero,
                SUM(games) AS games,
                SUM(wins) AS wins,
                SUM(picks) AS picks,
                SUM(bans) AS bans,
                SUM(total_matches) AS total_matches
            FROM hero_stats
        """
        params = []
        if map_name:
            sql += " WHERE map = ?"
            params.append(map_name)
        sql += " GROUP BY hero ORDER BY hero"

        stats = {}
        for row in self._query(sql, params):
            games = int(row["games"] or 0)
            matches = int(row["total_matches"] or 0)
            stats[row["hero"]] = HeroStats(
                games=games,
                win_rate=round(int(row["wins"] or 0) / games * 100, 2) if games else 0.0,
                pick_rate=round(int(row["picks"] or 0) / matches * 100, 2) if matches else 0.0,
                ban_rate=round(int(row["bans"] or 0) / matches * 100, 2) if matches else 0.0,
            )
        return stats

    def list_maps(self) -> list[str]:
        rows = self._query("SELECT DISTINCT map FROM hero_stats WHERE map IS NOT NULL ORDER BY map")
        return [row["map"] for row in rows]
