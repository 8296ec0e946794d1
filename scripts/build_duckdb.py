#!/usr/bin/env python3
"""Build the stats DuckDB database from CSV exports.

Run this once after refreshing the CSV exports.
The resulting .duckdb file is used by StatsRepository.

Expected files in data_path:
    player_hero_stats.csv  battletag,hero,map,games,wins
    hero_stats.csv         hero,map,games,wins,picks,bans,total_matches

Usage:
    python scripts/build_duckdb.py [data_path] [output_path]

Default data_path: data/csv (relative to repo root)
Default output_path: data/storm_stats.duckdb
"""
import sys
from pathlib import Path

import duckdb

TABLE_SCHEMAS = {
    "player_hero_stats": {
        "battletag": "VARCHAR",
        "hero": "VARCHAR",
        "map": "VARCHAR",
        "games": "INTEGER",
        "wins": "INTEGER",
    },
    "hero_stats": {
        "hero": "VARCHAR",
        "map": "VARCHAR",
        "games": "INTEGER",
        "wins": "INTEGER",
        "picks": "INTEGER",
        "bans": "INTEGER",
        "total_matches": "INTEGER",
    },
}


def create_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Create empty stats tables."""
    for table_name, columns in TABLE_SCHEMAS.items():
        column_sql = ", ".join(f"{name} {sql_type}" for name, sql_type in columns.items())
        conn.execute(f"CREATE TABLE IF NOT EXISTS {table_name} ({column_sql})")


def build_duckdb(data_path: Path, output_path: Path | None = None) -> Path:
    """Build DuckDB database from the CSV exports in data_path.

    Args:
        data_path: Directory containing the CSV files
        output_path: Where to write the .duckdb file (default: data_path/storm_stats.duckdb)

    Returns:
        Path to the created database file
    """
    if output_path is None:
        output_path = data_path / "storm_stats.duckdb"

    # Remove old DB if exists
    if output_path.exists():
        output_path.unlink()
        print(f"Removed existing {output_path}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with duckdb.connect(str(output_path)) as conn:
        create_tables(conn)
        print(f"Building {output_path} from {data_path}...")

        for table_name, columns in TABLE_SCHEMAS.items():
            csv_file = data_path / f"{table_name}.csv"
            if not csv_file.exists():
                print(f"  - {table_name}: {csv_file.name} not found, table left empty")
                continue

            column_list = ", ".join(columns)
            column_types = ", ".join(f"'{name}': '{sql_type}'" for name, sql_type in columns.items())
            conn.execute(f"""
                INSERT INTO {table_name}
                SELECT {column_list}
                FROM read_csv('{csv_file}', header=true, columns={{{column_types}}})
            """)
            row_count = conn.execute(f"SELECT COUNT(*) FROM {table_name}").fetchone()[0]
            print(f"  ✓ {table_name}: {row_count:,} rows")

        tables = conn.execute("SHOW TABLES").fetchall()
        print(f"\nCreated {len(tables)} tables in {output_path}")

    return output_path


def main():
    repo_root = Path(__file__).parent.parent
    data_path = Path(sys.argv[1]) if len(sys.argv) > 1 else repo_root / "data" / "csv"
    output_path = Path(sys.argv[2]) if len(sys.argv) > 2 else repo_root / "data" / "storm_stats.duckdb"

    if not data_path.exists():
        print(f"Error: Data path not found: {data_path}")
        print(f"Make sure CSV files exist at: {data_path}")
        sys.exit(1)

    db_path = build_duckdb(data_path, output_path)
    print(f"\nDone! Database ready at: {db_path}")


if __name__ == "__main__":
    main()
