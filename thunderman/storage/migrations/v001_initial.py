"""Initial schema: stored weather bundles."""

import sqlite3

DDL = [
    """
    CREATE TABLE IF NOT EXISTS weather_bundles (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        city TEXT NOT NULL,
        state_id TEXT NOT NULL,
        lat REAL NOT NULL,
        lng REAL NOT NULL,
        updated TEXT NOT NULL,
        bundle_json TEXT NOT NULL,
        stored_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """,
    (
        "CREATE INDEX IF NOT EXISTS idx_weather_bundles_city "
        "ON weather_bundles(city, state_id, updated)"
    ),
]


def up(conn: sqlite3.Connection) -> None:
    for stmt in DDL:
        conn.execute(stmt)
    conn.commit()
