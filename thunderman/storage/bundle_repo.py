"""Repository for stored weather bundles."""

import sqlite3
from datetime import UTC

from thunderman.models.bundle import WeatherBundle


def save_bundle(conn: sqlite3.Connection, bundle: WeatherBundle) -> int:
    """Persist a bundle. Returns the row id."""
    loc = bundle.location
    cursor = conn.execute(
        "INSERT INTO weather_bundles "
        "(city, state_id, lat, lng, updated, bundle_json) "
        "VALUES (?, ?, ?, ?, ?, ?)",
        (
            loc.city,
            loc.state_id,
            loc.lat,
            loc.lng,
            bundle.updated.astimezone(UTC).isoformat(),
            bundle.model_dump_json(),
        ),
    )
    conn.commit()
    assert cursor.lastrowid is not None
    return cursor.lastrowid


def list_bundles(
    conn: sqlite3.Connection, city: str, state_id: str, limit: int = 10
) -> list[WeatherBundle]:
    """Stored bundles for a city, newest first."""
    rows = conn.execute(
        "SELECT bundle_json FROM weather_bundles "
        "WHERE city = ? AND state_id = ? "
        "ORDER BY updated DESC, id DESC LIMIT ?",
        (city, state_id, limit),
    ).fetchall()
    return [WeatherBundle.model_validate_json(row["bundle_json"]) for row in rows]


def get_latest_bundle(
    conn: sqlite3.Connection, city: str, state_id: str
) -> WeatherBundle | None:
    bundles = list_bundles(conn, city, state_id, limit=1)
    return bundles[0] if bundles else None


def list_states(conn: sqlite3.Connection, city: str) -> list[str]:
    """State ids with stored bundles for a city name."""
    rows = conn.execute(
        "SELECT DISTINCT state_id FROM weather_bundles WHERE city = ? "
        "ORDER BY state_id",
        (city,),
    ).fetchall()
    return [row["state_id"] for row in rows]
