"""City catalog entries parsed from public city datasets."""

import csv
import json
import logging
from pathlib import Path

from pydantic import BaseModel

from thunderman.models.geo import Point, earth_distance_from

logger = logging.getLogger(__name__)


class City(BaseModel):
    """A named location from a cities dataset.

    Dataset rows usually carry many more columns (population, county, ...);
    only the four below are kept.
    """

    model_config = {"extra": "ignore", "frozen": True}

    city: str
    state_id: str
    lat: float
    lng: float

    def to_point(self) -> Point:
        return Point(lat=self.lat, lng=self.lng)


def load_cities(path: str | Path) -> list[City]:
    """Load a cities dataset from a .csv (with header row) or .json file."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
    elif suffix == ".json":
        with open(path, encoding="utf-8") as f:
            rows = json.load(f)
    else:
        raise ValueError(f"Unsupported cities dataset format: {path.suffix}")

    cities = [City.model_validate(row) for row in rows]
    logger.info("Loaded %d cities from %s", len(cities), path)
    return cities


def find_city(
    cities: list[City], name: str, state_id: str | None = None
) -> City | None:
    """Case-insensitive lookup by city name and optional state id."""
    name = name.strip().lower()
    for c in cities:
        if c.city.lower() != name:
            continue
        if state_id is not None and c.state_id.lower() != state_id.strip().lower():
            continue
        return c
    return None


def nearest_city(point: Point, cities: list[City]) -> tuple[City, float]:
    """Return the city closest to a point and its distance in km."""
    if not cities:
        raise ValueError("City catalog is empty")

    best = cities[0]
    best_distance = earth_distance_from(point, best.to_point())
    for c in cities[1:]:
        d = earth_distance_from(point, c.to_point())
        if d < best_distance:
            best, best_distance = c, d
    return best, best_distance
