"""Output formatters for forecast reports and bundles."""

from thunderman.models.bundle import ForecastBundle, WeatherBundle
from thunderman.models.city import City
from thunderman.models.forecast import ForecastPeriod


def format_period_line(p: ForecastPeriod) -> str:
    """One console line per period: times, temperature, summary."""
    return (
        f"{p.start_time.time()}-{p.end_time.time()} = "
        f"{p.temperature}°{p.temperature_unit} :: {p.short_forecast}"
    )


def format_bundle_entry(b: ForecastBundle) -> str:
    return (
        f"{b.start.isoformat()} {b.temperature:>4} "
        f"{b.wind_direction} {b.wind_speed} :: {b.short_forecast}"
    )


def format_bundle_text(bundle: WeatherBundle) -> str:
    """Plain text rendering of a stored bundle."""
    loc = bundle.location
    lines = [
        f"=== {loc.city}, {loc.state_id} | updated {bundle.updated.isoformat()} ===",
    ]
    lines.extend(format_bundle_entry(b) for b in bundle.forecast)
    return "\n".join(lines)


def format_bundle_json(bundle: WeatherBundle) -> str:
    """JSON rendering for programmatic consumption."""
    return bundle.model_dump_json(indent=2)


def format_nearest(city: City, distance_km: float) -> str:
    return (
        f"{city.city}, {city.state_id} ({city.lat}, {city.lng}) "
        f"is {distance_km:.1f} km away"
    )
