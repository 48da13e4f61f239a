"""CLI entry point for thunderman."""

import argparse
import asyncio
import logging
import sys

from thunderman.config.loader import config_hash, load_config
from thunderman.config.schema import AppConfig
from thunderman.errors import WeatherError
from thunderman.ingest.forecast_fetcher import ForecastFetcher
from thunderman.ingest.nws_client import NwsClient
from thunderman.models.bundle import MissingWindPolicy, WeatherBundle
from thunderman.models.city import City, find_city, load_cities, nearest_city
from thunderman.models.forecast import ForecastVariant
from thunderman.models.geo import Point
from thunderman.reporting.formatters import (
    format_bundle_json,
    format_bundle_text,
    format_nearest,
)
from thunderman.reporting.report import run_report
from thunderman.storage.bundle_repo import list_bundles, list_states, save_bundle
from thunderman.storage.database import open_database

DEFAULT_CONFIG = "thunderman.yaml"

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="thunderman",
        description="National Weather Service forecast client",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("--db", default=None, help="SQLite DB path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # report
    report_p = sub.add_parser("report", help="Print upcoming forecast periods")
    report_p.add_argument("--lat", type=float, required=True)
    report_p.add_argument("--lng", type=float, required=True)
    report_p.add_argument("--window", type=int, default=None)
    report_p.add_argument(
        "--variant", choices=[v.value for v in ForecastVariant], default=None
    )

    # bundle
    bundle_p = sub.add_parser("bundle", help="Fetch and store a city's forecast")
    _add_city_args(bundle_p)
    bundle_p.add_argument(
        "--cities", required=True, help="Cities dataset (.csv or .json)"
    )
    bundle_p.add_argument(
        "--variant", choices=[v.value for v in ForecastVariant], default=None
    )
    bundle_p.add_argument(
        "--skip-missing-wind",
        action="store_true",
        help="Drop periods without wind data instead of failing",
    )
    bundle_p.add_argument(
        "--no-store", action="store_true", help="Print only, do not store"
    )

    # nearest
    nearest_p = sub.add_parser("nearest", help="Find the closest city")
    nearest_p.add_argument(
        "--cities", required=True, help="Cities dataset (.csv or .json)"
    )
    nearest_p.add_argument("--lat", type=float, required=True)
    nearest_p.add_argument("--lng", type=float, required=True)

    # history
    history_p = sub.add_parser("history", help="Show stored bundles for a city")
    _add_city_args(history_p)
    history_p.add_argument("--limit", type=int, default=1)

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    if args.db is not None:
        config = config.model_copy(
            update={"storage": config.storage.model_copy(update={"db_path": args.db})}
        )

    try:
        if args.command == "report":
            return _cmd_report(config, args)
        elif args.command == "bundle":
            return _cmd_bundle(config, args)
        elif args.command == "nearest":
            return _cmd_nearest(args)
        elif args.command == "history":
            return _cmd_history(config, args)
        elif args.command == "config":
            return _cmd_config(config, args)
        else:
            parser.print_help()
            return 1
    except WeatherError as e:
        logger.error("%s failed: %s", args.command, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _add_city_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--city", required=True, help="City name")
    p.add_argument("--state", default=None, help="State id, e.g. NM")


def _cmd_report(config: AppConfig, args) -> int:
    variant = ForecastVariant(args.variant) if args.variant else None
    asyncio.run(
        run_report(
            args.lat, args.lng, window=args.window, variant=variant, config=config
        )
    )
    return 0


def _cmd_bundle(config: AppConfig, args) -> int:
    city = _lookup_city(args.cities, args.city, args.state)
    if city is None:
        return 1

    variant = ForecastVariant(args.variant) if args.variant else config.bundle.variant
    policy = (
        MissingWindPolicy.SKIP if args.skip_missing_wind else config.bundle.missing_wind
    )
    bundle = asyncio.run(_fetch_bundle(config, city, variant, policy))
    print(format_bundle_json(bundle))

    if not args.no_store:
        conn = open_database(config.storage.db_path)
        try:
            row_id = save_bundle(conn, bundle)
        finally:
            conn.close()
        logger.info("Stored bundle %d in %s", row_id, config.storage.db_path)
    return 0


async def _fetch_bundle(
    config: AppConfig,
    city: City,
    variant: ForecastVariant,
    policy: MissingWindPolicy,
) -> WeatherBundle:
    async with NwsClient.from_config(config.client) as nws:
        return await ForecastFetcher(nws).fetch_bundle(city, variant, policy)


def _cmd_nearest(args) -> int:
    cities = load_cities(args.cities)
    if not cities:
        print("Error: cities dataset is empty", file=sys.stderr)
        return 1
    city, distance = nearest_city(Point(lat=args.lat, lng=args.lng), cities)
    print(format_nearest(city, distance))
    return 0


def _cmd_history(config: AppConfig, args) -> int:
    conn = open_database(config.storage.db_path)
    try:
        states = [args.state] if args.state else list_states(conn, args.city)
        bundles = [
            b for s in states for b in list_bundles(conn, args.city, s, args.limit)
        ]
    finally:
        conn.close()

    if not bundles:
        print(f"No stored bundles for {args.city}")
        return 1
    for b in bundles:
        print(format_bundle_text(b))
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        print(f"# hash: {config_hash(config)}")
        return 0
    print("Use: config show")
    return 1


def _lookup_city(path: str, name: str, state_id: str | None) -> City | None:
    city = find_city(load_cities(path), name, state_id)
    if city is None:
        where = f"{name}, {state_id}" if state_id else name
        print(f"Error: city not found: {where}", file=sys.stderr)
    return city
