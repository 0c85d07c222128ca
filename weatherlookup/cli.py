"""CLI entry point for weather lookups."""

import argparse
import asyncio
import json
import logging

from weatherlookup.config.loader import get_config_value, load_config
from weatherlookup.config.schema import LookupConfig
from weatherlookup.errors import InvalidInput, NoResults, WeatherLookupError
from weatherlookup.ingest.forecast_client import ForecastOptions
from weatherlookup.pipeline.lookup import WeatherLookupFacade
from weatherlookup.reporting.formatters import (
    format_candidates_text,
    format_forecast_json,
    format_forecast_text,
)
from weatherlookup.storage import recent_repo
from weatherlookup.storage.database import open_database

DEFAULT_CONFIG = "weatherlookup.yaml"

EXIT_FAULT = 1
EXIT_NOT_FOUND = 2
EXIT_INVALID_INPUT = 3


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherlookup",
        description="Current conditions and forecasts from Open-Meteo",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log at INFO level"
    )

    sub = parser.add_subparsers(dest="command")

    # city / coords share the forecast options
    forecast_opts = argparse.ArgumentParser(add_help=False)
    forecast_opts.add_argument("--no-hourly", action="store_true", help="Skip hourly data")
    forecast_opts.add_argument("--no-daily", action="store_true", help="Skip daily data")
    forecast_opts.add_argument("--days", type=int, help="Number of forecast days")
    forecast_opts.add_argument("--json", action="store_true", help="Print JSON")

    city_p = sub.add_parser("city", parents=[forecast_opts], help="Weather for a city name")
    city_p.add_argument("name", nargs="+", help="City name")

    coords_p = sub.add_parser("coords", parents=[forecast_opts], help="Weather for coordinates")
    coords_p.add_argument("latitude", type=float)
    coords_p.add_argument("longitude", type=float)

    geo_p = sub.add_parser("geocode", help="List locations matching a name")
    geo_p.add_argument("query", nargs="+")

    recent_p = sub.add_parser("recent", help="Show recent city searches")
    recent_p.add_argument("--clear", action="store_true", help="Forget recent searches")

    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    show_p = config_sub.add_parser("show", help="Display effective config")
    show_p.add_argument("key", nargs="?", help="Dotted key, e.g. forecast.forecast_days")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    try:
        if args.command == "city":
            return asyncio.run(_cmd_city(config, args))
        elif args.command == "coords":
            return asyncio.run(_cmd_coords(config, args))
        elif args.command == "geocode":
            return asyncio.run(_cmd_geocode(config, args))
        elif args.command == "recent":
            return _cmd_recent(config, args)
        elif args.command == "config":
            return _cmd_config(config, args)
        else:
            parser.print_help()
            return 1
    except NoResults as e:
        print(f"Not found: {e.query}. Check the spelling or try a nearby city.")
        return EXIT_NOT_FOUND
    except InvalidInput as e:
        print(f"Invalid input: {e}")
        return EXIT_INVALID_INPUT
    except WeatherLookupError as e:
        print(f"Weather service unavailable: {e}. Please try again later.")
        return EXIT_FAULT


def _options(config: LookupConfig, args) -> ForecastOptions:
    defaults = config.forecast
    return ForecastOptions(
        include_hourly=defaults.include_hourly and not args.no_hourly,
        include_daily=defaults.include_daily and not args.no_daily,
        forecast_days=args.days if args.days is not None else defaults.forecast_days,
        timezone=defaults.timezone,
    )


def _print_forecast(result, args) -> None:
    if args.json:
        print(format_forecast_json(result))
    else:
        print(format_forecast_text(result))


async def _cmd_city(config: LookupConfig, args) -> int:
    name = " ".join(args.name)
    facade = WeatherLookupFacade.from_config(config)
    result = await facade.by_city(name, _options(config, args))
    _print_forecast(result, args)
    if config.history.enabled:
        conn = open_database(config.history.db_path)
        try:
            recent_repo.record_search(conn, name, config.history.max_entries)
        finally:
            conn.close()
    return 0


async def _cmd_coords(config: LookupConfig, args) -> int:
    facade = WeatherLookupFacade.from_config(config)
    result = await facade.by_coords(args.latitude, args.longitude, _options(config, args))
    _print_forecast(result, args)
    return 0


async def _cmd_geocode(config: LookupConfig, args) -> int:
    facade = WeatherLookupFacade.from_config(config)
    candidates = await facade.geocoder.search(" ".join(args.query))
    print(format_candidates_text(candidates))
    return 0


def _cmd_recent(config: LookupConfig, args) -> int:
    conn = open_database(config.history.db_path)
    try:
        if args.clear:
            removed = recent_repo.clear_recent(conn)
            print(f"Cleared {removed} recent searches")
            return 0
        recent = recent_repo.list_recent(conn, config.history.max_entries)
    finally:
        conn.close()
    if not recent:
        print("No recent searches")
    for i, city in enumerate(recent, start=1):
        print(f"{i}. {city}")
    return 0


def _cmd_config(config: LookupConfig, args) -> int:
    if args.config_command != "show":
        print("Use: config show [key]")
        return 1
    if args.key is None:
        print(config.model_dump_json(indent=2))
        return 0
    try:
        value = get_config_value(config, args.key)
    except KeyError as e:
        print(f"Error: {e}")
        return 1
    if hasattr(value, "model_dump_json"):
        print(value.model_dump_json(indent=2))
    else:
        print(json.dumps(value))
    return 0
