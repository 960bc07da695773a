"""Command-line weather view."""

import argparse
import asyncio
import logging
from typing import Optional, Sequence

from pydantic import ValidationError

from weather_lookup.config import PROXY_BASE_URL
from weather_lookup.logging_config import configure_logging
from weather_lookup.ui.controller import WeatherController
from weather_lookup.ui.location import EnvironmentLocator, FixedLocator, Locator
from weather_lookup.ui.proxy_client import ProxyClient
from weather_lookup.ui.render import render_state
from weather_lookup.weather.service import WeatherService

logger = logging.getLogger(__name__)


async def run(query: Optional[str], locator: Locator, proxy_url: str) -> int:
    """Load the startup weather, optionally search a place, and print the view.

    Returns:
        Process exit code
    """
    proxy_client = ProxyClient(proxy_url)

    async with WeatherService() as weather_service:
        controller = WeatherController(weather_service, proxy_client, locator=locator)
        try:
            await controller.start()

            if query:
                await controller.on_query_change(query)
                suggestions = controller.state.suggestions
                if suggestions:
                    logger.info(f"Selecting {suggestions[0].description!r}")
                    await controller.select_suggestion(suggestions[0].place_id)
                else:
                    logger.warning(f"No places found for {query!r}")
        finally:
            await proxy_client.aclose()

    print(render_state(controller.state))
    return 1 if controller.state.error else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Show current weather and a 5-day forecast")
    parser.add_argument("--query", type=str, default=None, help="Place to search; the first suggestion is used")
    parser.add_argument("--lat", type=float, default=None, help="Device latitude (with --lon)")
    parser.add_argument("--lon", type=float, default=None, help="Device longitude (with --lat)")
    parser.add_argument("--proxy-url", type=str, default=PROXY_BASE_URL, help="Base URL of the geocoding proxy")
    args = parser.parse_args(argv)

    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be given together")

    locator: Locator = EnvironmentLocator()
    if args.lat is not None:
        try:
            locator = FixedLocator(args.lat, args.lon)
        except ValidationError:
            parser.error("--lat must be within [-90, 90] and --lon within [-180, 180]")

    configure_logging()
    return asyncio.run(run(args.query, locator, args.proxy_url))


if __name__ == "__main__":
    raise SystemExit(main())
