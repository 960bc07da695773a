"""Periodic self-ping that keeps a hosted instance from idling out."""

import asyncio
import logging
from typing import Optional

import httpx

from weather_lookup.config import KEEPALIVE_INTERVAL_SECONDS, REQUEST_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class KeepalivePinger:
    """Pings a URL on a fixed interval from its own asyncio task.

    Failures are logged and swallowed so the schedule never stops.
    """

    def __init__(
        self,
        url: str,
        interval_seconds: float = KEEPALIVE_INTERVAL_SECONDS,
        client: Optional[httpx.AsyncClient] = None
    ):
        """Initialize the pinger.

        Args:
            url: Public URL of this service
            interval_seconds: Delay between pings
            client: Optional preconfigured HTTP client
        """
        self.url = url
        self.interval_seconds = interval_seconds
        self.client = client or httpx.AsyncClient(timeout=REQUEST_TIMEOUT_SECONDS)
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def ping_once(self) -> Optional[int]:
        """Issue a single ping.

        Returns:
            HTTP status code, or None if the request failed
        """
        try:
            response = await self.client.get(self.url)
        except Exception as e:
            # Never let a failed ping end the schedule
            logger.error(f"Keepalive ping to {self.url} failed: {e!r}")
            return None

        logger.info(f"Keepalive ping to {self.url} returned {response.status_code}")
        return response.status_code

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            await self.ping_once()

    def start(self) -> None:
        """Start the ping loop on the running event loop."""
        if self.running:
            return
        logger.info(f"Starting keepalive pinger for {self.url} every {self.interval_seconds}s")
        self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        """Cancel the ping loop and close the HTTP client."""
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        await self.client.aclose()
        logger.info("Keepalive pinger stopped")
