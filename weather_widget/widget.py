# ABOUTME: Widget state and the debounced search-and-fetch pipeline.
# ABOUTME: Holds the input buffer, settled query, and result cells, and notifies listeners on change.

import asyncio
import logging
from collections.abc import Callable

import httpx

from weather_widget.debounce import Debouncer
from weather_widget.deps import WidgetSettings, create_http_client
from weather_widget.models import CurrentObservation, LocationMetadata
from weather_widget.weather_service import fetch_current, parse_current_payload

logger = logging.getLogger(__name__)


class WeatherWidget:
    """Search-as-you-type weather lookup.

    `query` is the raw input buffer and `search` the settled query used for fetching.
    `current` and `location` stay None until the first well-formed response and are
    only ever replaced together. Failures are logged and leave them untouched.

    Responses are applied in completion order, not request order: a slow response for
    an older query can overwrite a newer one.
    """

    def __init__(
        self,
        settings: WidgetSettings,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.settings = settings
        self.query = settings.default_query
        self.search = settings.default_query
        self.current: CurrentObservation | None = None
        self.location: LocationMetadata | None = None

        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else create_http_client()
        self._debouncer: Debouncer[str] = Debouncer(settings.debounce_seconds, self._settle)
        self._listeners: list[Callable[["WeatherWidget"], None]] = []
        self._tasks: set[asyncio.Task] = set()
        self._closed = False

    def subscribe(self, listener: Callable[["WeatherWidget"], None]) -> None:
        """Register a callback run after every state transition."""
        self._listeners.append(listener)

    def start(self) -> None:
        """Fetch for the initial settled query."""
        self._schedule_refresh(self.search)

    def set_query(self, text: str) -> None:
        """Replace the input buffer and restart the quiescence window. Ignored once closed."""
        if self._closed:
            return
        self.query = text
        self._notify()
        self._debouncer.push(text)

    def _settle(self, value: str) -> None:
        if value == self.search:
            return
        self.search = value
        self._notify()
        self._schedule_refresh(value)

    def _schedule_refresh(self, search: str) -> None:
        if self._closed:
            return
        task = asyncio.get_running_loop().create_task(self.refresh(search))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def refresh(self, search: str) -> None:
        """Fetch current conditions for `search` and apply them if the response is well-formed."""
        if not search:
            return

        api_key = self.settings.api_key
        if not api_key:
            logger.error("Missing WEATHER_API_KEY, skipping weather lookup")
            return

        try:
            data = await fetch_current(self._client, api_key, search, url=self.settings.api_url)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.error("Fetch error for %.80r: %s", search, e)
            return

        payload = parse_current_payload(data)
        if payload is None:
            logger.warning("Invalid data: %r", data)
            return

        self.current = payload.current
        self.location = payload.location
        self._notify()

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self)

    async def aclose(self) -> None:
        """Cancel the pending debounce timer and in-flight fetches, then release the client."""
        self._closed = True
        self._debouncer.cancel()
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        if self._owns_client:
            await self._client.aclose()
