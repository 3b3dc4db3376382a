"""Weather client: live current conditions with the static table as fallback."""

import logging

import httpx

from roamster.config import settings
from roamster.data.weather import static_weather_lookup
from roamster.services.cache_service import CacheService, cache_service
from roamster.services.recommendation.domain import WeatherSnapshot

logger = logging.getLogger(__name__)

# Provider condition group -> engine condition tag
CONDITION_TAGS: dict[str, str] = {
    "Rain": "rain",
    "Drizzle": "rain",
    "Thunderstorm": "rain",
    "Clear": "sunny",
    "Clouds": "partly-cloudy",
    "Snow": "snow",
    "Mist": "mist",
    "Fog": "mist",
    "Haze": "haze",
}


class WeatherClient:
    """Adapter for an OpenWeatherMap-style ``/weather`` endpoint.

    Without an API key every lookup is served from the static destination table.
    Any transport, HTTP or parse error falls back to that table as well.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        cache: CacheService | None = cache_service,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = settings.weather_api_key if api_key is None else api_key
        self.base_url = base_url or settings.weather_base_url
        self.timeout = timeout or settings.weather_timeout_seconds
        self.cache = cache
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def is_live(self) -> bool:
        return bool(self.api_key)

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def get_weather(self, destination: str) -> WeatherSnapshot:
        """Current snapshot for ``destination``. Never raises."""
        if not self.is_live or not isinstance(destination, str) or not destination.strip():
            return static_weather_lookup(destination)

        if self.cache is not None:
            cached = await self.cache.get_weather(destination)
            if cached:
                try:
                    return WeatherSnapshot(**cached)
                except TypeError:
                    logger.debug(f"Discarding malformed cached weather for {destination!r}")

        try:
            client = await self._get_client()
            resp = await client.get(
                "/weather",
                params={"q": destination, "appid": self.api_key, "units": "metric"},
            )
            resp.raise_for_status()
            snapshot = self._parse(resp.json())
        except (httpx.HTTPError, KeyError, IndexError, TypeError, ValueError) as e:
            logger.warning(f"Live weather failed for {destination!r}, using static table: {e}")
            return static_weather_lookup(destination)

        if self.cache is not None:
            await self.cache.set_weather(destination, snapshot.to_dict())
        return snapshot

    @staticmethod
    def _parse(data: dict) -> WeatherSnapshot:
        main = data["main"]
        provider_condition = data["weather"][0]["main"]
        return WeatherSnapshot(
            temperature=round(float(main["temp"]), 1),
            condition=CONDITION_TAGS.get(provider_condition, str(provider_condition).lower()),
            humidity=int(main["humidity"]),
        )

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


weather_client = WeatherClient()
