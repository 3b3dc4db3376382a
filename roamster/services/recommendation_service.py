"""Recommendation service: async facade between routers and the synchronous engine.

Weather is resolved once per request through the live client (or its static fallback)
and handed to the orchestrator as a fixed lookup.
"""

import asyncio
import functools
import logging

from roamster.config import settings
from roamster.models.trip import Trip
from roamster.models.user import User
from roamster.services.recommendation.context_builder import (
    Clock,
    fixed_weather,
    system_clock,
)
from roamster.services.recommendation.domain import DomainRecommendation, RecommendationResult
from roamster.services.recommendation.orchestrator import RecommendationOrchestrator
from roamster.services.trip_service import trip_service
from roamster.services.weather_client import WeatherClient, weather_client

logger = logging.getLogger(__name__)


class RecommendationService:
    def __init__(self, weather: WeatherClient = weather_client, clock: Clock = system_clock):
        self.weather = weather
        self.clock = clock

    async def _orchestrator(self, destination: str) -> RecommendationOrchestrator:
        snapshot = await self.weather.get_weather(destination)
        return RecommendationOrchestrator(
            weather_lookup=fixed_weather(snapshot),
            clock=self.clock,
            parallel=settings.parallel_recommenders,
        )

    async def generate(self, trip: Trip, user: User) -> RecommendationResult:
        """Full envelope for a stored trip. Raises ``InvalidTripError`` for bad trip data."""
        orchestrator = await self._orchestrator(trip.destination)
        return await self._evaluate(
            orchestrator.generate, trip_service.to_trip_details(trip), trip_service.preferences_for(user),
        )

    async def recommend(self, domain: str, trip: Trip, user: User) -> DomainRecommendation:
        orchestrator = await self._orchestrator(trip.destination)
        return await self._evaluate(
            orchestrator.recommend, domain, trip_service.to_trip_details(trip), trip_service.preferences_for(user),
        )

    async def _evaluate(self, fn, *args):
        if not settings.parallel_recommenders:
            return fn(*args)
        # The thread pool blocks while it waits on its workers; keep that off the event loop
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(fn, *args))


recommendation_service = RecommendationService()
