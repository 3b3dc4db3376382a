"""Recommendation orchestrator: one context, four recommenders, one envelope."""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Callable

from roamster.data.weather import static_weather_lookup
from roamster.services.recommendation.base import DomainRecommender
from roamster.services.recommendation.clothing import clothing_recommender
from roamster.services.recommendation.config import RecommendationConfig, recommendation_config
from roamster.services.recommendation.context_builder import (
    Clock,
    ContextBuilder,
    WeatherLookup,
    system_clock,
)
from roamster.services.recommendation.domain import (
    DomainRecommendation,
    RecommendationContext,
    RecommendationResult,
    TripDetails,
    UserPreferences,
)
from roamster.services.recommendation.experience import experience_recommender
from roamster.services.recommendation.food import food_recommender
from roamster.services.recommendation.notifications import derive_notifications
from roamster.services.recommendation.photo import photo_recommender

logger = logging.getLogger(__name__)

# Envelope slot -> recommender
DEFAULT_RECOMMENDERS: dict[str, DomainRecommender] = {
    "clothing": clothing_recommender,
    "food": food_recommender,
    "experiences": experience_recommender,
    "photos": photo_recommender,
}

# Accepted aliases for single-domain requests
DOMAIN_ALIASES: dict[str, str] = {
    "clothing": "clothing",
    "clothes": "clothing",
    "food": "food",
    "experience": "experiences",
    "experiences": "experiences",
    "guide": "experiences",
    "photo": "photos",
    "photos": "photos",
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RecommendationOrchestrator:
    """Builds the context once and runs every recommender against that same instance.

    Only context construction may raise (``InvalidTripError``). A recommender that
    fails yields an empty result flagged ``failed`` and its slot is listed in
    ``RecommendationResult.errors``.
    """

    def __init__(
        self,
        weather_lookup: WeatherLookup = static_weather_lookup,
        clock: Clock = system_clock,
        now: Callable[[], datetime] = _utcnow,
        recommenders: dict[str, DomainRecommender] | None = None,
        parallel: bool = False,
        config: RecommendationConfig = recommendation_config,
    ):
        self.context_builder = ContextBuilder(weather_lookup=weather_lookup, clock=clock, config=config)
        self.now = now
        self.recommenders = dict(recommenders or DEFAULT_RECOMMENDERS)
        self.parallel = parallel
        self.config = config

    def build_context(
        self, trip: TripDetails, preferences: UserPreferences | None = None,
    ) -> RecommendationContext:
        return self.context_builder.build(trip, preferences)

    def generate(
        self, trip: TripDetails, preferences: UserPreferences | None = None,
    ) -> RecommendationResult:
        context = self.build_context(trip, preferences)

        if self.parallel:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
                futures = {
                    slot: pool.submit(self._run, slot, recommender, context)
                    for slot, recommender in self.recommenders.items()
                }
                results = {slot: future.result() for slot, future in futures.items()}
        else:
            results = {
                slot: self._run(slot, recommender, context)
                for slot, recommender in self.recommenders.items()
            }

        notifications = derive_notifications(context)
        errors = tuple(f"{slot} recommendations unavailable" for slot, rec in results.items() if rec.failed)

        logger.info(
            f"Recommendations for {context.destination!r} ({context.travel_group}, "
            f"{context.season}, {context.time_of_day}): "
            + ", ".join(f"{slot}={len(rec.items)}" for slot, rec in results.items())
        )

        return RecommendationResult(
            context=context,
            clothing=results["clothing"],
            food=results["food"],
            experiences=results["experiences"],
            photos=results["photos"],
            notifications=tuple(notifications),
            generated_at=self.now(),
            errors=errors,
        )

    def recommend(
        self, domain: str, trip: TripDetails, preferences: UserPreferences | None = None,
    ) -> DomainRecommendation:
        """Evaluate a single domain ("clothes", "food", "guide", "photo", ...)."""
        slot = DOMAIN_ALIASES.get(domain)
        if slot is None or slot not in self.recommenders:
            raise KeyError(f"Unknown recommendation domain: {domain}")
        context = self.build_context(trip, preferences)
        return self._run(slot, self.recommenders[slot], context)

    def _run(
        self, slot: str, recommender: DomainRecommender, context: RecommendationContext,
    ) -> DomainRecommendation:
        try:
            return recommender.recommend(context)
        except Exception:
            logger.exception(f"{slot} recommender failed for {context.destination!r}")
            return DomainRecommendation(
                domain=recommender.domain or slot,
                summary={"recommendation": "Recommendations are temporarily unavailable"},
                warnings=(f"Could not compute {slot} recommendations for this trip",),
                failed=True,
            )


def generate_recommendations(
    trip: TripDetails,
    preferences: UserPreferences | None = None,
    clock: Clock = system_clock,
    weather_lookup: WeatherLookup = static_weather_lookup,
) -> RecommendationResult:
    return RecommendationOrchestrator(weather_lookup=weather_lookup, clock=clock).generate(trip, preferences)
