from datetime import date, datetime, timezone

import pytest

from roamster.services.recommendation.base import DomainRecommender
from roamster.services.recommendation.context_builder import fixed_clock
from roamster.services.recommendation.domain import DomainRecommendation, UserPreferences, WeatherSnapshot
from roamster.services.recommendation.errors import InvalidTripError
from roamster.services.recommendation.orchestrator import (
    DEFAULT_RECOMMENDERS,
    RecommendationOrchestrator,
    generate_recommendations,
)

FIXED_NOW = datetime(2024, 7, 10, 12, 0, tzinfo=timezone.utc)


def goa_kids(make_trip):
    return make_trip(destination="Goa", travel_group="kids",
                     start_date=date(2024, 7, 10), end_date=date(2024, 7, 15))


def test_goa_with_kids_end_to_end(make_trip):
    orchestrator = RecommendationOrchestrator(clock=fixed_clock(14), now=lambda: FIXED_NOW)
    result = orchestrator.generate(goa_kids(make_trip), UserPreferences())

    assert result.context.season == "summer"
    assert result.context.weather == WeatherSnapshot(temperature=30, condition="partly-cloudy", humidity=80)

    clothing_ids = [item.id for item in result.clothing.items]
    assert "summer-3" in clothing_ids
    assert all(item.kid_friendly for item in result.clothing.items)

    assert "goa-1" not in [item.id for item in result.food.items]
    assert all(item.spice_level != "high" for item in result.food.items)
    assert not any(item.requires_night_travel for item in result.experiences.items)

    assert result.notifications == ()
    assert result.errors == ()
    assert result.generated_at == FIXED_NOW


def test_delhi_solo_in_the_evening(make_trip):
    orchestrator = RecommendationOrchestrator(clock=fixed_clock(19))
    result = orchestrator.generate(make_trip(destination="Delhi", travel_group="solo"))

    assert result.context.time_of_day == "evening"
    assert "Smart Casual Outfit" in [item.name for item in result.clothing.items]
    experience_names = [item.name for item in result.experiences.items]
    assert "Sunset Point" in experience_names
    assert "Cultural Show or Performance" in experience_names
    assert "Evening Experience" in [n.title for n in result.notifications]


def test_generate_is_idempotent(make_trip):
    trip = goa_kids(make_trip)
    orchestrator = RecommendationOrchestrator(clock=fixed_clock(8), now=lambda: FIXED_NOW)
    assert orchestrator.generate(trip).to_dict() == orchestrator.generate(trip).to_dict()

    later = RecommendationOrchestrator(clock=fixed_clock(8), now=lambda: datetime(2030, 1, 1, tzinfo=timezone.utc))
    first, second = orchestrator.generate(trip).to_dict(), later.generate(trip).to_dict()
    assert first["generated_at"] != second["generated_at"]
    first.pop("generated_at")
    second.pop("generated_at")
    assert first == second


class SpyRecommender(DomainRecommender):
    def __init__(self, domain, seen):
        self.domain = domain
        self.seen = seen

    def recommend(self, context):
        self.seen.append(context)
        return DomainRecommendation(domain=self.domain)

    def summarize(self, items, context):
        return {}


def test_every_recommender_sees_the_same_context(make_trip):
    seen = []
    spies = {slot: SpyRecommender(slot, seen) for slot in DEFAULT_RECOMMENDERS}
    result = RecommendationOrchestrator(clock=fixed_clock(10), recommenders=spies).generate(make_trip())
    assert len(seen) == 4
    assert all(context is result.context for context in seen)


def test_timestamp_taken_after_recommenders(make_trip):
    events = []

    class Recorder(SpyRecommender):
        def recommend(self, context):
            events.append(self.domain)
            return super().recommend(context)

    def now():
        events.append("now")
        return FIXED_NOW

    spies = {slot: Recorder(slot, []) for slot in DEFAULT_RECOMMENDERS}
    RecommendationOrchestrator(clock=fixed_clock(10), now=now, recommenders=spies).generate(make_trip())
    assert events[-1] == "now"
    assert events.count("now") == 1


class BrokenRecommender(DomainRecommender):
    domain = "food"

    def recommend(self, context):
        raise RuntimeError("rule table corrupted")

    def summarize(self, items, context):
        return {}


@pytest.mark.parametrize("parallel", [False, True])
def test_failing_domain_is_isolated_and_flagged(make_trip, parallel):
    recommenders = dict(DEFAULT_RECOMMENDERS, food=BrokenRecommender())
    orchestrator = RecommendationOrchestrator(clock=fixed_clock(10), recommenders=recommenders, parallel=parallel)
    result = orchestrator.generate(make_trip())

    assert result.food.failed is True
    assert result.food.items == ()
    assert result.food.warnings
    assert result.errors == ("food recommendations unavailable",)
    assert result.clothing.failed is False
    assert result.clothing.items
    assert result.to_dict()["recommendations"]["food"]["failed"] is True


def test_parallel_matches_sequential(make_trip):
    trip = make_trip(destination="Mumbai", travel_group="couple")
    sequential = RecommendationOrchestrator(clock=fixed_clock(19), now=lambda: FIXED_NOW)
    parallel = RecommendationOrchestrator(clock=fixed_clock(19), now=lambda: FIXED_NOW, parallel=True)
    assert sequential.generate(trip).to_dict() == parallel.generate(trip).to_dict()


def test_invalid_trip_raises_before_any_recommender(make_trip):
    seen = []
    spies = {slot: SpyRecommender(slot, seen) for slot in DEFAULT_RECOMMENDERS}
    orchestrator = RecommendationOrchestrator(clock=fixed_clock(10), recommenders=spies)
    with pytest.raises(InvalidTripError):
        orchestrator.generate(make_trip(start_date=date(2024, 5, 5), end_date=date(2024, 5, 1)))
    assert seen == []


@pytest.mark.parametrize("alias,domain", [
    ("clothes", "clothing"),
    ("clothing", "clothing"),
    ("food", "food"),
    ("guide", "experience"),
    ("experiences", "experience"),
    ("photo", "photo"),
])
def test_single_domain(make_trip, alias, domain):
    rec = RecommendationOrchestrator(clock=fixed_clock(10)).recommend(alias, make_trip())
    assert rec.domain == domain


def test_unknown_domain(make_trip):
    with pytest.raises(KeyError):
        RecommendationOrchestrator(clock=fixed_clock(10)).recommend("hotels", make_trip())


def test_envelope_shape(make_trip):
    data = generate_recommendations(make_trip(destination="Atlantis"), clock=fixed_clock(14)).to_dict()
    assert set(data) == {"context", "recommendations", "notifications", "generated_at", "errors"}
    assert set(data["recommendations"]) == {"clothing", "food", "experiences", "photos"}
    assert data["context"]["weather"] == {"temperature": 25.0, "condition": "sunny", "humidity": 70}
    assert data["recommendations"]["photos"]["items"] == []
    assert [item["id"] for item in data["recommendations"]["food"]["items"]] == ["lunch-1"]
    assert [item["id"] for item in data["recommendations"]["experiences"]["items"]] == ["afternoon-1"]
    datetime.fromisoformat(data["generated_at"])


def test_domain_summary_is_read_only(make_trip):
    rec = RecommendationOrchestrator(clock=fixed_clock(10)).recommend("food", make_trip())
    with pytest.raises(TypeError):
        rec.summary["recommendation"] = "edited"

    source = {"total_items": 1}
    built = DomainRecommendation(domain="food", summary=source)
    source["total_items"] = 2
    assert built.summary == {"total_items": 1}
    assert built.to_dict()["summary"] == {"total_items": 1}
    assert type(built.to_dict()["summary"]) is dict
