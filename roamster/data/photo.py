"""Photo spot rule groups and social-media tips."""

from dataclasses import replace

from roamster.services.recommendation.config import SOCIAL_GROUPS
from roamster.services.recommendation.domain import PhotoSpot, PhotoTip
from roamster.services.recommendation.rules import DestinationTable, RuleGroup

ALL_GROUPS = ("solo", "couple", "family", "kids", "elderly")

SUNRISE_SPOTS = (
    PhotoSpot(
        id="photo-morning-1",
        name="Sunrise Viewpoint",
        category="viewpoint",
        description="Soft natural light, minimal crowd",
        best_time="6:00 AM - 8:00 AM",
        light_quality="soft natural",
        crowd_level="low",
        safety_level="high",
        suitable_for=ALL_GROUPS,
        angles=("Wide shot", "Silhouette", "Golden hour"),
        poses=("Group photo", "Candid"),
    ),
)

GOLDEN_HOUR_SPOTS = (
    PhotoSpot(
        id="photo-evening-1",
        name="Golden Hour Location",
        category="viewpoint",
        description="Perfect lighting for photos",
        best_time="5:00 PM - 7:00 PM",
        light_quality="golden hour",
        crowd_level="medium",
        safety_level="high",
        suitable_for=ALL_GROUPS,
        angles=("Backlit", "Side lighting", "Wide landscape"),
        poses=("Group photo", "Individual"),
    ),
)


def _sunrise_poses(context, spot: PhotoSpot) -> PhotoSpot:
    if context.travel_group == "solo":
        return replace(spot, poses=("Standing", "Sitting"))
    return spot


def _golden_hour_poses(context, spot: PhotoSpot) -> PhotoSpot:
    if context.travel_group == "couple":
        return replace(spot, poses=("Romantic poses", "Walking together"))
    return spot


DESTINATION_SPOTS: dict[str, tuple[PhotoSpot, ...]] = {
    "mumbai": (
        PhotoSpot(
            id="mumbai-photo-1",
            name="Gateway of India",
            category="landmark",
            description="Iconic landmark, perfect for photos",
            best_time="Morning or Evening",
            light_quality="good",
            crowd_level="high",
            safety_level="high",
            suitable_for=ALL_GROUPS,
            angles=("Front view", "Side angle", "With water in background"),
            poses=("Standing", "Walking", "Group photo"),
        ),
        PhotoSpot(
            id="mumbai-photo-2",
            name="Marine Drive",
            category="waterfront",
            description="Scenic waterfront, great for sunset",
            best_time="Evening",
            light_quality="golden hour",
            crowd_level="medium",
            safety_level="high",
            suitable_for=ALL_GROUPS,
            angles=("Waterfront view", "Skyline", "Walking shot"),
            poses=("Sitting on wall", "Walking", "Candid"),
        ),
    ),
    "goa": (
        PhotoSpot(
            id="goa-photo-1",
            name="Beach Sunset",
            category="beach",
            description="Stunning beach sunset photos",
            best_time="Evening",
            light_quality="golden hour",
            crowd_level="medium",
            safety_level="high",
            suitable_for=ALL_GROUPS,
            angles=("Silhouette", "Beach walk", "Ocean view"),
            poses=("Walking on beach", "Sitting", "Group photo"),
        ),
    ),
    "delhi": (
        PhotoSpot(
            id="delhi-photo-1",
            name="India Gate",
            category="landmark",
            description="Famous monument, great for photos",
            best_time="Morning or Evening",
            light_quality="good",
            crowd_level="high",
            safety_level="high",
            suitable_for=ALL_GROUPS,
            angles=("Front view", "Side angle", "Wide shot"),
            poses=("Standing", "Walking", "Group photo"),
        ),
    ),
}

PHOTO_RULE_GROUPS = (
    RuleGroup(
        name="sunrise",
        when=lambda c: c.time_of_day == "morning",
        items=SUNRISE_SPOTS,
        adjust=_sunrise_poses,
    ),
    RuleGroup(
        name="golden-hour",
        when=lambda c: c.time_of_day == "evening",
        items=GOLDEN_HOUR_SPOTS,
        adjust=_golden_hour_poses,
    ),
    DestinationTable(name="destination-spots", entries=DESTINATION_SPOTS),
)


# ---------- Social-media tips ----------

AESTHETIC_TIP = PhotoTip(
    type="aesthetic",
    title="Aesthetic-First Approach",
    description="Focus on trendy framing and influencer-style shots",
    suggestions=(
        "Use rule of thirds",
        "Try different angles (low angle, high angle)",
        "Capture candid moments",
        "Include local elements in frame",
    ),
)

FAMILY_TIP = PhotoTip(
    type="group",
    title="Family-Friendly Shots",
    description="Capture memories with everyone in frame",
    suggestions=(
        "Use wide shots to include everyone",
        "Capture natural interactions",
        "Take multiple shots to ensure everyone looks good",
        "Include landmarks in background",
    ),
)

KIDS_TIP = PhotoTip(
    type="kids",
    title="Kid-Friendly Photography",
    description="Safe, open spaces with natural lighting",
    suggestions=(
        "Choose safe, open locations",
        "Capture kids playing naturally",
        "Use natural light (avoid harsh sun)",
        "Keep backgrounds simple",
    ),
)

MORNING_LIGHT_TIP = PhotoTip(
    type="lighting",
    title="Morning Light Tips",
    description="Best natural lighting conditions",
    suggestions=(
        "Soft morning light is perfect for portraits",
        "Avoid harsh shadows",
        "Use backlighting for dramatic effect",
        "Crowds are minimal - take your time",
    ),
)

GOLDEN_HOUR_TIP = PhotoTip(
    type="lighting",
    title="Golden Hour Photography",
    description="Perfect time for stunning photos",
    suggestions=(
        "Golden hour provides warm, flattering light",
        "Great for silhouettes",
        "Capture sunset colors",
        "Use side lighting for depth",
    ),
)

PHOTO_TIP_GROUPS = (
    RuleGroup(name="tips:aesthetic", when=lambda c: c.travel_group in SOCIAL_GROUPS, items=(AESTHETIC_TIP,)),
    RuleGroup(name="tips:family", when=lambda c: c.travel_group == "family", items=(FAMILY_TIP,)),
    RuleGroup(name="tips:kids", when=lambda c: c.travel_group == "kids", items=(KIDS_TIP,)),
    RuleGroup(name="tips:morning", when=lambda c: c.time_of_day == "morning", items=(MORNING_LIGHT_TIP,)),
    RuleGroup(name="tips:evening", when=lambda c: c.time_of_day == "evening", items=(GOLDEN_HOUR_TIP,)),
)
