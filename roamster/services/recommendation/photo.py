"""Photo recommender: photo spots, social-media tips and a lighting hint."""

from roamster.data.photo import PHOTO_RULE_GROUPS, PHOTO_TIP_GROUPS
from roamster.services.recommendation.base import DomainRecommender
from roamster.services.recommendation.config import SOCIAL_GROUPS
from roamster.services.recommendation.rules import collect_candidates


class PhotoRecommender(DomainRecommender):
    domain = "photo"
    rule_groups = PHOTO_RULE_GROUPS
    cautious_message = "Safe, accessible photo locations with minimal movement required"
    balanced_message = "Aesthetic-first suggestions for influencer-style content"
    family_message = "Group-friendly photo spots for family memories"

    def tips(self, context) -> list:
        return collect_candidates(PHOTO_TIP_GROUPS, context)

    def headline(self, context) -> str:
        # Three-way split: social groups, families, everyone else
        if context.travel_group in SOCIAL_GROUPS:
            return self.balanced_message
        if context.travel_group == "family":
            return self.family_message
        return self.cautious_message

    def summarize(self, items, context) -> dict:
        if context.time_of_day in ("morning", "evening"):
            best_time = "Current time is ideal for photography"
        else:
            best_time = "Consider morning or evening for better lighting"
        return {
            "total_spots": len(items),
            "recommendation": self.headline(context),
            "best_time": best_time,
        }


photo_recommender = PhotoRecommender()
