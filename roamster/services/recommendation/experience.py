"""Experience recommender: activities for the time of day plus destination highlights."""

from roamster.data.experiences import EXPERIENCE_RULE_GROUPS, EXPERIENCE_WARNING_RULES
from roamster.services.recommendation.base import DomainRecommender


class ExperienceRecommender(DomainRecommender):
    domain = "experience"
    rule_groups = EXPERIENCE_RULE_GROUPS
    warning_rules = EXPERIENCE_WARNING_RULES
    cautious_message = "Prioritizing safe, low-intensity, and accessible experiences"
    balanced_message = "Mix of cultural, adventure, and leisure experiences"

    def summarize(self, items, context) -> dict:
        return {
            "total_options": len(items),
            "recommendation": self.headline(context),
        }


experience_recommender = ExperienceRecommender()
