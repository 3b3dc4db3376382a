from typing import Literal

from pydantic import BaseModel

Gender = Literal["Male", "Female", "Other", "Prefer not to say"]
DietaryPreference = Literal["vegetarian", "non-vegetarian", "vegan", "none"]
TravelStyle = Literal["relaxed", "adventure", "aesthetic"]
SocialIntent = Literal["photos", "reels", "casual"]


class ProfileUpdateRequest(BaseModel):
    name: str | None = None
    phone: str | None = None


class PreferencesUpdateRequest(BaseModel):
    gender: Gender | None = None
    clothing_size: str | None = None
    dietary_preference: DietaryPreference | None = None
    travel_style: TravelStyle | None = None
    social_intent: SocialIntent | None = None
    language_preference: str | None = None
