import uuid
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field, model_validator

TravelGroup = Literal["solo", "couple", "family", "kids", "elderly"]
Accommodation = Literal["hotel", "hostel", "airbnb"]
SafetySensitivity = Literal["normal", "high"]
ComfortLevel = Literal["basic", "moderate", "premium"]
ActivityIntensity = Literal["low", "moderate", "high"]
TripStatus = Literal["planned", "active", "completed", "cancelled"]


class CreateTripRequest(BaseModel):
    destination: str = Field(min_length=1, max_length=120)
    start_date: date
    end_date: date
    travel_group: TravelGroup
    accommodation: Accommodation | None = None
    safety_sensitivity: SafetySensitivity = "normal"
    comfort_level: ComfortLevel = "moderate"
    activity_intensity: ActivityIntensity | None = None

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date <= self.start_date:
            raise ValueError("End date must be after start date")
        if not self.destination.strip():
            raise ValueError("Destination is required")
        return self


class UpdateTripRequest(BaseModel):
    destination: str | None = Field(default=None, min_length=1, max_length=120)
    start_date: date | None = None
    end_date: date | None = None
    travel_group: TravelGroup | None = None
    accommodation: Accommodation | None = None
    safety_sensitivity: SafetySensitivity | None = None
    comfort_level: ComfortLevel | None = None
    activity_intensity: ActivityIntensity | None = None
    status: TripStatus | None = None


class TripResponse(BaseModel):
    id: uuid.UUID
    destination: str
    start_date: date
    end_date: date
    travel_group: str
    accommodation: str | None
    safety_sensitivity: str
    comfort_level: str
    activity_intensity: str | None
    is_active: bool
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
