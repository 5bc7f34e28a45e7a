# backend/trip_api/models/trip_models.py

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List


# -------------------------
# POST /api/itinerary
# -------------------------
class ItineraryIn(BaseModel):
    destination: str
    days: int
    interest: str


class ItineraryOut(BaseModel):
    itinerary: str


# -------------------------
# Trip records
# -------------------------
class SaveTripIn(BaseModel):
    destination: str
    days: int
    interest: str
    plan: List[str] = []


class TripOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    user: str
    destination: str
    days: int
    interest: str
    plan: List[str]
    createdAt: datetime


class SaveTripOut(BaseModel):
    message: str
    trip: TripOut


class MessageOut(BaseModel):
    message: str
