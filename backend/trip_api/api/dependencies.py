# backend/trip_api/api/dependencies.py

from fastapi import Header, HTTPException, Request
from typing import Optional

from trip_api.core.security import decode_token
from trip_api.db.trip_store import TripStore
from trip_api.db.user_store import UserStore
from trip_api.services.itinerary_generator import ItineraryGenerator


# --------------------------------------------------------
# Process-scoped collaborators built by the app lifespan
# --------------------------------------------------------
def get_trip_store(request: Request) -> TripStore:
    return request.app.state.trip_store


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_itinerary_generator(request: Request) -> ItineraryGenerator:
    return request.app.state.itinerary_generator


# --------------------------------------------------------
# Auth guard → user id from the bearer JWT
# --------------------------------------------------------
def get_current_user_id(authorization: Optional[str] = Header(None)) -> str:
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Not authorized, no token")

    token = authorization.split(" ", 1)[1].strip()
    payload = decode_token(token)
    if not payload or not payload.get("sub"):
        raise HTTPException(status_code=401, detail="Not authorized, token failed")

    return str(payload["sub"])
