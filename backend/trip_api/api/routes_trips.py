# backend/trip_api/api/routes_trips.py

from fastapi import APIRouter, Depends, HTTPException
from typing import List

from trip_api.api.dependencies import get_current_user_id, get_trip_store
from trip_api.db.trip_store import TripStore, TripStoreError
from trip_api.models.trip_models import MessageOut, SaveTripIn, SaveTripOut, TripOut

router = APIRouter(prefix="/api", tags=["trips"])


# --------------------------------------------------------
# POST /api/saveTrip
# --------------------------------------------------------
@router.post("/saveTrip", response_model=SaveTripOut)
def save_trip(
    data: SaveTripIn,
    user_id: str = Depends(get_current_user_id),
    store: TripStore = Depends(get_trip_store),
):
    try:
        trip = store.create(
            owner_id=user_id,
            destination=data.destination,
            days=data.days,
            interest=data.interest,
            plan=data.plan,
        )
    except TripStoreError:
        raise HTTPException(status_code=500, detail="Saving trip failed")

    return {"message": "Trip saved successfully", "trip": trip}


# --------------------------------------------------------
# GET /api/myTrips  → newest first
# --------------------------------------------------------
@router.get("/myTrips", response_model=List[TripOut])
def my_trips(
    user_id: str = Depends(get_current_user_id),
    store: TripStore = Depends(get_trip_store),
):
    try:
        return store.list_by_owner(user_id)
    except TripStoreError:
        raise HTTPException(status_code=500, detail="Fetching trips failed")


# --------------------------------------------------------
# DELETE /api/trip/{trip_id}  → owner only
# --------------------------------------------------------
@router.delete("/trip/{trip_id}", response_model=MessageOut)
def delete_trip(
    trip_id: str,
    user_id: str = Depends(get_current_user_id),
    store: TripStore = Depends(get_trip_store),
):
    try:
        deleted = store.delete_by_id_and_owner(trip_id, user_id)
    except TripStoreError:
        raise HTTPException(status_code=500, detail="Deleting trip failed")

    if not deleted:
        raise HTTPException(status_code=404, detail="Trip not found")

    return {"message": "Trip deleted successfully"}
