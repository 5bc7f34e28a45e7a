# backend/trip_api/api/routes_itinerary.py

from fastapi import APIRouter, Depends, HTTPException

from trip_api.api.dependencies import get_itinerary_generator
from trip_api.models.trip_models import ItineraryIn, ItineraryOut
from trip_api.services.itinerary_generator import ItineraryGenerationError, ItineraryGenerator

router = APIRouter(prefix="/api", tags=["itinerary"])


# --------------------------------------------------------
# POST /api/itinerary  → public, AI generated plan
# --------------------------------------------------------
@router.post("/itinerary", response_model=ItineraryOut)
def generate_itinerary(
    data: ItineraryIn,
    generator: ItineraryGenerator = Depends(get_itinerary_generator),
):
    try:
        text = generator.generate(data.destination, data.days, data.interest)
    except ItineraryGenerationError:
        raise HTTPException(status_code=500, detail="AI generation failed")

    return {"itinerary": text}
