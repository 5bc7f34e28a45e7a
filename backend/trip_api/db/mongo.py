# backend/trip_api/db/mongo.py

from pymongo import MongoClient

from trip_api.core.config_loader import Settings


TRIPS_COLLECTION = "trips"
USERS_COLLECTION = "users"


def build_mongo_client(settings: Settings) -> MongoClient:
    # tz_aware so createdAt round-trips as UTC instead of naive datetimes
    return MongoClient(settings.MONGODB_URI, tz_aware=True)
