# backend/trip_api/db/trip_store.py

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from trip_api.core.logger import logger


class TripStoreError(Exception):
    pass


# newest first; _id breaks ties between trips saved in the same millisecond
NEWEST_FIRST = [("createdAt", DESCENDING), ("_id", DESCENDING)]


def owner_ref(owner_id: str) -> Union[ObjectId, str]:
    """
    Owners are user ObjectIds (the users collection key); ids that are not
    ObjectIds are kept as plain strings.
    """
    if ObjectId.is_valid(owner_id):
        return ObjectId(owner_id)
    return owner_id


def serialize_trip(doc: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "_id": str(doc["_id"]),
        "user": str(doc["user"]),
        "destination": doc.get("destination"),
        "days": doc.get("days"),
        "interest": doc.get("interest"),
        "plan": list(doc.get("plan") or []),
        "createdAt": doc.get("createdAt"),
    }


class TripStore:
    def __init__(self, collection: Collection):
        self.collection = collection

    def ensure_indexes(self):
        try:
            self.collection.create_index([("user", ASCENDING), ("createdAt", DESCENDING)])
        except PyMongoError as e:
            logger.error(f"Could not create trip indexes: {e}")
            raise TripStoreError("Index creation failed") from e

    # ----------------------------------------------------------------------
    # CREATE
    # ----------------------------------------------------------------------
    def create(
        self,
        owner_id: str,
        destination: str,
        days: int,
        interest: str,
        plan: List[str],
        created_at: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        if not owner_id:
            raise TripStoreError("A trip needs an owner")

        doc = {
            "user": owner_ref(owner_id),
            "destination": destination,
            "days": days,
            "interest": interest,
            "plan": list(plan),
            "createdAt": created_at or datetime.now(timezone.utc),
        }

        try:
            result = self.collection.insert_one(doc)
        except PyMongoError as e:
            logger.exception(f"insert_one failed for user {owner_id}")
            raise TripStoreError("Saving trip failed") from e

        doc["_id"] = result.inserted_id
        logger.info(f"Saved trip {result.inserted_id} for user {owner_id}")
        return serialize_trip(doc)

    # ----------------------------------------------------------------------
    # LIST
    # ----------------------------------------------------------------------
    def list_by_owner(self, owner_id: str) -> List[Dict[str, Any]]:
        try:
            cursor = self.collection.find({"user": owner_ref(owner_id)}).sort(NEWEST_FIRST)
            return [serialize_trip(doc) for doc in cursor]
        except PyMongoError as e:
            logger.exception(f"find failed for user {owner_id}")
            raise TripStoreError("Fetching trips failed") from e

    # ----------------------------------------------------------------------
    # DELETE
    # ----------------------------------------------------------------------
    def delete_by_id_and_owner(self, trip_id: str, owner_id: str) -> Optional[Dict[str, Any]]:
        """
        Delete a trip only when it belongs to owner_id.

        Returns the deleted trip, or None when no trip with that id is owned
        by owner_id (including ids that are not valid ObjectIds).
        """
        try:
            oid = ObjectId(trip_id)
        except (InvalidId, TypeError):
            return None

        try:
            doc = self.collection.find_one_and_delete({"_id": oid, "user": owner_ref(owner_id)})
        except PyMongoError as e:
            logger.exception(f"find_one_and_delete failed for trip {trip_id}")
            raise TripStoreError("Deleting trip failed") from e

        if doc is None:
            return None

        logger.info(f"Deleted trip {trip_id} for user {owner_id}")
        return serialize_trip(doc)
