from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import PyMongoError

from trip_api.db.trip_store import TripStore, TripStoreError


def _save(store, owner, destination, created_at=None):
    return store.create(owner, destination, 3, "food", [f"Day 1 in {destination}"], created_at=created_at)


def test_create_returns_serialized_trip(trip_store):
    trip = trip_store.create("u1", "Tokyo", 5, "culture", ["Day1...", "Day2..."])

    assert ObjectId.is_valid(trip["_id"])
    assert trip["user"] == "u1"
    assert trip["destination"] == "Tokyo"
    assert trip["days"] == 5
    assert trip["interest"] == "culture"
    assert trip["plan"] == ["Day1...", "Day2..."]
    assert isinstance(trip["createdAt"], datetime)


def test_create_requires_owner(trip_store, trips_collection):
    with pytest.raises(TripStoreError):
        trip_store.create("", "Tokyo", 5, "culture", [])
    assert trips_collection.count_documents({}) == 0


def test_list_is_scoped_to_owner(trip_store):
    _save(trip_store, "u1", "Tokyo")
    _save(trip_store, "u2", "Lima")

    assert [t["destination"] for t in trip_store.list_by_owner("u1")] == ["Tokyo"]
    assert [t["destination"] for t in trip_store.list_by_owner("u2")] == ["Lima"]
    assert trip_store.list_by_owner("u3") == []


def test_list_is_newest_first_regardless_of_insert_order(trip_store):
    base = datetime(2024, 5, 1, tzinfo=timezone.utc)
    _save(trip_store, "u1", "middle", base + timedelta(days=1))
    _save(trip_store, "u1", "oldest", base)
    _save(trip_store, "u1", "newest", base + timedelta(days=2))

    assert [t["destination"] for t in trip_store.list_by_owner("u1")] == ["newest", "middle", "oldest"]


def test_delete_by_owner_then_not_found(trip_store):
    trip = _save(trip_store, "u1", "Tokyo")

    deleted = trip_store.delete_by_id_and_owner(trip["_id"], "u1")
    assert deleted["_id"] == trip["_id"]
    assert trip_store.list_by_owner("u1") == []

    assert trip_store.delete_by_id_and_owner(trip["_id"], "u1") is None


def test_delete_by_other_owner_leaves_record(trip_store):
    trip = _save(trip_store, "u1", "Tokyo")

    assert trip_store.delete_by_id_and_owner(trip["_id"], "u2") is None
    assert [t["_id"] for t in trip_store.list_by_owner("u1")] == [trip["_id"]]


def test_delete_with_malformed_id_is_not_found(trip_store):
    assert trip_store.delete_by_id_and_owner("not-an-object-id", "u1") is None


def test_driver_failures_become_store_errors():
    collection = MagicMock()
    collection.insert_one.side_effect = PyMongoError("connection refused")
    collection.find.side_effect = PyMongoError("connection refused")
    collection.find_one_and_delete.side_effect = PyMongoError("connection refused")
    store = TripStore(collection)

    with pytest.raises(TripStoreError):
        store.create("u1", "Tokyo", 5, "culture", [])
    with pytest.raises(TripStoreError):
        store.list_by_owner("u1")
    with pytest.raises(TripStoreError):
        store.delete_by_id_and_owner(str(ObjectId()), "u1")


def test_object_id_owner_is_stored_as_object_id(trip_store, trips_collection):
    owner = str(ObjectId())
    trip = _save(trip_store, owner, "Tokyo")

    raw = trips_collection.find_one({"_id": ObjectId(trip["_id"])})
    assert raw["user"] == ObjectId(owner)
    assert trip["user"] == owner


def test_trips_with_object_id_owner_are_listed_and_deleted(trip_store, trips_collection):
    owner = ObjectId()
    inserted = trips_collection.insert_one({
        "user": owner,
        "destination": "Lima",
        "days": 4,
        "interest": "food",
        "plan": ["Ceviche"],
        "createdAt": datetime(2024, 1, 1, tzinfo=timezone.utc),
    })

    listed = trip_store.list_by_owner(str(owner))
    assert [t["user"] for t in listed] == [str(owner)]

    assert trip_store.delete_by_id_and_owner(str(inserted.inserted_id), str(ObjectId())) is None
    deleted = trip_store.delete_by_id_and_owner(str(inserted.inserted_id), str(owner))
    assert deleted["destination"] == "Lima"
