# backend/trip_api/db/user_store.py

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from trip_api.core.logger import logger


class UserStoreError(Exception):
    pass


class DuplicateUserError(UserStoreError):
    pass


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def _with_str_id(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if doc is None:
        return None
    doc = dict(doc)
    doc["id"] = str(doc.pop("_id"))
    return doc


class UserStore:
    def __init__(self, collection: Collection):
        self.collection = collection

    def ensure_indexes(self):
        try:
            self.collection.create_index("email", unique=True)
        except PyMongoError as e:
            logger.error(f"Could not create user indexes: {e}")
            raise UserStoreError("Index creation failed") from e

    # ----------------------------------------------------------------------
    # USER CRUD
    # ----------------------------------------------------------------------
    def create_user(self, email: str, name: str, password_hash: str) -> Dict[str, Any]:
        doc = {
            "email": _normalize_email(email),
            "name": name,
            "password": password_hash,
            "createdAt": datetime.now(timezone.utc),
        }

        try:
            result = self.collection.insert_one(doc)
        except DuplicateKeyError as e:
            raise DuplicateUserError("User already exists") from e
        except PyMongoError as e:
            logger.exception(f"insert_one failed for {doc['email']}")
            raise UserStoreError("Registration failed") from e

        doc["_id"] = result.inserted_id
        logger.info(f"Registered user {result.inserted_id}")
        return _with_str_id(doc)

    def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        try:
            doc = self.collection.find_one({"email": _normalize_email(email)})
        except PyMongoError as e:
            logger.exception("find_one by email failed")
            raise UserStoreError("User lookup failed") from e
        return _with_str_id(doc)

    def get_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        try:
            oid = ObjectId(user_id)
        except (InvalidId, TypeError):
            return None

        try:
            doc = self.collection.find_one({"_id": oid})
        except PyMongoError as e:
            logger.exception(f"find_one failed for user {user_id}")
            raise UserStoreError("User lookup failed") from e
        return _with_str_id(doc)
