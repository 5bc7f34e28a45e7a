# backend/trip_api/api/routes_auth.py

from fastapi import APIRouter, Depends, HTTPException

from trip_api.api.dependencies import get_current_user_id, get_user_store
from trip_api.core.security import (
    get_password_hash,
    verify_password,
    create_access_token,
)
from trip_api.db.user_store import DuplicateUserError, UserStore, UserStoreError
from trip_api.models.user_models import AuthOut, LoginIn, RegisterIn, UserOut

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _public_user(user: dict) -> dict:
    return {"id": user["id"], "name": user["name"], "email": user["email"]}


# --------------------------
# REGISTER
# --------------------------
@router.post("/register", response_model=AuthOut)
def register(data: RegisterIn, users: UserStore = Depends(get_user_store)):
    hashed = get_password_hash(data.password)

    try:
        user = users.create_user(email=data.email, name=data.name, password_hash=hashed)
    except DuplicateUserError:
        raise HTTPException(400, "User already exists")
    except UserStoreError:
        raise HTTPException(500, "Registration failed")

    return {"token": create_access_token(subject=user["id"]), "user": _public_user(user)}


# --------------------------
# LOGIN
# --------------------------
@router.post("/login", response_model=AuthOut)
def login(data: LoginIn, users: UserStore = Depends(get_user_store)):
    try:
        user = users.get_by_email(data.email)
    except UserStoreError:
        raise HTTPException(500, "Login failed")

    if not user or not verify_password(data.password, user["password"]):
        raise HTTPException(401, "Invalid credentials")

    return {"token": create_access_token(subject=user["id"]), "user": _public_user(user)}


# --------------------------
# ME
# --------------------------
@router.get("/me", response_model=UserOut)
def me(
    user_id: str = Depends(get_current_user_id),
    users: UserStore = Depends(get_user_store),
):
    try:
        user = users.get_by_id(user_id)
    except UserStoreError:
        raise HTTPException(500, "User lookup failed")

    if not user:
        raise HTTPException(404, "User not found")

    return _public_user(user)
