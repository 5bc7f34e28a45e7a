# backend/trip_api/models/user_models.py

from pydantic import BaseModel, EmailStr, field_validator

from trip_api.core.security import MAX_PASSWORD_BYTES, password_too_long


# -------------------------
# Registration model
# -------------------------
class RegisterIn(BaseModel):
    name: str
    email: EmailStr
    password: str

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if password_too_long(value):
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


# -------------------------
# Login model
# -------------------------
class LoginIn(BaseModel):
    email: EmailStr
    password: str


# -------------------------
# Responses
# -------------------------
class UserOut(BaseModel):
    id: str
    name: str
    email: EmailStr


class AuthOut(BaseModel):
    token: str
    user: UserOut
