"""
Auth API routes — signup, login.

Mounted at the application root.
"""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field, field_validator

from api.dependencies import get_auth_service
from auth.password import MAX_PASSWORD_BYTES
from auth.service import AuthService

router = APIRouter(tags=["auth"])


# ── Request / response schemas ─────────────────────────────────────────


class Credentials(BaseModel):
    model_config = ConfigDict(extra="forbid")

    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1)

    @field_validator("password")
    @classmethod
    def _password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode()) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class MessageResponse(BaseModel):
    message: str


class TokenResponse(BaseModel):
    token: str


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post("/signup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    req: Credentials,
    service: AuthService = Depends(get_auth_service),
) -> Dict[str, str]:
    """Register a new user."""
    await service.signup(req.username, req.password)
    return {"message": "User created successfully"}


@router.post("/login", response_model=TokenResponse)
async def login(
    req: Credentials,
    service: AuthService = Depends(get_auth_service),
) -> Dict[str, str]:
    """Login with username + password."""
    token = await service.login(req.username, req.password)
    return {"token": token}
