"""
FastAPI dependencies (shared across routes).

Services are built per request from the session and the ``Settings``
instance that ``create_app`` stored on ``app.state``.
"""

from __future__ import annotations

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from auth.service import AuthService
from banners.service import BannerService
from config.settings import Settings
from database.session import get_db_session


async def db_session(session: AsyncSession = Depends(get_db_session)) -> AsyncGenerator[AsyncSession, None]:
    """Re-export so routes import from a single place."""
    yield session


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_auth_service(
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(session, settings)


def get_banner_service(session: AsyncSession = Depends(db_session)) -> BannerService:
    return BannerService(session)
