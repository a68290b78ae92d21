"""
AuthService — signup (hash + persist) and login (verify + issue token).
"""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.jwt import create_token
from auth.password import hash_password, verify_password
from config.settings import Settings
from core.errors import ConflictError, InternalError, InvalidCredentials, ValidationError
from database.helpers import get_user_by_username, insert_user

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, session: AsyncSession, settings: Settings):
        self._session = session
        self._settings = settings

    async def signup(self, username: str, password: str) -> None:
        """
        Create a user with a bcrypt-hashed password.

        Raises ``ConflictError`` if the username is taken; the existing row
        is left untouched.
        """
        if not username or not password:
            raise ValidationError("Username and password are required")

        # bcrypt is CPU-bound; keep it off the event loop.
        password_hash = await asyncio.to_thread(
            hash_password, password, rounds=self._settings.bcrypt_rounds,
        )
        try:
            user = await insert_user(self._session, username, password_hash)
            await self._session.commit()
        except IntegrityError as exc:
            await self._session.rollback()
            logger.info("Signup rejected, username %r already exists", username)
            raise ConflictError("Username already exists") from exc
        except SQLAlchemyError as exc:
            await self._session.rollback()
            logger.exception("Signup failed for %r", username)
            raise InternalError("Error creating user") from exc

        logger.info("Registered user %s (%s)", username, user.id)

    async def login(self, username: str, password: str) -> str:
        """Verify credentials and return a signed token for the user."""
        if not username or not password:
            raise InvalidCredentials()

        try:
            user = await get_user_by_username(self._session, username)
        except SQLAlchemyError as exc:
            logger.exception("Login lookup failed for %r", username)
            raise InternalError("Error logging in") from exc

        # Same error for both checks so callers can't probe usernames.
        if user is None or not await asyncio.to_thread(
            verify_password, password, user.password_hash,
        ):
            logger.info("Failed login for %r", username)
            raise InvalidCredentials()

        token = create_token(
            user.id,
            self._settings.jwt_secret,
            expires_in=self._settings.jwt_expiry_seconds,
        )
        logger.info("Login: %s (%s)", user.username, user.id)
        return token
