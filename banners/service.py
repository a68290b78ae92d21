"""
BannerService — upsert and fetch banner records by caller-supplied id.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.errors import InternalError, NotFound, ValidationError
from database.helpers import banner_exists, get_banner, upsert_banner

logger = logging.getLogger(__name__)

CREATED = "created"
UPDATED = "updated"


class BannerService:
    def __init__(self, session: AsyncSession):
        self._session = session

    async def upsert(
        self,
        banner_id: str,
        title: str,
        description: str,
        timer: int | None,
        url: str,
    ) -> Dict[str, Any]:
        """
        Create the banner, or replace all of its fields if ``banner_id``
        already exists.  Returns ``{"id", "status"}`` where status is
        ``"created"`` or ``"updated"``.
        """
        if not banner_id or not title or not description or timer is None or not url:
            raise ValidationError("All fields are required")

        try:
            existed = await banner_exists(self._session, banner_id)
            await upsert_banner(self._session, banner_id, title, description, timer, url)
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            logger.exception("Banner upsert failed for %r", banner_id)
            raise InternalError("Error creating banner") from exc

        status = UPDATED if existed else CREATED
        logger.info("Banner %s %s", banner_id, status)
        return {"id": banner_id, "status": status}

    async def fetch(self, banner_id: str | None) -> Dict[str, Any]:
        """Return ``{title, description, timer, url}`` for ``banner_id``."""
        if not banner_id:
            raise ValidationError("Banner ID is required")

        try:
            banner = await get_banner(self._session, banner_id)
        except SQLAlchemyError as exc:
            logger.exception("Banner fetch failed for %r", banner_id)
            raise InternalError("Error retrieving banner") from exc

        if banner is None:
            raise NotFound("Banner not found")
        return banner
