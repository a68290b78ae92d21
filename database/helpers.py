"""
Database helper functions — the parameterized statements the services issue.

"""

from __future__ import annotations

from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Banner, User

_UPSERT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}



async def insert_user(session: AsyncSession, username: str, password_hash: str) -> User:
    """Insert a ``User`` row and flush so unique violations surface here."""
    user = User(username=username, password_hash=password_hash)
    session.add(user)
    await session.flush()
    return user


async def get_user_by_username(session: AsyncSession, username: str) -> Optional[User]:
    result = await session.execute(
        select(User).where(User.username == username)
    )
    return result.scalar_one_or_none()


async def banner_exists(session: AsyncSession, banner_id: str) -> bool:
    result = await session.execute(
        select(Banner.id).where(Banner.id == banner_id)
    )
    return result.scalar_one_or_none() is not None


async def upsert_banner(
    session: AsyncSession,
    banner_id: str,
    title: str,
    description: str,
    timer: int,
    url: str,
) -> None:
    """
    Insert a banner or replace every non-id column of the existing row.

    Issued as one ``INSERT ... ON CONFLICT (id) DO UPDATE`` statement so the
    write is atomic on the database side.
    """
    dialect = session.get_bind().dialect.name
    insert = _UPSERT_INSERTS.get(dialect)
    if insert is None:
        raise NotImplementedError(f"Banner upsert is not supported on {dialect!r}")

    stmt = insert(Banner).values(
        id=banner_id,
        title=title,
        description=description,
        timer=timer,
        url=url,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[Banner.id],
        set_={
            "title": stmt.excluded.title,
            "description": stmt.excluded.description,
            "timer": stmt.excluded.timer,
            "url": stmt.excluded.url,
        },
    )
    await session.execute(stmt)
    await session.flush()


async def get_banner(session: AsyncSession, banner_id: str) -> Optional[Dict[str, Any]]:
    """Return ``{title, description, timer, url}`` for a banner, or ``None``."""
    result = await session.execute(
        select(Banner.title, Banner.description, Banner.timer, Banner.url)
        .where(Banner.id == banner_id)
    )
    row = result.one_or_none()
    if row is None:
        return None
    return dict(row._mapping)
