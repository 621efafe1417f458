"""
User persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any, Iterable

import asyncpg

from gitminer.core.paging import sortable_fields
from gitminer.core.repository import IdPolicy, ResourceRepository, assign_id, id_or_new

USER_COLUMNS = ("id", "username", "name", "avatar_url", "web_url")


class UserRepository(ResourceRepository):
    table = "users"
    columns = USER_COLUMNS
    filter_column = "name"
    sortable = sortable_fields(*USER_COLUMNS)
    id_policy = IdPolicy.STORE_ASSIGNED

    async def create(
        self,
        *,
        username: str | None,
        name: str | None = None,
        avatar_url: str | None = None,
        web_url: str | None = None,
    ) -> dict[str, Any]:
        row = await self.database.fetch_one(
            """
            INSERT INTO users (id, username, name, avatar_url, web_url)
            VALUES ($1, $2, $3, $4, $5)
            RETURNING id, username, name, avatar_url, web_url
            """,
            assign_id(self.id_policy),
            username,
            name,
            avatar_url,
            web_url,
        )
        if row is None:
            raise RuntimeError("Failed to create user.")
        return row

    async def get_many(self, user_ids: Iterable[str]) -> dict[str, dict[str, Any]]:
        """
        Fetch users by id, keyed by id. Unknown ids are simply absent.
        """
        ids = sorted({user_id for user_id in user_ids if user_id})
        if not ids:
            return {}
        rows = await self.database.fetch_all(
            """
            SELECT id, username, name, avatar_url, web_url
            FROM users
            WHERE id = ANY($1::text[])
            """,
            ids,
        )
        return {str(row["id"]): row for row in rows}


async def upsert_user(conn: asyncpg.Connection, user: dict[str, Any] | None) -> str | None:
    """
    Insert or overwrite a mined user inside an open transaction; returns its id.
    """
    if user is None:
        return None
    user_id = id_or_new(user.get("id"))
    await conn.execute(
        """
        INSERT INTO users (id, username, name, avatar_url, web_url)
        VALUES ($1, $2, $3, $4, $5)
        ON CONFLICT (id) DO UPDATE
        SET username = EXCLUDED.username,
            name = EXCLUDED.name,
            avatar_url = EXCLUDED.avatar_url,
            web_url = EXCLUDED.web_url
        """,
        user_id,
        user.get("username"),
        user.get("name"),
        user.get("avatar_url"),
        user.get("web_url"),
    )
    return user_id
