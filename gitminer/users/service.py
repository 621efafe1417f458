"""
User business logic.
"""

from __future__ import annotations

import logging

from gitminer.core.http import list_page, not_found

from . import repository, schemas

logger = logging.getLogger(__name__)


async def list_users(
    repo: repository.UserRepository,
    *,
    name: str | None,
    order: str | None,
    page: int,
    size: int,
) -> list[dict]:
    return await list_page(repo, name, order=order, page=page, size=size)


async def get_user(repo: repository.UserRepository, user_id: str) -> dict:
    row = await repo.get_by_id(user_id)
    if row is None:
        raise not_found("User")
    return row


async def create_user(repo: repository.UserRepository, payload: schemas.UserCreateRequest) -> dict:
    row = await repo.create(
        username=payload.username,
        name=payload.name,
        avatar_url=payload.avatar_url,
        web_url=payload.web_url,
    )
    logger.info("user_created id=%s username=%s", row["id"], row["username"])
    return row
