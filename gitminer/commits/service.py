"""
Commit business logic.
"""

from __future__ import annotations

import logging

from gitminer.core.http import list_page, not_found

from . import repository, schemas

logger = logging.getLogger(__name__)


async def list_commits(
    repo: repository.CommitRepository,
    *,
    author_name: str | None,
    order: str | None,
    page: int,
    size: int,
) -> list[dict]:
    return await list_page(repo, author_name, order=order, page=page, size=size)


async def get_commit(repo: repository.CommitRepository, commit_id: str) -> dict:
    row = await repo.get_by_id(commit_id)
    if row is None:
        raise not_found("Commit")
    return row


async def create_commit(
    repo: repository.CommitRepository,
    payload: schemas.CommitCreateRequest,
) -> dict:
    # A fresh commit is built from the body fields; the body id never reaches the store.
    row = await repo.create(
        title=payload.title,
        message=payload.message,
        author_name=payload.author_name,
        author_email=payload.author_email,
        authored_date=payload.authored_date,
        web_url=payload.web_url,
    )
    logger.info("commit_created id=%s", row["id"])
    return row
