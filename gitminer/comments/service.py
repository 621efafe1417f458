"""
Comment business logic.
"""

from __future__ import annotations

from gitminer.core.http import list_page, not_found

from . import repository


async def list_comments(
    repo: repository.CommentRepository,
    *,
    author: str | None,
    order: str | None,
    page: int,
    size: int,
) -> list[dict]:
    return await list_page(repo, author, order=order, page=page, size=size)


async def get_comment(repo: repository.CommentRepository, comment_id: str) -> dict:
    row = await repo.get_by_id(comment_id)
    if row is None:
        raise not_found("Comment")
    return row
