"""
Issue business logic, including paged retrieval of an issue's comments.

Comment paging modes (`COMMENT_PAGING_MODE`):
- legacy (default): window starts at len(comments) // page, as the original
  API computed it; the end is clamped and page < 1 is rejected.
- offset: conventional page * size window.

Only a leading "-" in `order` is honoured for comments: it reverses their
natural order (created_at, id). The field name is ignored and an order
without "-" leaves the natural order untouched.
"""

from __future__ import annotations

import logging

from gitminer.core import paging, settings
from gitminer.core.http import bad_request, list_page, not_found

from . import repository

logger = logging.getLogger(__name__)


async def list_issues(
    repo: repository.IssueRepository,
    *,
    state: str | None,
    order: str | None,
    page: int,
    size: int,
) -> list[dict]:
    return await list_page(repo, state, order=order, page=page, size=size)


async def get_issue(repo: repository.IssueRepository, issue_id: str) -> dict:
    row = await repo.get_by_id(issue_id)
    if row is None:
        raise not_found("Issue")
    return row


def window_comments(
    comments: list[dict],
    *,
    order: str | None,
    page: int,
    size: int,
    mode: str | None = None,
) -> list[dict]:
    ordered = list(comments)
    if order and order.startswith("-"):
        ordered.reverse()

    mode = mode or settings.comment_paging_mode()
    if mode == settings.COMMENT_PAGING_OFFSET:
        return paging.offset_window(ordered, page=page, size=size)
    return paging.legacy_window(ordered, page=page, size=size)


async def list_issue_comments(
    repo: repository.IssueRepository,
    issue_id: str,
    *,
    order: str | None,
    page: int,
    size: int,
) -> list[dict]:
    issue = await get_issue(repo, issue_id)
    try:
        return window_comments(issue["comments"], order=order, page=page, size=size)
    except paging.PagingError as exc:
        raise bad_request(exc) from exc
