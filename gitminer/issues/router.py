"""
Issue API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from gitminer.comments import schemas as comment_schemas
from gitminer.core import paging
from gitminer.core.db import Database
from gitminer.core.http import get_database

from . import repository, schemas, service

router = APIRouter(prefix="/issues")


def get_repository(database: Database = Depends(get_database)) -> repository.IssueRepository:
    return repository.IssueRepository(database)


@router.get("", response_model=list[schemas.IssueResponse])
async def list_issues(
    state: str | None = Query(default=None),
    order: str | None = Query(default=None),
    page: int = Query(default=paging.DEFAULT_PAGE),
    size: int = Query(default=paging.DEFAULT_SIZE),
    repo: repository.IssueRepository = Depends(get_repository),
) -> list[dict]:
    return await service.list_issues(repo, state=state, order=order, page=page, size=size)


@router.get("/{issue_id}", response_model=schemas.IssueResponse)
async def get_issue(
    issue_id: str,
    repo: repository.IssueRepository = Depends(get_repository),
) -> dict:
    return await service.get_issue(repo, issue_id)


@router.get("/{issue_id}/comments", response_model=list[comment_schemas.CommentResponse])
async def list_issue_comments(
    issue_id: str,
    order: str | None = Query(default=None, description="Only a leading '-' (reverse order) is honoured."),
    page: int = Query(default=paging.DEFAULT_PAGE),
    size: int = Query(default=paging.DEFAULT_SIZE),
    repo: repository.IssueRepository = Depends(get_repository),
) -> list[dict]:
    return await service.list_issue_comments(repo, issue_id, order=order, page=page, size=size)
