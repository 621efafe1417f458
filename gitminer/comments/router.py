"""
Comment API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from gitminer.core import paging
from gitminer.core.db import Database
from gitminer.core.http import get_database

from . import repository, schemas, service

router = APIRouter(prefix="/comments")


def get_repository(database: Database = Depends(get_database)) -> repository.CommentRepository:
    return repository.CommentRepository(database)


@router.get("", response_model=list[schemas.CommentResponse])
async def list_comments(
    name: str | None = Query(default=None, description="Exact author name."),
    order: str | None = Query(default=None),
    page: int = Query(default=paging.DEFAULT_PAGE),
    size: int = Query(default=paging.DEFAULT_SIZE),
    repo: repository.CommentRepository = Depends(get_repository),
) -> list[dict]:
    return await service.list_comments(repo, author=name, order=order, page=page, size=size)


@router.get("/{comment_id}", response_model=schemas.CommentResponse)
async def get_comment(
    comment_id: str,
    repo: repository.CommentRepository = Depends(get_repository),
) -> dict:
    return await service.get_comment(repo, comment_id)
