"""
Commit API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from gitminer.core import paging
from gitminer.core.db import Database
from gitminer.core.http import get_database

from . import repository, schemas, service

router = APIRouter(prefix="/commits")


def get_repository(database: Database = Depends(get_database)) -> repository.CommitRepository:
    return repository.CommitRepository(database)


@router.get("", response_model=list[schemas.CommitResponse])
async def list_commits(
    author_name: str | None = Query(default=None),
    order: str | None = Query(default=None),
    page: int = Query(default=paging.DEFAULT_PAGE),
    size: int = Query(default=paging.DEFAULT_SIZE),
    repo: repository.CommitRepository = Depends(get_repository),
) -> list[dict]:
    return await service.list_commits(
        repo,
        author_name=author_name,
        order=order,
        page=page,
        size=size,
    )


@router.get("/{commit_id}", response_model=schemas.CommitResponse)
async def get_commit(
    commit_id: str,
    repo: repository.CommitRepository = Depends(get_repository),
) -> dict:
    return await service.get_commit(repo, commit_id)


@router.post("", response_model=schemas.CommitResponse, status_code=status.HTTP_201_CREATED)
async def create_commit(
    request: schemas.CommitCreateRequest,
    repo: repository.CommitRepository = Depends(get_repository),
) -> dict:
    return await service.create_commit(repo, request)
