"""
User API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from gitminer.core import paging
from gitminer.core.db import Database
from gitminer.core.http import get_database

from . import repository, schemas, service

router = APIRouter(prefix="/users")


def get_repository(database: Database = Depends(get_database)) -> repository.UserRepository:
    return repository.UserRepository(database)


@router.get("", response_model=list[schemas.UserResponse])
async def list_users(
    name: str | None = Query(default=None),
    order: str | None = Query(default=None),
    page: int = Query(default=paging.DEFAULT_PAGE),
    size: int = Query(default=paging.DEFAULT_SIZE),
    repo: repository.UserRepository = Depends(get_repository),
) -> list[dict]:
    return await service.list_users(repo, name=name, order=order, page=page, size=size)


@router.get("/{user_id}", response_model=schemas.UserResponse)
async def get_user(
    user_id: str,
    repo: repository.UserRepository = Depends(get_repository),
) -> dict:
    return await service.get_user(repo, user_id)


@router.post("", response_model=schemas.UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: schemas.UserCreateRequest,
    repo: repository.UserRepository = Depends(get_repository),
) -> dict:
    return await service.create_user(repo, request)
