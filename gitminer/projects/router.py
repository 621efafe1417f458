"""
Project API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from gitminer.core import paging
from gitminer.core.db import Database
from gitminer.core.http import get_database

from . import repository, schemas, service

router = APIRouter(prefix="/projects")


def get_repository(database: Database = Depends(get_database)) -> repository.ProjectRepository:
    return repository.ProjectRepository(database)


@router.get("", response_model=list[schemas.ProjectResponse])
async def list_projects(
    name: str | None = Query(default=None),
    order: str | None = Query(default=None),
    page: int = Query(default=paging.PROJECTS_DEFAULT_PAGE),
    size: int = Query(default=paging.DEFAULT_SIZE),
    repo: repository.ProjectRepository = Depends(get_repository),
) -> list[dict]:
    return await service.list_projects(repo, name=name, order=order, page=page, size=size)


@router.get("/{project_id}", response_model=schemas.ProjectResponse)
async def get_project(
    project_id: str,
    repo: repository.ProjectRepository = Depends(get_repository),
) -> dict:
    return await service.get_project(repo, project_id)


@router.post("", response_model=schemas.ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    request: schemas.ProjectCreateRequest,
    repo: repository.ProjectRepository = Depends(get_repository),
) -> dict:
    """
    Create a project with its commits and issues. An existing id is overwritten.
    """
    return await service.create_project(repo, request)


@router.put("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_project(
    project_id: str,
    request: schemas.ProjectUpdateRequest,
    repo: repository.ProjectRepository = Depends(get_repository),
) -> Response:
    await service.update_project(repo, project_id, request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: str,
    repo: repository.ProjectRepository = Depends(get_repository),
) -> Response:
    await service.delete_project(repo, project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
