"""
Project business logic.

Projects are the write path for mined data: creating or updating a project
also stores its commits, its issues and their comments and users.
"""

from __future__ import annotations

import logging

from gitminer.core.http import list_page, not_found

from . import repository, schemas

logger = logging.getLogger(__name__)


def _children(payload: schemas.ProjectUpdateRequest) -> dict[str, list[dict]]:
    return {
        "commits": [commit.model_dump() for commit in payload.commits],
        "issues": [issue.model_dump() for issue in payload.issues],
    }


async def list_projects(
    repo: repository.ProjectRepository,
    *,
    name: str | None,
    order: str | None,
    page: int,
    size: int,
) -> list[dict]:
    return await list_page(repo, name, order=order, page=page, size=size)


async def get_project(repo: repository.ProjectRepository, project_id: str) -> dict:
    row = await repo.get_by_id(project_id)
    if row is None:
        raise not_found("Project")
    return row


async def create_project(
    repo: repository.ProjectRepository,
    payload: schemas.ProjectCreateRequest,
) -> dict:
    saved = await repo.save(
        project_id=payload.id,
        name=payload.name,
        web_url=payload.web_url,
        **_children(payload),
    )
    logger.info(
        "project_saved id=%s commits=%s issues=%s",
        saved["id"],
        len(saved["commits"]),
        len(saved["issues"]),
    )
    return saved


async def update_project(
    repo: repository.ProjectRepository,
    project_id: str,
    payload: schemas.ProjectUpdateRequest,
) -> None:
    if not await repo.exists(project_id):
        raise not_found("Project")

    updated = await repo.update(
        project_id,
        name=payload.name,
        web_url=payload.web_url,
        **_children(payload),
    )
    # Deleted between the existence check and the update.
    if not updated:
        raise not_found("Project")
    logger.info("project_updated id=%s", project_id)


async def delete_project(repo: repository.ProjectRepository, project_id: str) -> None:
    if not await repo.exists(project_id):
        raise not_found("Project")

    if not await repo.delete_by_id(project_id):
        raise not_found("Project")
    logger.info("project_deleted id=%s", project_id)
