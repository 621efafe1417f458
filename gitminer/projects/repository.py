"""
Project persistence (raw SQL).

A project is served with its commits and issues attached. Writes replace both
collections in the same transaction as the project row.
"""

from __future__ import annotations

from typing import Any

import asyncpg

from gitminer.commits.repository import CommitRepository, replace_project_commits
from gitminer.core.paging import sortable_fields
from gitminer.core.repository import IdPolicy, ResourceRepository, assign_id
from gitminer.issues.repository import IssueRepository, replace_project_issues

PROJECT_COLUMNS = ("id", "name", "web_url")


class ProjectRepository(ResourceRepository):
    table = "projects"
    columns = PROJECT_COLUMNS
    filter_column = "name"
    sortable = sortable_fields(*PROJECT_COLUMNS)
    id_policy = IdPolicy.CALLER_ASSIGNED

    async def hydrate(self, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        if not rows:
            return rows
        project_ids = [str(row["id"]) for row in rows]
        commits = await CommitRepository(self.database).list_for_projects(project_ids)
        issues = await IssueRepository(self.database).list_for_projects(project_ids)
        return [
            {
                **row,
                "commits": commits.get(str(row["id"]), []),
                "issues": issues.get(str(row["id"]), []),
            }
            for row in rows
        ]

    async def _replace_children(
        self,
        conn: asyncpg.Connection,
        project_id: str,
        *,
        commits: list[dict[str, Any]],
        issues: list[dict[str, Any]],
    ) -> None:
        await replace_project_commits(conn, project_id, commits)
        await replace_project_issues(conn, project_id, issues)

    async def save(
        self,
        *,
        project_id: str,
        name: str,
        web_url: str | None,
        commits: list[dict[str, Any]],
        issues: list[dict[str, Any]],
    ) -> dict[str, Any]:
        """
        Create or overwrite a project keyed by the caller's id.
        """
        project_id = assign_id(self.id_policy, project_id)
        async with self.database.transaction() as conn:
            row = await conn.fetchrow(
                """
                INSERT INTO projects (id, name, web_url)
                VALUES ($1, $2, $3)
                ON CONFLICT (id) DO UPDATE
                SET name = EXCLUDED.name,
                    web_url = EXCLUDED.web_url
                RETURNING id
                """,
                project_id,
                name,
                web_url,
            )
            if row is None:
                raise RuntimeError("Failed to save project.")
            await self._replace_children(conn, project_id, commits=commits, issues=issues)

        saved = await self.get_by_id(project_id)
        if saved is None:
            raise RuntimeError("Saved project could not be read back.")
        return saved

    async def update(
        self,
        project_id: str,
        *,
        name: str,
        web_url: str | None,
        commits: list[dict[str, Any]],
        issues: list[dict[str, Any]],
    ) -> bool:
        """
        Overwrite name, web_url, commits and issues of an existing project.

        Returns False (and writes nothing) when the project does not exist.
        """
        async with self.database.transaction() as conn:
            row = await conn.fetchrow(
                """
                UPDATE projects
                SET name = $2,
                    web_url = $3
                WHERE id = $1
                RETURNING id
                """,
                project_id,
                name,
                web_url,
            )
            if row is None:
                return False
            await self._replace_children(conn, project_id, commits=commits, issues=issues)
        return True
