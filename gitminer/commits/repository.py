"""
Commit persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any, Iterable

import asyncpg

from gitminer.core.paging import sortable_fields
from gitminer.core.repository import IdPolicy, ResourceRepository, assign_id, id_or_new

COMMIT_COLUMNS = (
    "id",
    "title",
    "message",
    "author_name",
    "author_email",
    "authored_date",
    "web_url",
)


class CommitRepository(ResourceRepository):
    table = "commits"
    columns = COMMIT_COLUMNS
    filter_column = "author_name"
    sortable = sortable_fields(*COMMIT_COLUMNS)
    id_policy = IdPolicy.STORE_ASSIGNED

    async def create(
        self,
        *,
        title: str | None,
        message: str | None = None,
        author_name: str | None = None,
        author_email: str | None = None,
        authored_date: str | None = None,
        web_url: str | None = None,
    ) -> dict[str, Any]:
        row = await self.database.fetch_one(
            """
            INSERT INTO commits (id, title, message, author_name, author_email, authored_date, web_url)
            VALUES ($1, $2, $3, $4, $5, $6, $7)
            RETURNING id, title, message, author_name, author_email, authored_date, web_url
            """,
            assign_id(self.id_policy),
            title,
            message,
            author_name,
            author_email,
            authored_date,
            web_url,
        )
        if row is None:
            raise RuntimeError("Failed to create commit.")
        return row

    async def list_for_projects(self, project_ids: Iterable[str]) -> dict[str, list[dict[str, Any]]]:
        """
        Commits grouped by project id, each group in stored order.
        """
        ids = sorted(set(project_ids))
        grouped: dict[str, list[dict[str, Any]]] = {project_id: [] for project_id in ids}
        if not ids:
            return grouped
        rows = await self.database.fetch_all(
            """
            SELECT project_id, id, title, message, author_name, author_email, authored_date, web_url
            FROM commits
            WHERE project_id = ANY($1::text[])
            ORDER BY project_id, position, id
            """,
            ids,
        )
        for row in rows:
            project_id = str(row.pop("project_id"))
            grouped.setdefault(project_id, []).append(row)
        return grouped


async def replace_project_commits(
    conn: asyncpg.Connection,
    project_id: str,
    commits: list[dict[str, Any]],
) -> list[str]:
    """
    Make `commits` the project's commit collection inside an open transaction.

    Listed commits are upserted in order; commits no longer listed are detached
    from the project but kept.
    """
    records = [
        (
            id_or_new(commit.get("id")),
            project_id,
            position,
            commit.get("title"),
            commit.get("message"),
            commit.get("author_name"),
            commit.get("author_email"),
            commit.get("authored_date"),
            commit.get("web_url"),
        )
        for position, commit in enumerate(commits)
    ]
    if records:
        await conn.executemany(
            """
            INSERT INTO commits (
                id, project_id, position, title, message,
                author_name, author_email, authored_date, web_url
            )
            VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
            ON CONFLICT (id) DO UPDATE
            SET project_id = EXCLUDED.project_id,
                position = EXCLUDED.position,
                title = EXCLUDED.title,
                message = EXCLUDED.message,
                author_name = EXCLUDED.author_name,
                author_email = EXCLUDED.author_email,
                authored_date = EXCLUDED.authored_date,
                web_url = EXCLUDED.web_url
            """,
            records,
        )

    kept_ids = [record[0] for record in records]
    await conn.execute(
        """
        UPDATE commits
        SET project_id = NULL
        WHERE project_id = $1
          AND NOT (id = ANY($2::text[]))
        """,
        project_id,
        kept_ids,
    )
    return kept_ids
