"""
Issue persistence (raw SQL).

An issue row carries `author_id`/`assignee_id`; `hydrate` swaps them for the
user records and attaches the issue's comments.
"""

from __future__ import annotations

from typing import Any, Iterable

import asyncpg

from gitminer.comments.repository import CommentRepository, replace_issue_comments
from gitminer.core.paging import sortable_fields
from gitminer.core.repository import ResourceRepository, id_or_new
from gitminer.users.repository import UserRepository, upsert_user

ISSUE_FIELDS = (
    "id",
    "title",
    "description",
    "state",
    "created_at",
    "updated_at",
    "closed_at",
    "labels",
    "votes",
    "web_url",
)


class IssueRepository(ResourceRepository):
    table = "issues"
    columns = ISSUE_FIELDS + ("author_id", "assignee_id")
    filter_column = "state"
    sortable = sortable_fields(*(field for field in ISSUE_FIELDS if field != "labels"))

    async def hydrate(self, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        if not rows:
            return rows

        user_ids = [row.get("author_id") for row in rows] + [row.get("assignee_id") for row in rows]
        users = await UserRepository(self.database).get_many(uid for uid in user_ids if uid)
        comments = await CommentRepository(self.database).list_for_issues(str(row["id"]) for row in rows)

        issues: list[dict[str, Any]] = []
        for row in rows:
            issue = {field: row.get(field) for field in ISSUE_FIELDS}
            issue["labels"] = list(row.get("labels") or [])
            issue["author"] = users.get(row.get("author_id") or "")
            issue["assignee"] = users.get(row.get("assignee_id") or "")
            issue["comments"] = comments.get(str(row["id"]), [])
            issues.append(issue)
        return issues

    async def list_for_projects(self, project_ids: Iterable[str]) -> dict[str, list[dict[str, Any]]]:
        """
        Hydrated issues grouped by project id, each group in stored order.
        """
        ids = sorted(set(project_ids))
        grouped: dict[str, list[dict[str, Any]]] = {project_id: [] for project_id in ids}
        if not ids:
            return grouped
        rows = await self.database.fetch_all(
            f"""
            SELECT project_id, {', '.join(self.columns)}
            FROM issues
            WHERE project_id = ANY($1::text[])
            ORDER BY project_id, position, id
            """,
            ids,
        )
        owners = [str(row.pop("project_id")) for row in rows]
        for project_id, issue in zip(owners, await self.hydrate(rows)):
            grouped.setdefault(project_id, []).append(issue)
        return grouped


async def replace_project_issues(
    conn: asyncpg.Connection,
    project_id: str,
    issues: list[dict[str, Any]],
) -> list[str]:
    """
    Make `issues` the project's issue collection inside an open transaction.

    Authors/assignees are upserted as users and each issue's comments are
    replaced. Issues no longer listed are detached from the project but kept.
    """
    kept_ids: list[str] = []
    for position, issue in enumerate(issues):
        issue_id = id_or_new(issue.get("id"))
        author_id = await upsert_user(conn, issue.get("author"))
        assignee_id = await upsert_user(conn, issue.get("assignee"))
        await conn.execute(
            """
            INSERT INTO issues (
                id, project_id, position, title, description, state,
                created_at, updated_at, closed_at, labels, votes, web_url,
                author_id, assignee_id
            )
            VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12, $13, $14)
            ON CONFLICT (id) DO UPDATE
            SET project_id = EXCLUDED.project_id,
                position = EXCLUDED.position,
                title = EXCLUDED.title,
                description = EXCLUDED.description,
                state = EXCLUDED.state,
                created_at = EXCLUDED.created_at,
                updated_at = EXCLUDED.updated_at,
                closed_at = EXCLUDED.closed_at,
                labels = EXCLUDED.labels,
                votes = EXCLUDED.votes,
                web_url = EXCLUDED.web_url,
                author_id = EXCLUDED.author_id,
                assignee_id = EXCLUDED.assignee_id
            """,
            issue_id,
            project_id,
            position,
            issue.get("title"),
            issue.get("description"),
            issue.get("state"),
            issue.get("created_at"),
            issue.get("updated_at"),
            issue.get("closed_at"),
            list(issue.get("labels") or []),
            issue.get("votes"),
            issue.get("web_url"),
            author_id,
            assignee_id,
        )
        await replace_issue_comments(conn, issue_id, list(issue.get("comments") or []))
        kept_ids.append(issue_id)

    await conn.execute(
        """
        UPDATE issues
        SET project_id = NULL
        WHERE project_id = $1
          AND NOT (id = ANY($2::text[]))
        """,
        project_id,
        kept_ids,
    )
    return kept_ids
