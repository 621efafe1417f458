"""
Comment persistence (raw SQL).

Comments have no HTTP create; they are written together with their issue
(see `issues.repository.replace_project_issues`).
"""

from __future__ import annotations

from typing import Any, Iterable

import asyncpg

from gitminer.core.paging import sortable_fields
from gitminer.core.repository import ResourceRepository, id_or_new

COMMENT_COLUMNS = ("id", "body", "author", "created_at", "updated_at")


class CommentRepository(ResourceRepository):
    table = "comments"
    columns = COMMENT_COLUMNS
    filter_column = "author"
    sortable = sortable_fields(*COMMENT_COLUMNS)

    async def list_for_issues(self, issue_ids: Iterable[str]) -> dict[str, list[dict[str, Any]]]:
        """
        Comments grouped by issue id, each group in natural order (created_at, id).
        """
        ids = sorted(set(issue_ids))
        grouped: dict[str, list[dict[str, Any]]] = {issue_id: [] for issue_id in ids}
        if not ids:
            return grouped
        rows = await self.database.fetch_all(
            """
            SELECT issue_id, id, body, author, created_at, updated_at
            FROM comments
            WHERE issue_id = ANY($1::text[])
            ORDER BY issue_id, created_at NULLS FIRST, id
            """,
            ids,
        )
        for row in rows:
            issue_id = str(row.pop("issue_id"))
            grouped.setdefault(issue_id, []).append(row)
        return grouped


async def replace_issue_comments(
    conn: asyncpg.Connection,
    issue_id: str,
    comments: list[dict[str, Any]],
) -> list[str]:
    """
    Make `comments` the issue's comment sequence inside an open transaction.

    A comment belongs to exactly one issue, so unlisted comments are deleted.
    """
    records = [
        (
            id_or_new(comment.get("id")),
            issue_id,
            comment.get("body"),
            comment.get("author"),
            comment.get("created_at"),
            comment.get("updated_at"),
        )
        for comment in comments
    ]
    if records:
        await conn.executemany(
            """
            INSERT INTO comments (id, issue_id, body, author, created_at, updated_at)
            VALUES ($1, $2, $3, $4, $5, $6)
            ON CONFLICT (id) DO UPDATE
            SET issue_id = EXCLUDED.issue_id,
                body = EXCLUDED.body,
                author = EXCLUDED.author,
                created_at = EXCLUDED.created_at,
                updated_at = EXCLUDED.updated_at
            """,
            records,
        )

    kept_ids = [record[0] for record in records]
    await conn.execute(
        """
        DELETE FROM comments
        WHERE issue_id = $1
          AND NOT (id = ANY($2::text[]))
        """,
        issue_id,
        kept_ids,
    )
    return kept_ids
