"""
Comment API schemas.
"""

from __future__ import annotations

from gitminer.core.schemas import GitMinerModel


class CommentPayload(GitMinerModel):
    id: str | None = None
    body: str | None = None
    author: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class CommentResponse(GitMinerModel):
    id: str
    body: str | None = None
    author: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
