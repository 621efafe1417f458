"""
Commit API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import Field

from gitminer.core.schemas import GitMinerModel


class CommitPayload(GitMinerModel):
    """
    Commit as embedded in a project body. Mined ids are kept.
    """

    id: str | None = None
    title: str | None = None
    message: str | None = None
    author_name: str | None = None
    author_email: str | None = None
    authored_date: str | None = None
    web_url: str | None = None


class CommitCreateRequest(CommitPayload):
    title: str = Field(..., min_length=1)


class CommitResponse(GitMinerModel):
    id: str
    title: str | None = None
    message: str | None = None
    author_name: str | None = None
    author_email: str | None = None
    authored_date: str | None = None
    web_url: str | None = None
