"""
Issue API schemas.
"""

from __future__ import annotations

from pydantic import Field

from gitminer.comments.schemas import CommentPayload, CommentResponse
from gitminer.core.schemas import GitMinerModel
from gitminer.users.schemas import UserPayload, UserResponse


class IssuePayload(GitMinerModel):
    """
    Issue as embedded in a project body, with its author/assignee and comments.
    """

    id: str | None = None
    title: str | None = None
    description: str | None = None
    state: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    closed_at: str | None = None
    labels: list[str] = Field(default_factory=list)
    votes: int | None = None
    web_url: str | None = None
    author: UserPayload | None = None
    assignee: UserPayload | None = None
    comments: list[CommentPayload] = Field(default_factory=list)


class IssueResponse(GitMinerModel):
    id: str
    title: str | None = None
    description: str | None = None
    state: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    closed_at: str | None = None
    labels: list[str] = Field(default_factory=list)
    votes: int | None = None
    web_url: str | None = None
    author: UserResponse | None = None
    assignee: UserResponse | None = None
    comments: list[CommentResponse] = Field(default_factory=list)
