"""
User API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import Field

from gitminer.core.schemas import GitMinerModel


class UserPayload(GitMinerModel):
    """
    User as embedded in a mined issue (author/assignee). Its id is kept.
    """

    id: str | None = None
    username: str | None = None
    name: str | None = None
    avatar_url: str | None = None
    web_url: str | None = None


class UserCreateRequest(UserPayload):
    # Any client id is ignored on create.
    username: str = Field(..., min_length=1, max_length=255)


class UserResponse(GitMinerModel):
    id: str
    username: str | None = None
    name: str | None = None
    avatar_url: str | None = None
    web_url: str | None = None
