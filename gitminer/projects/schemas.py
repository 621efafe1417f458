"""
Project API schemas.
"""

from __future__ import annotations

from pydantic import Field

from gitminer.commits.schemas import CommitPayload, CommitResponse
from gitminer.core.schemas import GitMinerModel
from gitminer.issues.schemas import IssuePayload, IssueResponse


class ProjectUpdateRequest(GitMinerModel):
    # The path id wins on update; a body id is accepted and ignored.
    id: str | None = None
    name: str = Field(..., min_length=1, max_length=500)
    web_url: str | None = None
    commits: list[CommitPayload] = Field(default_factory=list)
    issues: list[IssuePayload] = Field(default_factory=list)


class ProjectCreateRequest(ProjectUpdateRequest):
    # Projects keep the caller's id; re-posting an id overwrites that project.
    id: str = Field(..., min_length=1, max_length=255, pattern=r"\S")


class ProjectResponse(GitMinerModel):
    id: str
    name: str
    web_url: str | None = None
    commits: list[CommitResponse] = Field(default_factory=list)
    issues: list[IssueResponse] = Field(default_factory=list)
