"""Pydantic models for normalized VCS entities.

Every entity keeps the untouched upstream payload in ``raw`` so callers can
reach provider-specific fields that are not part of the common shape.
"""

from typing import Any

from pydantic import BaseModel, Field


class NormalizedModel(BaseModel):
    """Base class for normalized entities."""

    raw: dict[str, Any] = Field(default_factory=dict)


class OwnerModel(BaseModel):
    """Owner of a repository."""

    login: str | None = None
    type: str | None = None


class UserRefModel(BaseModel):
    """Short reference to a user, as embedded in issues and pull requests."""

    login: str | None = None
    id: int | None = None


class LabelRefModel(BaseModel):
    """Short reference to a label."""

    name: str | None = None
    color: str | None = None


class CommitRefModel(BaseModel):
    """Short reference to a commit."""

    sha: str | None = None
    url: str | None = None


class SignatureModel(BaseModel):
    """Author or committer of a commit."""

    name: str | None = None
    email: str | None = None
    date: str | None = None


class RepositoryRefModel(BaseModel):
    """Short reference to a repository."""

    name: str | None = None
    full_name: str | None = None


class PullRequestRefModel(BaseModel):
    """Head or base of a pull request."""

    ref: str | None = None
    sha: str | None = None
    repo: RepositoryRefModel = Field(default_factory=RepositoryRefModel)


class WebhookConfigModel(BaseModel):
    """Delivery configuration of a webhook."""

    url: str | None = None
    content_type: str | None = None
    secret: str | None = None


class Repository(NormalizedModel):
    """Normalized repository."""

    id: int | None = None
    name: str | None = None
    full_name: str | None = None
    description: str | None = None
    private: bool | None = None
    html_url: str | None = None
    clone_url: str | None = None
    default_branch: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    owner: OwnerModel = Field(default_factory=OwnerModel)


class Branch(NormalizedModel):
    """Normalized branch."""

    name: str | None = None
    commit: CommitRefModel = Field(default_factory=CommitRefModel)
    protected: bool | None = None


class FileContent(NormalizedModel):
    """Normalized file or directory entry."""

    name: str | None = None
    path: str | None = None
    sha: str | None = None
    size: int | None = None
    url: str | None = None
    html_url: str | None = None
    git_url: str | None = None
    download_url: str | None = None
    type: str | None = None
    content: str | None = None
    encoding: str | None = None


class Commit(NormalizedModel):
    """Normalized commit."""

    sha: str | None = None
    message: str | None = None
    author: SignatureModel = Field(default_factory=SignatureModel)
    committer: SignatureModel = Field(default_factory=SignatureModel)
    url: str | None = None
    html_url: str | None = None


class Issue(NormalizedModel):
    """Normalized issue."""

    id: int | None = None
    number: int | None = None
    title: str | None = None
    body: str | None = None
    state: str | None = None
    user: UserRefModel = Field(default_factory=UserRefModel)
    assignees: list[UserRefModel] | None = None
    labels: list[LabelRefModel] | None = None
    created_at: str | None = None
    updated_at: str | None = None
    closed_at: str | None = None


class Comment(NormalizedModel):
    """Normalized issue or pull request comment."""

    id: int | None = None
    body: str | None = None
    user: UserRefModel = Field(default_factory=UserRefModel)
    html_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class PullRequest(NormalizedModel):
    """Normalized pull request."""

    id: int | None = None
    number: int | None = None
    title: str | None = None
    body: str | None = None
    state: str | None = None
    user: UserRefModel = Field(default_factory=UserRefModel)
    head: PullRequestRefModel = Field(default_factory=PullRequestRefModel)
    base: PullRequestRefModel = Field(default_factory=PullRequestRefModel)
    created_at: str | None = None
    updated_at: str | None = None
    closed_at: str | None = None
    merged_at: str | None = None
    mergeable: bool | None = None


class Release(NormalizedModel):
    """Normalized release."""

    id: int | None = None
    tag_name: str | None = None
    name: str | None = None
    body: str | None = None
    draft: bool | None = None
    prerelease: bool | None = None
    created_at: str | None = None
    published_at: str | None = None
    html_url: str | None = None
    tarball_url: str | None = None
    zipball_url: str | None = None


class Tag(NormalizedModel):
    """Normalized tag."""

    name: str | None = None
    commit: CommitRefModel = Field(default_factory=CommitRefModel)
    zipball_url: str | None = None
    tarball_url: str | None = None


class User(NormalizedModel):
    """Normalized user."""

    id: int | None = None
    login: str | None = None
    name: str | None = None
    email: str | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    type: str | None = None


class Organization(NormalizedModel):
    """Normalized organization."""

    id: int | None = None
    login: str | None = None
    name: str | None = None
    description: str | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    location: str | None = None
    website: str | None = None
    public_repos: int | None = None
    public_members: int | None = None


class Webhook(NormalizedModel):
    """Normalized webhook."""

    id: int | None = None
    type: str | None = None
    name: str | None = None
    active: bool | None = None
    events: list[str] | None = None
    config: WebhookConfigModel = Field(default_factory=WebhookConfigModel)
    created_at: str | None = None
    updated_at: str | None = None
