"""Unit tests for the GitHubProvider class."""

import dataclasses
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from githubkit.auth import UnauthAuthStrategy
from githubkit.exception import RequestFailed

from forge_ops_mcp.configuration.models import ProviderConfig, ProviderType
from forge_ops_mcp.providers.client import BearerTokenAuthStrategy, get_github_client
from forge_ops_mcp.providers.errors import ProviderError
from forge_ops_mcp.providers.github import GitHubProvider


class DummyResponse:
    """A dummy response object to mock GitHub API responses."""

    def __init__(self, data: Any = None, status_code: int = 200, headers: dict[str, str] | None = None) -> None:
        """Initialize the dummy response with a JSON body and a status code."""
        self.status_code = status_code
        self.headers = headers or {}
        self.text = ""
        self._data = data

    def json(self) -> Any:
        """Return the JSON body."""
        return self._data


def make_provider() -> GitHubProvider:
    """Build a GitHub provider around a mocked githubkit client."""
    config = ProviderConfig(name="github", type=ProviderType.GITHUB, api_url="https://api.github.com", token="ghp_test")
    return GitHubProvider(config, MagicMock())


def make_request_failed(status_code: int, data: Any, headers: dict[str, str] | None = None) -> RequestFailed:
    """Build the exception githubkit raises for an error response."""
    response = MagicMock()
    response.status_code = status_code
    response.headers = headers or {}
    response.json.return_value = data
    return RequestFailed(response)


@pytest.mark.asyncio
async def test_list_repositories_for_user() -> None:
    """Test listing a user's repositories with GitHub pagination parameters."""
    provider = make_provider()
    provider.client.rest.repos.async_list_for_user = AsyncMock(
        return_value=DummyResponse([{"id": 1, "name": "alpha", "full_name": "alice/alpha", "owner": {"login": "alice"}}])
    )

    repositories = await provider.list_repositories("alice", 2, 10)

    assert repositories[0].full_name == "alice/alpha"
    assert repositories[0].owner.type == "User"
    provider.client.rest.repos.async_list_for_user.assert_awaited_once_with(username="alice", sort="updated", page=2, per_page=10)


@pytest.mark.asyncio
async def test_list_repositories_for_authenticated_user() -> None:
    """Test that omitting the username lists the authenticated user's repositories."""
    provider = make_provider()
    provider.client.rest.repos.async_list_for_authenticated_user = AsyncMock(return_value=DummyResponse([]))

    assert await provider.list_repositories() == []
    provider.client.rest.repos.async_list_for_authenticated_user.assert_awaited_once_with(sort="updated", page=1, per_page=30)


@pytest.mark.asyncio
async def test_get_repository_not_found() -> None:
    """Test that a githubkit 404 becomes a NOT_FOUND ProviderError."""
    provider = make_provider()
    provider.client.rest.repos.async_get = AsyncMock(side_effect=make_request_failed(404, {"message": "Not Found"}))

    with pytest.raises(ProviderError) as exc_info:
        await provider.get_repository("alice", "missing")

    assert exc_info.value.code == "NOT_FOUND"
    assert exc_info.value.message.startswith("github: ")
    assert exc_info.value.retryable is False


@pytest.mark.asyncio
async def test_rate_limited_is_retryable() -> None:
    """Test that a githubkit 429 is flagged retryable."""
    provider = make_provider()
    provider.client.rest.search.async_users = AsyncMock(side_effect=make_request_failed(429, {"message": "API rate limit exceeded"}))

    with pytest.raises(ProviderError) as exc_info:
        await provider.search_users("alice")

    assert exc_info.value.code == "RATE_LIMITED"
    assert exc_info.value.retryable is True


@pytest.mark.asyncio
async def test_unexpected_exception_is_unknown_error() -> None:
    """Test that exceptions unrelated to HTTP become UNKNOWN_ERROR."""
    provider = make_provider()
    provider.client.rest.users.async_get_authenticated = AsyncMock(side_effect=RuntimeError("boom"))

    with pytest.raises(ProviderError) as exc_info:
        await provider.get_current_user()

    assert exc_info.value.code == "UNKNOWN_ERROR"
    assert exc_info.value.message == "github: boom"


@pytest.mark.asyncio
async def test_create_branch_uses_source_sha() -> None:
    """Test that a branch is created as a git ref pointing at the source branch head."""
    provider = make_provider()
    provider.client.rest.repos.async_get_branch = AsyncMock(
        side_effect=[
            DummyResponse({"name": "main", "commit": {"sha": "base-sha"}}),
            DummyResponse({"name": "feature", "commit": {"sha": "base-sha"}}),
        ]
    )
    provider.client.rest.git.async_create_ref = AsyncMock(return_value=DummyResponse({"ref": "refs/heads/feature"}))

    branch = await provider.create_branch("alice", "alpha", "feature", "main")

    assert branch.name == "feature"
    provider.client.rest.git.async_create_ref.assert_awaited_once_with(owner="alice", repo="alpha", ref="refs/heads/feature", sha="base-sha")


@pytest.mark.asyncio
async def test_create_branch_missing_source() -> None:
    """Test that a missing source branch fails without creating a ref."""
    provider = make_provider()
    provider.client.rest.repos.async_get_branch = AsyncMock(side_effect=make_request_failed(404, {"message": "Branch not found"}))
    provider.client.rest.git.async_create_ref = AsyncMock()

    with pytest.raises(ProviderError) as exc_info:
        await provider.create_branch("alice", "alpha", "feature", "nope")

    assert exc_info.value.code == "NOT_FOUND"
    provider.client.rest.git.async_create_ref.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_branch_deletes_ref() -> None:
    """Test that deleting a branch deletes its heads ref."""
    provider = make_provider()
    provider.client.rest.git.async_delete_ref = AsyncMock()

    assert await provider.delete_branch("alice", "alpha", "feature") is True
    provider.client.rest.git.async_delete_ref.assert_awaited_once_with(owner="alice", repo="alpha", ref="heads/feature")


@pytest.mark.asyncio
async def test_create_annotated_tag() -> None:
    """Test that a tag with a message creates a tag object before the ref."""
    provider = make_provider()
    provider.client.rest.repos.async_get_commit = AsyncMock(return_value=DummyResponse({"sha": "commit-sha"}))
    provider.client.rest.git.async_create_tag = AsyncMock(return_value=DummyResponse({"sha": "tag-object-sha"}))
    provider.client.rest.git.async_create_ref = AsyncMock(
        return_value=DummyResponse({"ref": "refs/tags/v1.0.0", "object": {"sha": "tag-object-sha", "url": "https://api/tag"}})
    )

    tag = await provider.create_tag("alice", "alpha", "v1.0.0", "main", "First release")

    assert tag.name == "v1.0.0"
    assert tag.commit.sha == "tag-object-sha"
    provider.client.rest.git.async_create_tag.assert_awaited_once_with(
        owner="alice",
        repo="alpha",
        data={"tag": "v1.0.0", "message": "First release", "object": "commit-sha", "type": "commit"},
    )
    provider.client.rest.git.async_create_ref.assert_awaited_once_with(owner="alice", repo="alpha", ref="refs/tags/v1.0.0", sha="tag-object-sha")


@pytest.mark.asyncio
async def test_create_lightweight_tag() -> None:
    """Test that a tag without a message points the ref at the commit."""
    provider = make_provider()
    provider.client.rest.repos.async_get_commit = AsyncMock(return_value=DummyResponse({"sha": "commit-sha"}))
    provider.client.rest.git.async_create_tag = AsyncMock()
    provider.client.rest.git.async_create_ref = AsyncMock(return_value=DummyResponse({"ref": "refs/tags/v1", "object": {"sha": "commit-sha"}}))

    tag = await provider.create_tag("alice", "alpha", "v1", "main")

    assert tag.commit.sha == "commit-sha"
    provider.client.rest.git.async_create_tag.assert_not_awaited()


@pytest.mark.asyncio
async def test_list_issues_skips_pull_requests() -> None:
    """Test that pull requests returned by the issues endpoint are left out."""
    provider = make_provider()
    provider.client.rest.issues.async_list_for_repo = AsyncMock(
        return_value=DummyResponse(
            [
                {"number": 1, "title": "Bug", "labels": [{"name": "bug", "color": "f00"}, "plain"]},
                {"number": 2, "title": "PR", "pull_request": {"url": "https://api/pulls/2"}},
            ]
        )
    )

    issues = await provider.list_issues("alice", "alpha", "all")

    assert [issue.number for issue in issues] == [1]
    assert issues[0].labels is not None
    assert [label.name for label in issues[0].labels] == ["bug", "plain"]


@pytest.mark.asyncio
async def test_merge_pull_request() -> None:
    """Test merging with an explicit merge method."""
    provider = make_provider()
    provider.client.rest.pulls.async_merge = AsyncMock(return_value=DummyResponse({"merged": True, "sha": "m1"}))

    assert await provider.merge_pull_request("alice", "alpha", 4, "rebase") is True
    provider.client.rest.pulls.async_merge.assert_awaited_once_with(owner="alice", repo="alpha", pull_number=4, merge_method="rebase")


@pytest.mark.asyncio
async def test_create_webhook_payload() -> None:
    """Test the GitHub webhook creation payload."""
    provider = make_provider()
    provider.client.rest.repos.async_create_webhook = AsyncMock(
        return_value=DummyResponse({"id": 5, "name": "web", "active": True, "events": ["push"], "config": {"url": "https://hook"}})
    )

    webhook = await provider.create_webhook("alice", "alpha", "https://hook", ["push"], secret="s3cret")

    assert webhook.id == 5
    provider.client.rest.repos.async_create_webhook.assert_awaited_once_with(
        owner="alice",
        repo="alpha",
        data={
            "name": "web",
            "config": {"url": "https://hook", "content_type": "json", "secret": "s3cret"},
            "events": ["push"],
            "active": True,
        },
    )


def test_normalize_commit_falls_back_to_account_login() -> None:
    """Test that an author without a name uses the GitHub account login."""
    provider = make_provider()
    commit = provider.normalize_commit(
        {
            "sha": "abc",
            "commit": {"message": "Fix", "author": {"email": "a@example.com"}, "committer": {"name": "GitHub"}},
            "author": {"login": "alice"},
        }
    )
    assert commit.message == "Fix"
    assert commit.author.name == "alice"
    assert commit.committer.name == "GitHub"


def test_normalize_organization_maps_blog_to_website() -> None:
    """Test that the GitHub organization blog becomes the website."""
    provider = make_provider()
    organization = provider.normalize_organization({"id": 1, "login": "acme", "blog": "https://acme.test"})
    assert organization.website == "https://acme.test"
    assert organization.raw["blog"] == "https://acme.test"


@pytest.mark.asyncio
async def test_token_is_sent_as_bearer() -> None:
    """Test that requests carry the token with the Bearer scheme."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"id": 1, "login": "alice"})

    config = ProviderConfig(name="github", type=ProviderType.GITHUB, api_url="https://api.github.com", token="t0k")
    client = get_github_client(config)
    client.config = dataclasses.replace(client.config, async_transport=httpx.MockTransport(handler))

    user = await GitHubProvider(config, client).get_current_user()

    assert isinstance(client.auth, BearerTokenAuthStrategy)
    assert user.login == "alice"
    assert requests[0].headers["Authorization"] == "Bearer t0k"


def test_anonymous_client_sends_no_token() -> None:
    """Test that a provider without a token uses unauthenticated access."""
    config = ProviderConfig(name="github", type=ProviderType.GITHUB, api_url="https://api.github.com")
    client = get_github_client(config)
    assert isinstance(client.auth, UnauthAuthStrategy)


@pytest.mark.asyncio
async def test_get_file_strips_slashes() -> None:
    """Test that leading and trailing slashes are removed from file paths."""
    provider = make_provider()
    provider.client.rest.repos.async_get_content = AsyncMock(return_value=DummyResponse({"name": "README.md", "path": "README.md", "type": "file"}))

    file = await provider.get_file("alice", "alpha", "/README.md")

    assert file.path == "README.md"
    provider.client.rest.repos.async_get_content.assert_awaited_once_with(owner="alice", repo="alpha", path="README.md")


@pytest.mark.asyncio
async def test_get_file_on_directory() -> None:
    """Test that reading a directory as a file is reported as a bad request."""
    provider = make_provider()
    provider.client.rest.repos.async_get_content = AsyncMock(
        return_value=DummyResponse([{"name": "a.py", "path": "src/a.py", "type": "file"}])
    )

    with pytest.raises(ProviderError) as exc_info:
        await provider.get_file("alice", "alpha", "src")

    assert exc_info.value.code == "BAD_REQUEST"
    assert exc_info.value.message == "github: 'src' is a directory; use action 'list'"
    assert exc_info.value.retryable is False


NORMALIZER_CASES: list[tuple[str, dict[str, Any], dict[str, Any]]] = [
    (
        "normalize_repository",
        {
            "id": 1,
            "name": "alpha",
            "full_name": "acme/alpha",
            "description": "Alpha project",
            "private": True,
            "html_url": "https://github.com/acme/alpha",
            "clone_url": "https://github.com/acme/alpha.git",
            "default_branch": "main",
            "created_at": "2024-01-01T00:00:00Z",
            "updated_at": "2024-01-02T00:00:00Z",
            "owner": {"id": 9, "login": "acme", "type": "Organization"},
        },
        {
            "id": 1,
            "name": "alpha",
            "full_name": "acme/alpha",
            "description": "Alpha project",
            "private": True,
            "html_url": "https://github.com/acme/alpha",
            "clone_url": "https://github.com/acme/alpha.git",
            "default_branch": "main",
            "created_at": "2024-01-01T00:00:00Z",
            "updated_at": "2024-01-02T00:00:00Z",
            "owner": {"login": "acme", "type": "Organization"},
        },
    ),
    (
        "normalize_branch",
        {"name": "main", "commit": {"sha": "abc123", "url": "https://api.github.com/commits/abc123"}, "protected": True},
        {"name": "main", "commit": {"sha": "abc123", "url": "https://api.github.com/commits/abc123"}, "protected": True},
    ),
    (
        "normalize_file",
        {
            "name": "README.md",
            "path": "docs/README.md",
            "sha": "f00",
            "size": 12,
            "url": "https://api.github.com/contents/docs/README.md",
            "html_url": "https://github.com/acme/alpha/blob/main/docs/README.md",
            "git_url": "https://api.github.com/git/blobs/f00",
            "download_url": "https://raw.githubusercontent.com/acme/alpha/main/docs/README.md",
            "type": "file",
            "content": "SGVsbG8=",
            "encoding": "base64",
        },
        {
            "name": "README.md",
            "path": "docs/README.md",
            "sha": "f00",
            "size": 12,
            "url": "https://api.github.com/contents/docs/README.md",
            "html_url": "https://github.com/acme/alpha/blob/main/docs/README.md",
            "git_url": "https://api.github.com/git/blobs/f00",
            "download_url": "https://raw.githubusercontent.com/acme/alpha/main/docs/README.md",
            "type": "file",
            "content": "SGVsbG8=",
            "encoding": "base64",
        },
    ),
    (
        "normalize_commit",
        {
            "sha": "abc123",
            "url": "https://api.github.com/commits/abc123",
            "html_url": "https://github.com/acme/alpha/commit/abc123",
            "commit": {
                "message": "Fix typo",
                "author": {"name": "Alice", "email": "alice@example.com", "date": "2024-01-01T00:00:00Z"},
                "committer": {"name": "Bob", "email": "bob@example.com", "date": "2024-01-02T00:00:00Z"},
            },
        },
        {
            "sha": "abc123",
            "message": "Fix typo",
            "author": {"name": "Alice", "email": "alice@example.com", "date": "2024-01-01T00:00:00Z"},
            "committer": {"name": "Bob", "email": "bob@example.com", "date": "2024-01-02T00:00:00Z"},
            "url": "https://api.github.com/commits/abc123",
            "html_url": "https://github.com/acme/alpha/commit/abc123",
        },
    ),
    (
        "normalize_issue",
        {
            "id": 10,
            "number": 3,
            "title": "Crash on start",
            "body": "Steps to reproduce",
            "state": "closed",
            "user": {"id": 7, "login": "alice"},
            "assignees": [{"id": 8, "login": "bob"}],
            "labels": [{"id": 1, "name": "bug", "color": "d73a4a"}],
            "created_at": "2024-01-01T00:00:00Z",
            "updated_at": "2024-01-02T00:00:00Z",
            "closed_at": "2024-01-03T00:00:00Z",
        },
        {
            "id": 10,
            "number": 3,
            "title": "Crash on start",
            "body": "Steps to reproduce",
            "state": "closed",
            "user": {"login": "alice", "id": 7},
            "assignees": [{"login": "bob", "id": 8}],
            "labels": [{"name": "bug", "color": "d73a4a"}],
            "created_at": "2024-01-01T00:00:00Z",
            "updated_at": "2024-01-02T00:00:00Z",
            "closed_at": "2024-01-03T00:00:00Z",
        },
    ),
    (
        "normalize_comment",
        {
            "id": 20,
            "body": "Looks good",
            "user": {"id": 8, "login": "bob"},
            "html_url": "https://github.com/acme/alpha/issues/3#issuecomment-20",
            "created_at": "2024-01-01T00:00:00Z",
            "updated_at": "2024-01-02T00:00:00Z",
        },
        {
            "id": 20,
            "body": "Looks good",
            "user": {"login": "bob", "id": 8},
            "html_url": "https://github.com/acme/alpha/issues/3#issuecomment-20",
            "created_at": "2024-01-01T00:00:00Z",
            "updated_at": "2024-01-02T00:00:00Z",
        },
    ),
    (
        "normalize_pull_request",
        {
            "id": 30,
            "number": 7,
            "title": "Add feature",
            "body": "Implements the feature",
            "state": "open",
            "user": {"id": 7, "login": "alice"},
            "head": {"ref": "feature", "sha": "h1", "repo": {"id": 2, "name": "alpha", "full_name": "alice/alpha"}},
            "base": {"ref": "main", "sha": "b1", "repo": {"id": 1, "name": "alpha", "full_name": "acme/alpha"}},
            "created_at": "2024-01-01T00:00:00Z",
            "updated_at": "2024-01-02T00:00:00Z",
            "closed_at": None,
            "merged_at": None,
            "mergeable": True,
        },
        {
            "id": 30,
            "number": 7,
            "title": "Add feature",
            "body": "Implements the feature",
            "state": "open",
            "user": {"login": "alice", "id": 7},
            "head": {"ref": "feature", "sha": "h1", "repo": {"name": "alpha", "full_name": "alice/alpha"}},
            "base": {"ref": "main", "sha": "b1", "repo": {"name": "alpha", "full_name": "acme/alpha"}},
            "created_at": "2024-01-01T00:00:00Z",
            "updated_at": "2024-01-02T00:00:00Z",
            "closed_at": None,
            "merged_at": None,
            "mergeable": True,
        },
    ),
    (
        "normalize_release",
        {
            "id": 40,
            "tag_name": "v1.0.0",
            "name": "First release",
            "body": "Notes",
            "draft": False,
            "prerelease": True,
            "created_at": "2024-01-01T00:00:00Z",
            "published_at": "2024-01-02T00:00:00Z",
            "html_url": "https://github.com/acme/alpha/releases/tag/v1.0.0",
            "tarball_url": "https://api.github.com/tarball/v1.0.0",
            "zipball_url": "https://api.github.com/zipball/v1.0.0",
        },
        {
            "id": 40,
            "tag_name": "v1.0.0",
            "name": "First release",
            "body": "Notes",
            "draft": False,
            "prerelease": True,
            "created_at": "2024-01-01T00:00:00Z",
            "published_at": "2024-01-02T00:00:00Z",
            "html_url": "https://github.com/acme/alpha/releases/tag/v1.0.0",
            "tarball_url": "https://api.github.com/tarball/v1.0.0",
            "zipball_url": "https://api.github.com/zipball/v1.0.0",
        },
    ),
    (
        "normalize_tag",
        {
            "name": "v1.0.0",
            "commit": {"sha": "abc123", "url": "https://api.github.com/commits/abc123"},
            "zipball_url": "https://api.github.com/zipball/v1.0.0",
            "tarball_url": "https://api.github.com/tarball/v1.0.0",
        },
        {
            "name": "v1.0.0",
            "commit": {"sha": "abc123", "url": "https://api.github.com/commits/abc123"},
            "zipball_url": "https://api.github.com/zipball/v1.0.0",
            "tarball_url": "https://api.github.com/tarball/v1.0.0",
        },
    ),
    (
        "normalize_user",
        {
            "id": 7,
            "login": "alice",
            "name": "Alice Doe",
            "email": "alice@example.com",
            "avatar_url": "https://avatars.githubusercontent.com/u/7",
            "html_url": "https://github.com/alice",
            "type": "User",
        },
        {
            "id": 7,
            "login": "alice",
            "name": "Alice Doe",
            "email": "alice@example.com",
            "avatar_url": "https://avatars.githubusercontent.com/u/7",
            "html_url": "https://github.com/alice",
            "type": "User",
        },
    ),
    (
        "normalize_organization",
        {
            "id": 9,
            "login": "acme",
            "name": "Acme Inc",
            "description": "Tools",
            "avatar_url": "https://avatars.githubusercontent.com/u/9",
            "html_url": "https://github.com/acme",
            "location": "Berlin",
            "blog": "https://acme.test",
            "public_repos": 12,
            "public_members": 3,
        },
        {
            "id": 9,
            "login": "acme",
            "name": "Acme Inc",
            "description": "Tools",
            "avatar_url": "https://avatars.githubusercontent.com/u/9",
            "html_url": "https://github.com/acme",
            "location": "Berlin",
            "website": "https://acme.test",
            "public_repos": 12,
            "public_members": 3,
        },
    ),
    (
        "normalize_webhook",
        {
            "id": 4,
            "type": "Repository",
            "name": "web",
            "active": True,
            "events": ["push", "pull_request"],
            "config": {"url": "https://hook.test", "content_type": "json", "secret": "********", "insecure_ssl": "0"},
            "created_at": "2024-01-01T00:00:00Z",
            "updated_at": "2024-01-02T00:00:00Z",
        },
        {
            "id": 4,
            "type": "Repository",
            "name": "web",
            "active": True,
            "events": ["push", "pull_request"],
            "config": {"url": "https://hook.test", "content_type": "json", "secret": "********"},
            "created_at": "2024-01-01T00:00:00Z",
            "updated_at": "2024-01-02T00:00:00Z",
        },
    ),
]


@pytest.mark.parametrize("normalizer,payload,expected", NORMALIZER_CASES, ids=[case[0] for case in NORMALIZER_CASES])
def test_normalizers_keep_mapped_fields(normalizer: str, payload: dict[str, Any], expected: dict[str, Any]) -> None:
    """Test that each normalizer keeps every mapped value and the untouched payload."""
    entity = getattr(make_provider(), normalizer)(payload)

    assert entity.model_dump(exclude={"raw"}) == expected
    assert entity.raw == payload
