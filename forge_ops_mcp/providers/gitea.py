"""Gitea provider backed by the Gitea REST API v1."""

import base64
from typing import Any, Self
from urllib.parse import quote

import httpx
import structlog

from forge_ops_mcp.configuration.models import ProviderConfig

from .abc import IssueState, MergeMethod, PullRequestState, VcsProviderBase
from .client import get_gitea_client
from .errors import ProviderError, directory_error, error_from_response, network_error, translate_provider_errors, unknown_error
from .models import (
    Branch,
    Comment,
    Commit,
    FileContent,
    Issue,
    Organization,
    PullRequest,
    Release,
    Repository,
    Tag,
    User,
    Webhook,
)

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def _login(data: dict[str, Any] | None) -> str | None:
    """Gitea exposes ``username`` where GitHub exposes ``login``."""
    if not data:
        return None
    return data.get("username") or data.get("login")


def _user_ref(data: dict[str, Any] | None) -> dict[str, Any]:
    data = data or {}
    return {"login": _login(data), "id": data.get("id")}


def _pull_request_ref(data: dict[str, Any] | None) -> dict[str, Any]:
    data = data or {}
    repo = data.get("repo") or {}
    return {
        "ref": data.get("ref"),
        "sha": data.get("sha"),
        "repo": {"name": repo.get("name"), "full_name": repo.get("full_name")},
    }


def _encode_content(content: str) -> str:
    return base64.b64encode(content.encode("utf-8")).decode("utf-8")


class GiteaProvider(VcsProviderBase):
    """Gitea provider using an httpx client."""

    def __init__(self, config: ProviderConfig, client: httpx.AsyncClient) -> None:
        """Initialize the provider with an already-initialized client."""
        super().__init__(config)
        self.client = client

    @classmethod
    def create(cls, config: ProviderConfig) -> Self:
        """Create a new Gitea provider from its configuration."""
        client = get_gitea_client(config)
        logger.info(
            "Creating client for Gitea instance",
            provider=config.name,
            base_url=str(client.base_url),
            anonymous=config.anonymous,
        )
        return cls(config, client)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()

    def normalize_error(self, exc: BaseException) -> ProviderError:
        """Translate an httpx exception into a ProviderError."""
        if isinstance(exc, httpx.HTTPStatusError):
            response = exc.response
            try:
                data = response.json()
            except ValueError:
                data = {"message": response.text}
            return error_from_response(response.status_code, data, self.name, response.headers)
        if isinstance(exc, httpx.TransportError):
            return network_error(self.name)
        return unknown_error(exc, self.name)

    async def _request(self, method: str, url: str, params: dict[str, Any] | None = None, json: Any = None) -> Any:
        """Perform a request and return the decoded JSON body, or None for empty bodies."""
        logger.debug("Gitea request", provider=self.name, method=method, url=url, params=params)
        response = await self.client.request(method, url, params=params, json=json)
        response.raise_for_status()
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    async def _get(self, url: str, params: dict[str, Any] | None = None) -> Any:
        return await self._request("GET", url, params=params)

    async def _post(self, url: str, json: Any = None) -> Any:
        return await self._request("POST", url, json=json)

    async def _put(self, url: str, json: Any = None) -> Any:
        return await self._request("PUT", url, json=json)

    async def _patch(self, url: str, json: Any = None) -> Any:
        return await self._request("PATCH", url, json=json)

    async def _delete(self, url: str, json: Any = None) -> Any:
        return await self._request("DELETE", url, json=json)

    @staticmethod
    def _repo_path(owner: str, repo: str) -> str:
        return f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"

    # Normalization
    def normalize_repository(self, data: dict[str, Any]) -> Repository:
        """Normalize a Gitea repository payload."""
        owner = data.get("owner") or {}
        return Repository(
            id=data.get("id"),
            name=data.get("name"),
            full_name=data.get("full_name"),
            description=data.get("description"),
            private=data.get("private"),
            html_url=data.get("html_url"),
            clone_url=data.get("clone_url"),
            default_branch=data.get("default_branch"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            owner={"login": _login(owner), "type": owner.get("type") or "user"},
            raw=data,
        )

    def normalize_branch(self, data: dict[str, Any]) -> Branch:
        """Normalize a Gitea branch payload."""
        commit = data.get("commit") or {}
        return Branch(
            name=data.get("name"),
            commit={"sha": commit.get("id") or commit.get("sha"), "url": commit.get("url")},
            protected=data.get("protected"),
            raw=data,
        )

    def normalize_file(self, data: dict[str, Any]) -> FileContent:
        """Normalize a Gitea contents payload."""
        return FileContent(
            name=data.get("name"),
            path=data.get("path"),
            sha=data.get("sha"),
            size=data.get("size"),
            url=data.get("url"),
            html_url=data.get("html_url"),
            git_url=data.get("git_url"),
            download_url=data.get("download_url"),
            type=data.get("type"),
            content=data.get("content"),
            encoding=data.get("encoding"),
            raw=data,
        )

    def normalize_commit(self, data: dict[str, Any]) -> Commit:
        """Normalize a Gitea commit payload.

        The commit list endpoint nests message and signatures under ``commit``
        while the git commit endpoint may return them at the top level.
        """
        details = data.get("commit") or data
        author = details.get("author") or {}
        committer = details.get("committer") or {}
        return Commit(
            sha=data.get("id") or data.get("sha"),
            message=details.get("message"),
            author={"name": author.get("name"), "email": author.get("email"), "date": author.get("date")},
            committer={"name": committer.get("name"), "email": committer.get("email"), "date": committer.get("date")},
            url=data.get("url"),
            html_url=data.get("html_url"),
            raw=data,
        )

    def normalize_issue(self, data: dict[str, Any]) -> Issue:
        """Normalize a Gitea issue payload."""
        assignees = data.get("assignees")
        labels = data.get("labels")
        return Issue(
            id=data.get("id"),
            number=data.get("number"),
            title=data.get("title"),
            body=data.get("body"),
            state=data.get("state"),
            user=_user_ref(data.get("user")),
            assignees=[_user_ref(assignee) for assignee in assignees] if assignees is not None else None,
            labels=[{"name": label.get("name"), "color": label.get("color")} for label in labels] if labels is not None else None,
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            closed_at=data.get("closed_at"),
            raw=data,
        )

    def normalize_comment(self, data: dict[str, Any]) -> Comment:
        """Normalize a Gitea comment payload."""
        return Comment(
            id=data.get("id"),
            body=data.get("body"),
            user=_user_ref(data.get("user")),
            html_url=data.get("html_url"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            raw=data,
        )

    def normalize_pull_request(self, data: dict[str, Any]) -> PullRequest:
        """Normalize a Gitea pull request payload."""
        return PullRequest(
            id=data.get("id"),
            number=data.get("number"),
            title=data.get("title"),
            body=data.get("body"),
            state=data.get("state"),
            user=_user_ref(data.get("user")),
            head=_pull_request_ref(data.get("head")),
            base=_pull_request_ref(data.get("base")),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            closed_at=data.get("closed_at"),
            merged_at=data.get("merged_at"),
            mergeable=data.get("mergeable"),
            raw=data,
        )

    def normalize_release(self, data: dict[str, Any]) -> Release:
        """Normalize a Gitea release payload."""
        return Release(
            id=data.get("id"),
            tag_name=data.get("tag_name"),
            name=data.get("name"),
            body=data.get("body"),
            draft=data.get("draft"),
            prerelease=data.get("prerelease"),
            created_at=data.get("created_at"),
            published_at=data.get("published_at"),
            html_url=data.get("html_url"),
            tarball_url=data.get("tarball_url"),
            zipball_url=data.get("zipball_url"),
            raw=data,
        )

    def normalize_tag(self, data: dict[str, Any]) -> Tag:
        """Normalize a Gitea tag payload."""
        commit = data.get("commit") or {}
        return Tag(
            name=data.get("name"),
            commit={"sha": commit.get("id") or commit.get("sha"), "url": commit.get("url")},
            zipball_url=data.get("zipball_url"),
            tarball_url=data.get("tarball_url"),
            raw=data,
        )

    def normalize_user(self, data: dict[str, Any]) -> User:
        """Normalize a Gitea user payload."""
        return User(
            id=data.get("id"),
            login=_login(data),
            name=data.get("full_name") or data.get("name"),
            email=data.get("email"),
            avatar_url=data.get("avatar_url"),
            html_url=data.get("html_url"),
            type=data.get("type"),
            raw=data,
        )

    def normalize_organization(self, data: dict[str, Any]) -> Organization:
        """Normalize a Gitea organization payload."""
        return Organization(
            id=data.get("id"),
            login=_login(data),
            name=data.get("full_name") or data.get("name"),
            description=data.get("description"),
            avatar_url=data.get("avatar_url"),
            html_url=data.get("html_url"),
            location=data.get("location"),
            website=data.get("website"),
            public_repos=data.get("public_repos"),
            public_members=data.get("public_members"),
            raw=data,
        )

    def normalize_webhook(self, data: dict[str, Any]) -> Webhook:
        """Normalize a Gitea webhook payload."""
        config = data.get("config") or {}
        return Webhook(
            id=data.get("id"),
            type=data.get("type"),
            name=data.get("name"),
            active=data.get("active"),
            events=data.get("events"),
            config={"url": config.get("url"), "content_type": config.get("content_type"), "secret": config.get("secret")},
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            raw=data,
        )

    # Repository CRUD
    @translate_provider_errors
    async def list_repositories(self, username: str | None = None, page: int = 1, limit: int = 30) -> list[Repository]:
        """List repositories of a user, or of the authenticated user."""
        url = f"/users/{quote(username, safe='')}/repos" if username else "/user/repos"
        data = await self._get(url, {"page": page, "limit": limit})
        return [self.normalize_repository(repo) for repo in data]

    @translate_provider_errors
    async def get_repository(self, owner: str, repo: str) -> Repository:
        """Get a repository."""
        return self.normalize_repository(await self._get(self._repo_path(owner, repo)))

    @translate_provider_errors
    async def create_repository(
        self,
        name: str,
        description: str | None = None,
        private: bool = False,
        auto_init: bool = True,
    ) -> Repository:
        """Create a repository for the authenticated user."""
        payload = self._omit_null_parameters(name=name, description=description, private=private, auto_init=auto_init)
        data = await self._post("/user/repos", payload)
        logger.info("Created repository", provider=self.name, name=name)
        return self.normalize_repository(data)

    @translate_provider_errors
    async def update_repository(self, owner: str, repo: str, updates: dict[str, Any]) -> Repository:
        """Update a repository."""
        return self.normalize_repository(await self._patch(self._repo_path(owner, repo), updates))

    @translate_provider_errors
    async def delete_repository(self, owner: str, repo: str) -> bool:
        """Delete a repository."""
        await self._delete(self._repo_path(owner, repo))
        logger.info("Deleted repository", provider=self.name, owner=owner, repo=repo)
        return True

    @translate_provider_errors
    async def fork_repository(self, owner: str, repo: str, organization: str | None = None) -> Repository:
        """Fork a repository."""
        payload = self._omit_null_parameters(organization=organization)
        return self.normalize_repository(await self._post(f"{self._repo_path(owner, repo)}/forks", payload))

    @translate_provider_errors
    async def search_repositories(self, query: str, page: int = 1, limit: int = 30) -> list[Repository]:
        """Search repositories. Gitea wraps the results in ``data``."""
        response = await self._get("/repos/search", {"q": query, "page": page, "limit": limit})
        repositories = response.get("data", []) if isinstance(response, dict) else response
        return [self.normalize_repository(repo) for repo in repositories or []]

    # Branch CRUD
    @translate_provider_errors
    async def list_branches(self, owner: str, repo: str, page: int = 1, limit: int = 30) -> list[Branch]:
        """List branches of a repository."""
        data = await self._get(f"{self._repo_path(owner, repo)}/branches", {"page": page, "limit": limit})
        return [self.normalize_branch(branch) for branch in data]

    @translate_provider_errors
    async def get_branch(self, owner: str, repo: str, branch: str) -> Branch:
        """Get a branch."""
        return self.normalize_branch(await self._get(f"{self._repo_path(owner, repo)}/branches/{quote(branch, safe='/')}"))

    @translate_provider_errors
    async def create_branch(self, owner: str, repo: str, branch_name: str, from_branch: str) -> Branch:
        """Create a branch from an existing branch.

        The source branch is looked up first so that a missing source is
        reported as NOT_FOUND rather than as a generic creation failure.
        """
        await self.get_branch(owner, repo, from_branch)
        data = await self._post(
            f"{self._repo_path(owner, repo)}/branches",
            {"new_branch_name": branch_name, "old_branch_name": from_branch},
        )
        logger.info("Created branch", provider=self.name, branch=branch_name, base_branch=from_branch)
        return self.normalize_branch(data)

    @translate_provider_errors
    async def delete_branch(self, owner: str, repo: str, branch: str) -> bool:
        """Delete a branch."""
        await self._delete(f"{self._repo_path(owner, repo)}/branches/{quote(branch, safe='/')}")
        logger.info("Deleted branch", provider=self.name, branch=branch)
        return True

    # File CRUD
    def _contents_path(self, owner: str, repo: str, path: str) -> str:
        path = path.strip("/")
        if not path:
            return f"{self._repo_path(owner, repo)}/contents"
        return f"{self._repo_path(owner, repo)}/contents/{quote(path, safe='/')}"

    @translate_provider_errors
    async def get_file(self, owner: str, repo: str, path: str, ref: str | None = None) -> FileContent:
        """Get a file."""
        data = await self._get(self._contents_path(owner, repo, path), self._omit_null_parameters(ref=ref))
        if isinstance(data, list):
            raise directory_error(path, self.name)
        return self.normalize_file(data)

    @translate_provider_errors
    async def list_files(self, owner: str, repo: str, path: str = "", ref: str | None = None) -> list[FileContent]:
        """List the entries of a directory."""
        data = await self._get(self._contents_path(owner, repo, path), self._omit_null_parameters(ref=ref))
        if isinstance(data, dict):
            data = [data]
        return [self.normalize_file(entry) for entry in data]

    @translate_provider_errors
    async def create_file(
        self,
        owner: str,
        repo: str,
        path: str,
        content: str,
        message: str,
        branch: str | None = None,
    ) -> FileContent:
        """Create a file."""
        payload = self._omit_null_parameters(content=_encode_content(content), message=message, branch=branch)
        data = await self._post(self._contents_path(owner, repo, path), payload)
        logger.info("Created file", provider=self.name, file=path, branch=branch)
        return self.normalize_file(data.get("content") or {})

    @translate_provider_errors
    async def update_file(
        self,
        owner: str,
        repo: str,
        path: str,
        content: str,
        message: str,
        sha: str,
        branch: str | None = None,
    ) -> FileContent:
        """Replace the content of a file."""
        payload = self._omit_null_parameters(content=_encode_content(content), message=message, sha=sha, branch=branch)
        data = await self._put(self._contents_path(owner, repo, path), payload)
        logger.info("Updated file", provider=self.name, file=path, branch=branch)
        return self.normalize_file(data.get("content") or {})

    @translate_provider_errors
    async def delete_file(
        self,
        owner: str,
        repo: str,
        path: str,
        message: str,
        sha: str,
        branch: str | None = None,
    ) -> bool:
        """Delete a file."""
        payload = self._omit_null_parameters(message=message, sha=sha, branch=branch)
        await self._delete(self._contents_path(owner, repo, path), payload)
        logger.info("Deleted file", provider=self.name, file=path, branch=branch)
        return True

    # Commit Operations
    @translate_provider_errors
    async def list_commits(
        self,
        owner: str,
        repo: str,
        branch: str | None = None,
        page: int = 1,
        limit: int = 30,
    ) -> list[Commit]:
        """List commits."""
        params = self._omit_null_parameters(sha=branch, page=page, limit=limit)
        data = await self._get(f"{self._repo_path(owner, repo)}/commits", params)
        return [self.normalize_commit(commit) for commit in data]

    @translate_provider_errors
    async def get_commit(self, owner: str, repo: str, sha: str) -> Commit:
        """Get a commit."""
        return self.normalize_commit(await self._get(f"{self._repo_path(owner, repo)}/git/commits/{quote(sha, safe='')}"))

    # Issue CRUD
    @translate_provider_errors
    async def list_issues(
        self,
        owner: str,
        repo: str,
        state: IssueState = "open",
        page: int = 1,
        limit: int = 30,
    ) -> list[Issue]:
        """List issues."""
        params = {"state": state, "page": page, "limit": limit, "type": "issues"}
        data = await self._get(f"{self._repo_path(owner, repo)}/issues", params)
        return [self.normalize_issue(issue) for issue in data]

    @translate_provider_errors
    async def get_issue(self, owner: str, repo: str, issue_number: int) -> Issue:
        """Get an issue."""
        return self.normalize_issue(await self._get(f"{self._repo_path(owner, repo)}/issues/{issue_number}"))

    @translate_provider_errors
    async def create_issue(
        self,
        owner: str,
        repo: str,
        title: str,
        body: str | None = None,
        assignees: list[str] | None = None,
        labels: list[str] | None = None,
    ) -> Issue:
        """Create an issue.

        Gitea expects label IDs rather than names, so label names are resolved
        against the repository labels before the issue is created.
        """
        label_ids = await self._resolve_label_ids(owner, repo, labels) if labels else None
        payload = self._omit_null_parameters(title=title, body=body, assignees=assignees, labels=label_ids)
        data = await self._post(f"{self._repo_path(owner, repo)}/issues", payload)
        logger.info("Created issue", provider=self.name, owner=owner, repo=repo, number=data.get("number"))
        return self.normalize_issue(data)

    async def _resolve_label_ids(self, owner: str, repo: str, labels: list[str]) -> list[int]:
        repo_labels = await self._get(f"{self._repo_path(owner, repo)}/labels", {"limit": 100})
        ids_by_name = {label.get("name"): label.get("id") for label in repo_labels or []}
        missing = [name for name in labels if name not in ids_by_name]
        if missing:
            logger.warning("Ignoring unknown labels", provider=self.name, owner=owner, repo=repo, labels=missing)
        return [ids_by_name[name] for name in labels if name in ids_by_name]

    @translate_provider_errors
    async def update_issue(self, owner: str, repo: str, issue_number: int, updates: dict[str, Any]) -> Issue:
        """Update an issue."""
        return self.normalize_issue(await self._patch(f"{self._repo_path(owner, repo)}/issues/{issue_number}", updates))

    @translate_provider_errors
    async def create_issue_comment(self, owner: str, repo: str, issue_number: int, body: str) -> Comment:
        """Comment on an issue or pull request."""
        data = await self._post(f"{self._repo_path(owner, repo)}/issues/{issue_number}/comments", {"body": body})
        return self.normalize_comment(data)

    # Pull Request CRUD
    @translate_provider_errors
    async def list_pull_requests(
        self,
        owner: str,
        repo: str,
        state: PullRequestState = "open",
        page: int = 1,
        limit: int = 30,
    ) -> list[PullRequest]:
        """List pull requests."""
        data = await self._get(f"{self._repo_path(owner, repo)}/pulls", {"state": state, "page": page, "limit": limit})
        return [self.normalize_pull_request(pull_request) for pull_request in data]

    @translate_provider_errors
    async def get_pull_request(self, owner: str, repo: str, pull_number: int) -> PullRequest:
        """Get a pull request."""
        return self.normalize_pull_request(await self._get(f"{self._repo_path(owner, repo)}/pulls/{pull_number}"))

    @translate_provider_errors
    async def create_pull_request(
        self,
        owner: str,
        repo: str,
        title: str,
        head: str,
        base: str,
        body: str | None = None,
    ) -> PullRequest:
        """Create a pull request."""
        payload = self._omit_null_parameters(title=title, head=head, base=base, body=body)
        data = await self._post(f"{self._repo_path(owner, repo)}/pulls", payload)
        logger.info("Created pull request", provider=self.name, owner=owner, repo=repo, head=head, base=base)
        return self.normalize_pull_request(data)

    @translate_provider_errors
    async def update_pull_request(self, owner: str, repo: str, pull_number: int, updates: dict[str, Any]) -> PullRequest:
        """Update a pull request."""
        return self.normalize_pull_request(await self._patch(f"{self._repo_path(owner, repo)}/pulls/{pull_number}", updates))

    @translate_provider_errors
    async def merge_pull_request(self, owner: str, repo: str, pull_number: int, merge_method: MergeMethod = "merge") -> bool:
        """Merge a pull request. Gitea names the merge style ``Do``."""
        await self._post(f"{self._repo_path(owner, repo)}/pulls/{pull_number}/merge", {"Do": merge_method})
        logger.info("Merged pull request", provider=self.name, owner=owner, repo=repo, number=pull_number, merge_method=merge_method)
        return True

    # Release CRUD
    @translate_provider_errors
    async def list_releases(self, owner: str, repo: str, page: int = 1, limit: int = 30) -> list[Release]:
        """List releases."""
        data = await self._get(f"{self._repo_path(owner, repo)}/releases", {"page": page, "limit": limit})
        return [self.normalize_release(release) for release in data]

    @translate_provider_errors
    async def get_release(self, owner: str, repo: str, release_id: int) -> Release:
        """Get a release."""
        return self.normalize_release(await self._get(f"{self._repo_path(owner, repo)}/releases/{release_id}"))

    @translate_provider_errors
    async def create_release(
        self,
        owner: str,
        repo: str,
        tag_name: str,
        name: str | None = None,
        body: str | None = None,
        draft: bool = False,
        prerelease: bool = False,
        target_commitish: str | None = None,
    ) -> Release:
        """Create a release."""
        payload = self._omit_null_parameters(
            tag_name=tag_name,
            name=name or tag_name,
            body=body,
            draft=draft,
            prerelease=prerelease,
            target_commitish=target_commitish,
        )
        data = await self._post(f"{self._repo_path(owner, repo)}/releases", payload)
        logger.info("Created release", provider=self.name, owner=owner, repo=repo, tag_name=tag_name)
        return self.normalize_release(data)

    @translate_provider_errors
    async def update_release(self, owner: str, repo: str, release_id: int, updates: dict[str, Any]) -> Release:
        """Update a release."""
        return self.normalize_release(await self._patch(f"{self._repo_path(owner, repo)}/releases/{release_id}", updates))

    @translate_provider_errors
    async def delete_release(self, owner: str, repo: str, release_id: int) -> bool:
        """Delete a release."""
        await self._delete(f"{self._repo_path(owner, repo)}/releases/{release_id}")
        return True

    # Tag Operations
    @translate_provider_errors
    async def list_tags(self, owner: str, repo: str, page: int = 1, limit: int = 30) -> list[Tag]:
        """List tags."""
        data = await self._get(f"{self._repo_path(owner, repo)}/tags", {"page": page, "limit": limit})
        return [self.normalize_tag(tag) for tag in data]

    @translate_provider_errors
    async def get_tag(self, owner: str, repo: str, tag: str) -> Tag:
        """Get a tag."""
        return self.normalize_tag(await self._get(f"{self._repo_path(owner, repo)}/tags/{quote(tag, safe='')}"))

    @translate_provider_errors
    async def create_tag(self, owner: str, repo: str, tag_name: str, target: str, message: str | None = None) -> Tag:
        """Create a tag. A message makes it an annotated tag."""
        payload = self._omit_null_parameters(tag_name=tag_name, target=target, message=message)
        data = await self._post(f"{self._repo_path(owner, repo)}/tags", payload)
        logger.info("Created tag", provider=self.name, owner=owner, repo=repo, tag_name=tag_name)
        return self.normalize_tag(data)

    @translate_provider_errors
    async def delete_tag(self, owner: str, repo: str, tag: str) -> bool:
        """Delete a tag."""
        await self._delete(f"{self._repo_path(owner, repo)}/tags/{quote(tag, safe='')}")
        return True

    # User Operations
    @translate_provider_errors
    async def get_current_user(self) -> User:
        """Get the authenticated user."""
        return self.normalize_user(await self._get("/user"))

    @translate_provider_errors
    async def get_user(self, username: str) -> User:
        """Get a user."""
        return self.normalize_user(await self._get(f"/users/{quote(username, safe='')}"))

    @translate_provider_errors
    async def search_users(self, query: str, page: int = 1, limit: int = 30) -> list[User]:
        """Search users. Gitea wraps the results in ``data``."""
        response = await self._get("/users/search", {"q": query, "page": page, "limit": limit})
        users = response.get("data", []) if isinstance(response, dict) else response
        return [self.normalize_user(user) for user in users or []]

    @translate_provider_errors
    async def list_user_organizations(self, username: str, page: int = 1, limit: int = 30) -> list[Organization]:
        """List the organizations of a user."""
        data = await self._get(f"/users/{quote(username, safe='')}/orgs", {"page": page, "limit": limit})
        return [self.normalize_organization(org) for org in data]

    # Webhook CRUD
    @translate_provider_errors
    async def list_webhooks(self, owner: str, repo: str, page: int = 1, limit: int = 30) -> list[Webhook]:
        """List webhooks."""
        data = await self._get(f"{self._repo_path(owner, repo)}/hooks", {"page": page, "limit": limit})
        return [self.normalize_webhook(hook) for hook in data]

    @translate_provider_errors
    async def get_webhook(self, owner: str, repo: str, webhook_id: int) -> Webhook:
        """Get a webhook."""
        return self.normalize_webhook(await self._get(f"{self._repo_path(owner, repo)}/hooks/{webhook_id}"))

    @translate_provider_errors
    async def create_webhook(
        self,
        owner: str,
        repo: str,
        url: str,
        events: list[str],
        secret: str | None = None,
        content_type: str = "json",
        active: bool = True,
    ) -> Webhook:
        """Create a Gitea webhook."""
        payload = {
            "type": "gitea",
            "config": self._omit_null_parameters(url=url, content_type=content_type, secret=secret),
            "events": events,
            "active": active,
        }
        data = await self._post(f"{self._repo_path(owner, repo)}/hooks", payload)
        logger.info("Created webhook", provider=self.name, owner=owner, repo=repo, events=events)
        return self.normalize_webhook(data)

    @translate_provider_errors
    async def update_webhook(self, owner: str, repo: str, webhook_id: int, updates: dict[str, Any]) -> Webhook:
        """Update a webhook."""
        return self.normalize_webhook(await self._patch(f"{self._repo_path(owner, repo)}/hooks/{webhook_id}", updates))

    @translate_provider_errors
    async def delete_webhook(self, owner: str, repo: str, webhook_id: int) -> bool:
        """Delete a webhook."""
        await self._delete(f"{self._repo_path(owner, repo)}/hooks/{webhook_id}")
        return True
