"""GitHub provider for the githubkit library."""

import base64
from typing import Any, Self

import structlog
from githubkit.exception import RequestError, RequestFailed

from forge_ops_mcp.configuration.models import ProviderConfig

from .abc import IssueState, MergeMethod, PullRequestState, VcsProviderBase
from .client import GitHubClient, get_github_client
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


def _user_ref(data: dict[str, Any] | None) -> dict[str, Any]:
    data = data or {}
    return {"login": data.get("login"), "id": data.get("id")}


def _pull_request_ref(data: dict[str, Any] | None) -> dict[str, Any]:
    data = data or {}
    repo = data.get("repo") or {}
    return {
        "ref": data.get("ref"),
        "sha": data.get("sha"),
        "repo": {"name": repo.get("name"), "full_name": repo.get("full_name")},
    }


class GitHubProvider(VcsProviderBase):
    """GitHub provider for the githubkit library."""

    def __init__(self, config: ProviderConfig, client: GitHubClient) -> None:
        """Initialize the provider with an already-initialized client."""
        super().__init__(config)
        self.client = client

    @classmethod
    def create(cls, config: ProviderConfig) -> Self:
        """Create a new GitHub provider from its configuration."""
        logger.info(
            "Creating client for GitHub instance",
            provider=config.name,
            github_api_url=config.api_url,
            anonymous=config.anonymous,
        )
        return cls(config, get_github_client(config))

    async def aclose(self) -> None:
        """Nothing to release; githubkit opens a connection per request outside a context manager."""
        return None

    def normalize_error(self, exc: BaseException) -> ProviderError:
        """Translate a githubkit exception into a ProviderError."""
        if isinstance(exc, RequestFailed):
            response = exc.response
            try:
                data = response.json()
            except ValueError:
                data = {"message": response.text}
            return error_from_response(response.status_code, data, self.name, response.headers)
        if isinstance(exc, RequestError):
            return network_error(self.name)
        return unknown_error(exc, self.name)

    # Normalization
    def normalize_repository(self, data: dict[str, Any]) -> Repository:
        """Normalize a GitHub repository payload."""
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
            owner={"login": owner.get("login"), "type": owner.get("type") or "User"},
            raw=data,
        )

    def normalize_branch(self, data: dict[str, Any]) -> Branch:
        """Normalize a GitHub branch payload."""
        commit = data.get("commit") or {}
        return Branch(
            name=data.get("name"),
            commit={"sha": commit.get("sha"), "url": commit.get("url")},
            protected=data.get("protected"),
            raw=data,
        )

    def normalize_file(self, data: dict[str, Any]) -> FileContent:
        """Normalize a GitHub contents payload."""
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
        """Normalize a GitHub commit payload.

        The repository commit endpoints nest message and signatures under
        ``commit``. When a signature carries no name, the GitHub account login
        is used instead.
        """
        details = data.get("commit") or data
        author = details.get("author") or {}
        committer = details.get("committer") or {}
        author_account = data.get("author") if data.get("commit") else None
        committer_account = data.get("committer") if data.get("commit") else None
        return Commit(
            sha=data.get("sha"),
            message=details.get("message"),
            author={
                "name": author.get("name") or (author_account or {}).get("login"),
                "email": author.get("email"),
                "date": author.get("date"),
            },
            committer={
                "name": committer.get("name") or (committer_account or {}).get("login"),
                "email": committer.get("email"),
                "date": committer.get("date"),
            },
            url=data.get("url"),
            html_url=data.get("html_url"),
            raw=data,
        )

    def normalize_issue(self, data: dict[str, Any]) -> Issue:
        """Normalize a GitHub issue payload."""
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
            labels=[
                {"name": label, "color": None} if isinstance(label, str) else {"name": label.get("name"), "color": label.get("color")}
                for label in labels
            ]
            if labels is not None
            else None,
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            closed_at=data.get("closed_at"),
            raw=data,
        )

    def normalize_comment(self, data: dict[str, Any]) -> Comment:
        """Normalize a GitHub comment payload."""
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
        """Normalize a GitHub pull request payload."""
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
        """Normalize a GitHub release payload."""
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
        """Normalize a GitHub tag payload."""
        commit = data.get("commit") or {}
        return Tag(
            name=data.get("name"),
            commit={"sha": commit.get("sha"), "url": commit.get("url")},
            zipball_url=data.get("zipball_url"),
            tarball_url=data.get("tarball_url"),
            raw=data,
        )

    def normalize_user(self, data: dict[str, Any]) -> User:
        """Normalize a GitHub user payload."""
        return User(
            id=data.get("id"),
            login=data.get("login"),
            name=data.get("name"),
            email=data.get("email"),
            avatar_url=data.get("avatar_url"),
            html_url=data.get("html_url"),
            type=data.get("type"),
            raw=data,
        )

    def normalize_organization(self, data: dict[str, Any]) -> Organization:
        """Normalize a GitHub organization payload. GitHub names the website ``blog``."""
        return Organization(
            id=data.get("id"),
            login=data.get("login"),
            name=data.get("name"),
            description=data.get("description"),
            avatar_url=data.get("avatar_url"),
            html_url=data.get("html_url"),
            location=data.get("location"),
            website=data.get("blog"),
            public_repos=data.get("public_repos"),
            public_members=data.get("public_members"),
            raw=data,
        )

    def normalize_webhook(self, data: dict[str, Any]) -> Webhook:
        """Normalize a GitHub webhook payload."""
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
        if username:
            response = await self.client.rest.repos.async_list_for_user(username=username, sort="updated", page=page, per_page=limit)
        else:
            response = await self.client.rest.repos.async_list_for_authenticated_user(sort="updated", page=page, per_page=limit)
        return [self.normalize_repository(repo) for repo in response.json()]

    @translate_provider_errors
    async def get_repository(self, owner: str, repo: str) -> Repository:
        """Get a repository."""
        response = await self.client.rest.repos.async_get(owner=owner, repo=repo)
        return self.normalize_repository(response.json())

    @translate_provider_errors
    async def create_repository(
        self,
        name: str,
        description: str | None = None,
        private: bool = False,
        auto_init: bool = True,
    ) -> Repository:
        """Create a repository for the authenticated user."""
        params = self._omit_null_parameters(name=name, description=description, private=private, auto_init=auto_init)
        response = await self.client.rest.repos.async_create_for_authenticated_user(**params)
        logger.info("Created repository", provider=self.name, name=name)
        return self.normalize_repository(response.json())

    @translate_provider_errors
    async def update_repository(self, owner: str, repo: str, updates: dict[str, Any]) -> Repository:
        """Update a repository."""
        response = await self.client.rest.repos.async_update(owner=owner, repo=repo, data=updates)
        return self.normalize_repository(response.json())

    @translate_provider_errors
    async def delete_repository(self, owner: str, repo: str) -> bool:
        """Delete a repository."""
        await self.client.rest.repos.async_delete(owner=owner, repo=repo)
        logger.info("Deleted repository", provider=self.name, owner=owner, repo=repo)
        return True

    @translate_provider_errors
    async def fork_repository(self, owner: str, repo: str, organization: str | None = None) -> Repository:
        """Fork a repository."""
        params = self._omit_null_parameters(organization=organization)
        response = await self.client.rest.repos.async_create_fork(owner=owner, repo=repo, **params)
        return self.normalize_repository(response.json())

    @translate_provider_errors
    async def search_repositories(self, query: str, page: int = 1, limit: int = 30) -> list[Repository]:
        """Search repositories, most starred first."""
        response = await self.client.rest.search.async_repos(q=query, sort="stars", order="desc", page=page, per_page=limit)
        return [self.normalize_repository(repo) for repo in response.json().get("items", [])]

    # Branch CRUD
    @translate_provider_errors
    async def list_branches(self, owner: str, repo: str, page: int = 1, limit: int = 30) -> list[Branch]:
        """List branches of a repository."""
        response = await self.client.rest.repos.async_list_branches(owner=owner, repo=repo, page=page, per_page=limit)
        return [self.normalize_branch(branch) for branch in response.json()]

    @translate_provider_errors
    async def get_branch(self, owner: str, repo: str, branch: str) -> Branch:
        """Get a branch."""
        response = await self.client.rest.repos.async_get_branch(owner=owner, repo=repo, branch=branch)
        return self.normalize_branch(response.json())

    @translate_provider_errors
    async def create_branch(self, owner: str, repo: str, branch_name: str, from_branch: str) -> Branch:
        """Create a branch pointing at the head of an existing branch."""
        source = await self.get_branch(owner, repo, from_branch)
        sha = source.commit.sha
        await self.client.rest.git.async_create_ref(owner=owner, repo=repo, ref=f"refs/heads/{branch_name}", sha=sha)
        logger.info("Created branch", provider=self.name, branch=branch_name, base_branch=from_branch, sha=sha)
        return await self.get_branch(owner, repo, branch_name)

    @translate_provider_errors
    async def delete_branch(self, owner: str, repo: str, branch: str) -> bool:
        """Delete a branch by deleting its git ref."""
        await self.client.rest.git.async_delete_ref(owner=owner, repo=repo, ref=f"heads/{branch}")
        logger.info("Deleted branch", provider=self.name, branch=branch)
        return True

    # File CRUD
    @translate_provider_errors
    async def get_file(self, owner: str, repo: str, path: str, ref: str | None = None) -> FileContent:
        """Get a file."""
        params = self._omit_null_parameters(ref=ref)
        response = await self.client.rest.repos.async_get_content(owner=owner, repo=repo, path=path.strip("/"), **params)
        data = response.json()
        if isinstance(data, list):
            raise directory_error(path, self.name)
        return self.normalize_file(data)

    @translate_provider_errors
    async def list_files(self, owner: str, repo: str, path: str = "", ref: str | None = None) -> list[FileContent]:
        """List the entries of a directory."""
        params = self._omit_null_parameters(ref=ref)
        response = await self.client.rest.repos.async_get_content(owner=owner, repo=repo, path=path.strip("/"), **params)
        data = response.json()
        if isinstance(data, dict):
            data = [data]
        return [self.normalize_file(entry) for entry in data]

    async def _put_file(
        self,
        owner: str,
        repo: str,
        path: str,
        content: str,
        message: str,
        sha: str | None,
        branch: str | None,
    ) -> FileContent:
        params = self._omit_null_parameters(
            message=message,
            content=base64.b64encode(content.encode("utf-8")).decode("utf-8"),
            sha=sha,
            branch=branch,
        )
        response = await self.client.rest.repos.async_create_or_update_file_contents(owner=owner, repo=repo, path=path.strip("/"), **params)
        return self.normalize_file(response.json().get("content") or {})

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
        result = await self._put_file(owner, repo, path, content, message, None, branch)
        logger.info("Created file", provider=self.name, file=path, branch=branch)
        return result

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
        result = await self._put_file(owner, repo, path, content, message, sha, branch)
        logger.info("Updated file", provider=self.name, file=path, branch=branch)
        return result

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
        params = self._omit_null_parameters(message=message, sha=sha, branch=branch)
        await self.client.rest.repos.async_delete_file(owner=owner, repo=repo, path=path.strip("/"), **params)
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
        params = self._omit_null_parameters(sha=branch)
        response = await self.client.rest.repos.async_list_commits(owner=owner, repo=repo, page=page, per_page=limit, **params)
        return [self.normalize_commit(commit) for commit in response.json()]

    @translate_provider_errors
    async def get_commit(self, owner: str, repo: str, sha: str) -> Commit:
        """Get a commit."""
        response = await self.client.rest.repos.async_get_commit(owner=owner, repo=repo, ref=sha)
        return self.normalize_commit(response.json())

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
        """List issues. GitHub returns pull requests here too; they are left out."""
        response = await self.client.rest.issues.async_list_for_repo(owner=owner, repo=repo, state=state, page=page, per_page=limit)
        return [self.normalize_issue(issue) for issue in response.json() if "pull_request" not in issue]

    @translate_provider_errors
    async def get_issue(self, owner: str, repo: str, issue_number: int) -> Issue:
        """Get an issue."""
        response = await self.client.rest.issues.async_get(owner=owner, repo=repo, issue_number=issue_number)
        return self.normalize_issue(response.json())

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
        """Create an issue."""
        params = self._omit_null_parameters(title=title, body=body, assignees=assignees, labels=labels)
        response = await self.client.rest.issues.async_create(owner=owner, repo=repo, **params)
        data = response.json()
        logger.info("Created issue", provider=self.name, owner=owner, repo=repo, number=data.get("number"))
        return self.normalize_issue(data)

    @translate_provider_errors
    async def update_issue(self, owner: str, repo: str, issue_number: int, updates: dict[str, Any]) -> Issue:
        """Update an issue."""
        response = await self.client.rest.issues.async_update(owner=owner, repo=repo, issue_number=issue_number, data=updates)
        return self.normalize_issue(response.json())

    @translate_provider_errors
    async def create_issue_comment(self, owner: str, repo: str, issue_number: int, body: str) -> Comment:
        """Comment on an issue or pull request."""
        response = await self.client.rest.issues.async_create_comment(owner=owner, repo=repo, issue_number=issue_number, body=body)
        return self.normalize_comment(response.json())

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
        response = await self.client.rest.pulls.async_list(owner=owner, repo=repo, state=state, page=page, per_page=limit)
        return [self.normalize_pull_request(pull_request) for pull_request in response.json()]

    @translate_provider_errors
    async def get_pull_request(self, owner: str, repo: str, pull_number: int) -> PullRequest:
        """Get a pull request."""
        response = await self.client.rest.pulls.async_get(owner=owner, repo=repo, pull_number=pull_number)
        return self.normalize_pull_request(response.json())

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
        params = self._omit_null_parameters(title=title, head=head, base=base, body=body)
        response = await self.client.rest.pulls.async_create(owner=owner, repo=repo, **params)
        logger.info("Created pull request", provider=self.name, owner=owner, repo=repo, head=head, base=base)
        return self.normalize_pull_request(response.json())

    @translate_provider_errors
    async def update_pull_request(self, owner: str, repo: str, pull_number: int, updates: dict[str, Any]) -> PullRequest:
        """Update a pull request."""
        response = await self.client.rest.pulls.async_update(owner=owner, repo=repo, pull_number=pull_number, data=updates)
        return self.normalize_pull_request(response.json())

    @translate_provider_errors
    async def merge_pull_request(self, owner: str, repo: str, pull_number: int, merge_method: MergeMethod = "merge") -> bool:
        """Merge a pull request."""
        response = await self.client.rest.pulls.async_merge(owner=owner, repo=repo, pull_number=pull_number, merge_method=merge_method)
        merged = bool(response.json().get("merged", True))
        logger.info("Merged pull request", provider=self.name, owner=owner, repo=repo, number=pull_number, merged=merged)
        return merged

    # Release CRUD
    @translate_provider_errors
    async def list_releases(self, owner: str, repo: str, page: int = 1, limit: int = 30) -> list[Release]:
        """List releases."""
        response = await self.client.rest.repos.async_list_releases(owner=owner, repo=repo, page=page, per_page=limit)
        return [self.normalize_release(release) for release in response.json()]

    @translate_provider_errors
    async def get_release(self, owner: str, repo: str, release_id: int) -> Release:
        """Get a release."""
        response = await self.client.rest.repos.async_get_release(owner=owner, repo=repo, release_id=release_id)
        return self.normalize_release(response.json())

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
        params = self._omit_null_parameters(
            tag_name=tag_name,
            name=name or tag_name,
            body=body,
            draft=draft,
            prerelease=prerelease,
            target_commitish=target_commitish,
        )
        response = await self.client.rest.repos.async_create_release(owner=owner, repo=repo, **params)
        logger.info("Created release", provider=self.name, owner=owner, repo=repo, tag_name=tag_name)
        return self.normalize_release(response.json())

    @translate_provider_errors
    async def update_release(self, owner: str, repo: str, release_id: int, updates: dict[str, Any]) -> Release:
        """Update a release."""
        response = await self.client.rest.repos.async_update_release(owner=owner, repo=repo, release_id=release_id, data=updates)
        return self.normalize_release(response.json())

    @translate_provider_errors
    async def delete_release(self, owner: str, repo: str, release_id: int) -> bool:
        """Delete a release."""
        await self.client.rest.repos.async_delete_release(owner=owner, repo=repo, release_id=release_id)
        return True

    # Tag Operations
    @translate_provider_errors
    async def list_tags(self, owner: str, repo: str, page: int = 1, limit: int = 30) -> list[Tag]:
        """List tags."""
        response = await self.client.rest.repos.async_list_tags(owner=owner, repo=repo, page=page, per_page=limit)
        return [self.normalize_tag(tag) for tag in response.json()]

    @translate_provider_errors
    async def get_tag(self, owner: str, repo: str, tag: str) -> Tag:
        """Get a tag through its git ref."""
        response = await self.client.rest.git.async_get_ref(owner=owner, repo=repo, ref=f"tags/{tag}")
        return self._tag_from_ref(tag, response.json())

    def _tag_from_ref(self, tag: str, ref: dict[str, Any]) -> Tag:
        target = ref.get("object") or {}
        return self.normalize_tag({"name": tag, "commit": {"sha": target.get("sha"), "url": target.get("url")}, "ref": ref})

    @translate_provider_errors
    async def create_tag(self, owner: str, repo: str, tag_name: str, target: str, message: str | None = None) -> Tag:
        """Create a tag pointing at a branch or commit.

        A message makes it an annotated tag, which needs a tag object before
        the ref can be created.
        """
        commit = await self.client.rest.repos.async_get_commit(owner=owner, repo=repo, ref=target)
        sha = commit.json()["sha"]
        if message:
            tag_object = await self.client.rest.git.async_create_tag(
                owner=owner,
                repo=repo,
                data={"tag": tag_name, "message": message, "object": sha, "type": "commit"},
            )
            sha = tag_object.json()["sha"]
        response = await self.client.rest.git.async_create_ref(owner=owner, repo=repo, ref=f"refs/tags/{tag_name}", sha=sha)
        logger.info("Created tag", provider=self.name, owner=owner, repo=repo, tag_name=tag_name, annotated=bool(message))
        return self._tag_from_ref(tag_name, response.json())

    @translate_provider_errors
    async def delete_tag(self, owner: str, repo: str, tag: str) -> bool:
        """Delete a tag by deleting its git ref."""
        await self.client.rest.git.async_delete_ref(owner=owner, repo=repo, ref=f"tags/{tag}")
        return True

    # User Operations
    @translate_provider_errors
    async def get_current_user(self) -> User:
        """Get the authenticated user."""
        response = await self.client.rest.users.async_get_authenticated()
        return self.normalize_user(response.json())

    @translate_provider_errors
    async def get_user(self, username: str) -> User:
        """Get a user."""
        response = await self.client.rest.users.async_get_by_username(username=username)
        return self.normalize_user(response.json())

    @translate_provider_errors
    async def search_users(self, query: str, page: int = 1, limit: int = 30) -> list[User]:
        """Search users."""
        response = await self.client.rest.search.async_users(q=query, page=page, per_page=limit)
        return [self.normalize_user(user) for user in response.json().get("items", [])]

    @translate_provider_errors
    async def list_user_organizations(self, username: str, page: int = 1, limit: int = 30) -> list[Organization]:
        """List the public organizations of a user."""
        response = await self.client.rest.orgs.async_list_for_user(username=username, page=page, per_page=limit)
        return [self.normalize_organization(org) for org in response.json()]

    # Webhook CRUD
    @translate_provider_errors
    async def list_webhooks(self, owner: str, repo: str, page: int = 1, limit: int = 30) -> list[Webhook]:
        """List webhooks."""
        response = await self.client.rest.repos.async_list_webhooks(owner=owner, repo=repo, page=page, per_page=limit)
        return [self.normalize_webhook(hook) for hook in response.json()]

    @translate_provider_errors
    async def get_webhook(self, owner: str, repo: str, webhook_id: int) -> Webhook:
        """Get a webhook."""
        response = await self.client.rest.repos.async_get_webhook(owner=owner, repo=repo, hook_id=webhook_id)
        return self.normalize_webhook(response.json())

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
        """Create a repository webhook."""
        data = {
            "name": "web",
            "config": self._omit_null_parameters(url=url, content_type=content_type, secret=secret),
            "events": events,
            "active": active,
        }
        response = await self.client.rest.repos.async_create_webhook(owner=owner, repo=repo, data=data)
        logger.info("Created webhook", provider=self.name, owner=owner, repo=repo, events=events)
        return self.normalize_webhook(response.json())

    @translate_provider_errors
    async def update_webhook(self, owner: str, repo: str, webhook_id: int, updates: dict[str, Any]) -> Webhook:
        """Update a webhook."""
        response = await self.client.rest.repos.async_update_webhook(owner=owner, repo=repo, hook_id=webhook_id, data=updates)
        return self.normalize_webhook(response.json())

    @translate_provider_errors
    async def delete_webhook(self, owner: str, repo: str, webhook_id: int) -> bool:
        """Delete a webhook."""
        await self.client.rest.repos.async_delete_webhook(owner=owner, repo=repo, hook_id=webhook_id)
        return True
