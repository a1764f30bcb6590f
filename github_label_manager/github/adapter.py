"""GitHub client adapter for the githubkit library."""

from functools import wraps
from pathlib import Path
from typing import Any, Awaitable, Callable, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import GitHubException, RequestFailed
from githubkit.versions.latest.models import FullRepository, Label

from github_label_manager.configuration.models import GitHubAuthenticationType
from github_label_manager.synchronize.exceptions import GitHubConnectionError, RemoteOperationError
from github_label_manager.utils.constants import DEFAULT_GITHUB_API_URL, GITHUB_LABELS_PAGE_SIZE
from github_label_manager.utils.github import RepositoryRef, split_repository
from github_label_manager.utils.retry import retry_on_rate_limit

from .abc import GitHubClientBase
from .client import GitHubClient, get_github_client

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_github_errors(operation: str) -> Callable[[F], F]:
    """Decorator converting githubkit failures into RemoteOperationError.

    422 Unprocessable Entity responses (e.g. a label that already exists or an
    invalid color) are logged with GitHub's validation details first.
    """

    def decorator(func: F) -> F:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except RequestFailed as exc:
                status_code = exc.response.status_code
                message = str(exc)
                if status_code == 422:
                    try:
                        error_data = exc.response.json()
                    except Exception:
                        error_data = {}
                    message = error_data.get("message", "Unprocessable Entity")
                    errors = error_data.get("errors", [])
                    logger.error(
                        "GitHub 422 Unprocessable Entity",
                        function=func.__name__,
                        message=message,
                        errors=errors,
                        status_code=422,
                    )
                    message = f"{message} | errors: {errors}"
                raise RemoteOperationError(operation, message, status_code=status_code) from exc
            except GitHubException as exc:
                raise RemoteOperationError(operation, str(exc)) from exc

        return wrapper  # type: ignore

    return decorator


class GitHubKitAdapter(GitHubClientBase):
    """GitHub client adapter for the githubkit library, bound to one repository."""

    def __init__(self, client: GitHubClient, owner: str, repo_name: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name

    @property
    def repository(self) -> RepositoryRef:
        return RepositoryRef(self.owner, self.repo_name)

    @classmethod
    async def create(
        cls,
        repo: str,
        github_auth_type: GitHubAuthenticationType,
        github_token: str | None = None,
        github_app_id: int | None = None,
        github_app_private_key_path: Path | None = None,
        github_app_installation_id: int | None = None,
        github_api_url: str = DEFAULT_GITHUB_API_URL,
    ) -> Self:
        """Create a new GitHub client adapter.

        Args:
            repo: Repository in 'owner/repo' format
            github_auth_type: Type of authentication (TOKEN or APP)
            github_token: GitHub token (required for TOKEN auth)
            github_app_id: GitHub App ID (required for APP auth)
            github_app_private_key_path: Path to private key file (required for APP auth)
            github_app_installation_id: Installation ID (required for APP auth)
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance

        Raises:
            ValueError: If the repository is not in 'owner/repo' format
            GitHubConnectionError: If the client cannot be authenticated
        """
        repository = split_repository(repo)
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=repository.owner,
            repo_name=repository.name,
        )
        client = await get_github_client(
            repository=repository,
            github_auth_type=github_auth_type,
            github_token=github_token,
            github_app_id=github_app_id,
            github_app_private_key_path=github_app_private_key_path,
            github_app_installation_id=github_app_installation_id,
            github_api_url=github_api_url,
        )
        return cls(client, repository.owner, repository.name)

    # Connection
    async def validate_connection(self) -> None:
        """Check that the API endpoint and credentials grant access to the repository."""
        logger.debug("Checking GitHub API connection", owner=self.owner, repo_name=self.repo_name)
        try:
            response: Response[FullRepository] = await self.client.rest.repos.async_get(owner=self.owner, repo=self.repo_name)
        except GitHubException as exc:
            raise GitHubConnectionError(f"Unable to access repository {self.repository} through the GitHub API: {exc}") from exc
        logger.debug("GitHub API connection ok", full_name=response.parsed_data.full_name)

    # Label CRUD
    @handle_github_errors("list labels")
    @retry_on_rate_limit()
    async def list_labels(self, per_page: int = GITHUB_LABELS_PAGE_SIZE, **kwargs: Any) -> list[Label]:
        """List all labels for a repository, handling pagination."""
        all_labels: list[Label] = []
        page: int = 1
        while True:
            response: Response[list[Label]] = await self.client.rest.issues.async_list_labels_for_repo(
                owner=self.owner,
                repo=self.repo_name,
                per_page=per_page,
                page=page,
                **kwargs,
            )
            labels: list[Label] = response.parsed_data
            all_labels.extend(labels)
            if len(labels) < per_page:
                break
            page += 1
        return all_labels

    @handle_github_errors("create label")
    @retry_on_rate_limit()
    async def create_label(self, name: str, color: str, description: str | None = None, **kwargs: Any) -> Label:
        """Create a label for a repository."""
        params: dict[str, Any] = {"name": name, "color": color, **kwargs}
        if description is not None:
            params["description"] = description
        response: Response[Label] = await self.client.rest.issues.async_create_label(
            owner=self.owner,
            repo=self.repo_name,
            **params,
        )
        return response.parsed_data

    @handle_github_errors("update label")
    @retry_on_rate_limit()
    async def update_label(
        self,
        name: str,
        new_name: str,
        color: str,
        description: str | None = None,
        **kwargs: Any,
    ) -> Label:
        """Overwrite a label's name, color and description.

        The description is always sent; an empty string clears the existing one
        when no description is desired.
        """
        response: Response[Label] = await self.client.rest.issues.async_update_label(
            owner=self.owner,
            repo=self.repo_name,
            name=name,
            new_name=new_name,
            color=color,
            description=description if description is not None else "",
            **kwargs,
        )
        return response.parsed_data

    @handle_github_errors("delete label")
    @retry_on_rate_limit()
    async def delete_label(self, name: str) -> None:
        """Delete a label for a repository."""
        await self.client.rest.issues.async_delete_label(owner=self.owner, repo=self.repo_name, name=name)
        return None
