"""
GitHub browsing endpoints used to pick dashboard repositories.
"""

import logging
import time
from dataclasses import asdict

import httpx
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from app.api.deps import CurrentIdentity
from app.core.exceptions import UnauthorizedError, UpstreamError
from app.services.github import GitHubAPIError, GitHubReadOperations

router = APIRouter(prefix="/github", tags=["github"])
logger = logging.getLogger(__name__)


# --- Response Models ---


class GitHubRepoPreview(BaseModel):
    """A GitHub repository offered for dashboard selection."""

    github_id: int
    name: str
    full_name: str
    description: str | None
    url: str
    default_branch: str
    is_private: bool
    language: str | None
    stars_count: int
    forks_count: int
    updated_at: str


class GitHubReposListResponse(BaseModel):
    """Response for listing GitHub repos."""

    repos: list[GitHubRepoPreview]
    page: int
    per_page: int
    has_more: bool
    rate_limit_remaining: int | None


class CollaboratorPreview(BaseModel):
    login: str
    id: int
    avatar_url: str | None
    html_url: str | None


# --- Helper Functions ---


def github_error_to_http(e: GitHubAPIError) -> HTTPException:
    """Map a GitHub failure to the error the API answers with.

    A rejected token is the caller's problem (401); anything else is an
    upstream failure (502).
    """
    if e.status_code == status.HTTP_401_UNAUTHORIZED:
        return UnauthorizedError("Invalid token")

    detail = e.message
    if e.rate_limit_reset:
        reset_in = max(0, e.rate_limit_reset - int(time.time()))
        minutes = reset_in // 60
        detail = f"{e.message}. Rate limit resets in {minutes} minutes."
    return UpstreamError(detail)


# --- Endpoints ---


@router.get("/repos", response_model=GitHubReposListResponse)
async def list_github_repos(
    auth: CurrentIdentity,
    page: int = Query(1, ge=1, description="Page number"),
    per_page: int = Query(100, ge=1, le=100, description="Items per page"),
    sort: str = Query("updated", description="Sort by: updated, created, pushed, full_name"),
) -> GitHubReposListResponse:
    """
    List the caller's GitHub repositories, most recently updated first.
    """
    github = GitHubReadOperations(auth.token)

    try:
        result = await github.get_user_repos(page=page, per_page=per_page, sort=sort)
    except GitHubAPIError as e:
        raise github_error_to_http(e) from None
    except httpx.HTTPError as e:
        logger.warning(f"GitHub unreachable listing repos: {e}")
        raise UpstreamError("Failed to reach GitHub") from None

    return GitHubReposListResponse(
        repos=[GitHubRepoPreview(**asdict(repo)) for repo in result.repos],
        page=page,
        per_page=per_page,
        has_more=result.has_more,
        rate_limit_remaining=result.rate_limit_remaining,
    )


@router.get("/repos/{owner}/{repo}/collaborators", response_model=list[CollaboratorPreview])
async def list_repo_collaborators(
    owner: str,
    repo: str,
    auth: CurrentIdentity,
) -> list[CollaboratorPreview]:
    """
    List collaborators of a repository.

    GitHub only answers for repositories the caller can push to.
    """
    github = GitHubReadOperations(auth.token)

    try:
        collaborators = await github.get_repo_collaborators(owner, repo)
    except GitHubAPIError as e:
        raise github_error_to_http(e) from None
    except httpx.HTTPError as e:
        logger.warning(f"GitHub unreachable listing collaborators for {owner}/{repo}: {e}")
        raise UpstreamError("Failed to reach GitHub") from None

    return [CollaboratorPreview(**asdict(c)) for c in collaborators]
