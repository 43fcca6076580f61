"""Data types for GitHub API responses."""

from dataclasses import dataclass


@dataclass
class GitHubRepo:
    """Normalized GitHub repository data."""

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


@dataclass
class GitHubReposResponse:
    """Response from listing GitHub repos."""

    repos: list[GitHubRepo]
    total_count: int
    has_more: bool
    rate_limit_remaining: int | None


@dataclass
class GitHubIdentity:
    """The GitHub user a token belongs to."""

    login: str
    id: int
    avatar_url: str | None = None


@dataclass
class CollaboratorInfo:
    """A collaborator on a repository."""

    login: str
    id: int
    avatar_url: str | None
    html_url: str | None
