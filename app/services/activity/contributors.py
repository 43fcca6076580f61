"""Contributor extraction and per-contributor filtering of activity."""

from dataclasses import replace
from typing import Any

from .types import ActivityData, RepoActivity

# Selection value meaning "everyone"
ALL_CONTRIBUTORS = "all"


def commit_author_login(commit: Any) -> str | None:
    """GitHub login linked to a commit, if GitHub could match the author."""
    if not isinstance(commit, dict):
        return None
    author = commit.get("author")
    if isinstance(author, dict) and author.get("login"):
        return str(author["login"])
    return None


def item_user_login(item: Any) -> str | None:
    """Login of the user who opened a pull request or issue."""
    if not isinstance(item, dict):
        return None
    user = item.get("user")
    if isinstance(user, dict) and user.get("login"):
        return str(user["login"])
    return None


def collect_contributors(activity: ActivityData) -> list[str]:
    """Distinct contributor logins across all repositories and kinds.

    Sorted with plain (case-sensitive) string ordering.
    """
    logins: set[str] = set()
    for repo in activity.repos:
        logins.update(filter(None, (commit_author_login(c) for c in repo.commits)))
        logins.update(filter(None, (item_user_login(pr) for pr in repo.pulls)))
        logins.update(filter(None, (item_user_login(i) for i in repo.issues)))
    return sorted(logins)


def filter_by_contributor(activity: ActivityData, contributor: str | None) -> ActivityData:
    """Narrow activity to one contributor's commits, pull requests and issues.

    No selection (None, "" or "all") returns ``activity`` itself. Repositories
    left without any item are dropped.
    """
    if not contributor or contributor == ALL_CONTRIBUTORS:
        return activity

    repos: list[RepoActivity] = []
    for repo in activity.repos:
        narrowed = RepoActivity(
            repo_full_name=repo.repo_full_name,
            commits=[c for c in repo.commits if commit_author_login(c) == contributor],
            pulls=[pr for pr in repo.pulls if item_user_login(pr) == contributor],
            issues=[i for i in repo.issues if item_user_login(i) == contributor],
        )
        if narrowed.total_items > 0:
            repos.append(narrowed)

    return replace(activity, repos=repos)
