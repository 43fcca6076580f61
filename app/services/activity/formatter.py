"""Markdown digest of dashboard activity, used as the summarizer prompt."""

from typing import Any

from .contributors import commit_author_login, item_user_login
from .types import ActivityData

# Hard cap per kind and repository; bounds the prompt size
MAX_ITEMS_PER_KIND = 10


def _commit_line(commit: Any) -> str:
    if not isinstance(commit, dict):
        return "- (unknown commit)"

    details = commit.get("commit") if isinstance(commit.get("commit"), dict) else {}
    message = str(details.get("message") or "")
    first_line = message.split("\n")[0]

    author = commit_author_login(commit)
    if author is None:
        git_author = details.get("author")
        author = git_author.get("name") if isinstance(git_author, dict) else None

    return f"- {first_line} ({author or 'unknown'})"


def _issue_line(item: Any) -> str:
    if not isinstance(item, dict):
        return "- (unknown item)"
    login = item_user_login(item) or "unknown"
    return f"- [{item.get('state', 'unknown')}] {item.get('title', '')} by {login}"


def format_activity_digest(dashboard_name: str, activity: ActivityData) -> str:
    """Render activity as deterministic markdown.

    One section per repository with a count line and at most
    MAX_ITEMS_PER_KIND items of each kind. Counts report full list lengths.
    """
    lines = [
        f'# Activity Summary for "{dashboard_name}"',
        f"**Period:** {activity.since} to {activity.until}",
        "",
    ]

    for repo in activity.repos:
        lines.append(f"## {repo.repo_full_name}")
        lines.append(
            f"- Commits: {len(repo.commits)}, Pull Requests: {len(repo.pulls)}, "
            f"Issues: {len(repo.issues)}"
        )

        if repo.commits:
            lines.append("### Recent Commits")
            lines.extend(_commit_line(c) for c in repo.commits[:MAX_ITEMS_PER_KIND])

        if repo.pulls:
            lines.append("### Pull Requests")
            lines.extend(_issue_line(pr) for pr in repo.pulls[:MAX_ITEMS_PER_KIND])

        if repo.issues:
            lines.append("### Issues")
            lines.extend(_issue_line(i) for i in repo.issues[:MAX_ITEMS_PER_KIND])

        lines.append("")

    return "\n".join(lines)
