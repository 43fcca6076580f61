"""Data types for dashboard activity aggregation."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any, Literal

from app.services.github.helpers import format_github_timestamp, parse_github_timestamp

DEFAULT_WINDOW = timedelta(days=7)

SliceStatus = Literal["initial", "loaded", "error"]


@dataclass(frozen=True)
class FetchSlice:
    """State of one fetched data slice (one kind of item for one repository).

    ``initial``: not fetched yet. ``loaded``: fetched, ``items`` holds the
    result. ``error``: the fetch failed, ``error`` says why.
    """

    status: SliceStatus = "initial"
    items: list[Any] = field(default_factory=list)
    error: str | None = None

    @classmethod
    def loaded(cls, items: list[Any]) -> "FetchSlice":
        return cls(status="loaded", items=items)

    @classmethod
    def failed(cls, message: str) -> "FetchSlice":
        return cls(status="error", error=message)

    def items_or_empty(self) -> list[Any]:
        """Items when loaded; an empty list for initial and error slices."""
        return list(self.items) if self.status == "loaded" else []


@dataclass(frozen=True)
class ActivityWindow:
    """Time range used to scope commits, pull requests and issues."""

    since: datetime
    until: datetime

    @classmethod
    def from_params(
        cls,
        since: str | None = None,
        until: str | None = None,
        now: datetime | None = None,
    ) -> "ActivityWindow":
        """Build a window from optional ISO-8601 strings.

        ``until`` defaults to now and ``since`` to seven days before now.
        Both bounds are truncated to whole seconds.

        Raises:
            ValueError: A bound is not a valid ISO-8601 timestamp.
        """
        now = now or datetime.now(UTC)

        until_dt = parse_github_timestamp(until) if until else now
        if until_dt is None:
            raise ValueError(f"Invalid until timestamp: {until}")

        since_dt = parse_github_timestamp(since) if since else now - DEFAULT_WINDOW
        if since_dt is None:
            raise ValueError(f"Invalid since timestamp: {since}")

        # GitHub timestamps have whole-second precision; the echoed bounds must
        # be the ones applied
        return cls(
            since=since_dt.replace(microsecond=0),
            until=until_dt.replace(microsecond=0),
        )

    @property
    def since_str(self) -> str:
        return format_github_timestamp(self.since)

    @property
    def until_str(self) -> str:
        return format_github_timestamp(self.until)

    def contains(self, moment: datetime | None) -> bool:
        """Inclusive on both bounds; a missing moment is never contained."""
        return moment is not None and self.since <= moment <= self.until


@dataclass
class RepoActivity:
    """Commits, pull requests and issues for one repository.

    Items are GitHub's JSON objects as returned, in GitHub's order.
    """

    repo_full_name: str
    commits: list[Any] = field(default_factory=list)
    pulls: list[Any] = field(default_factory=list)
    issues: list[Any] = field(default_factory=list)

    @property
    def total_items(self) -> int:
        return len(self.commits) + len(self.pulls) + len(self.issues)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RepoActivity":
        """Rebuild from a serialized entry; non-list kinds become empty lists."""

        def as_list(value: Any) -> list[Any]:
            return value if isinstance(value, list) else []

        return cls(
            repo_full_name=str(data.get("repo_full_name") or ""),
            commits=as_list(data.get("commits")),
            pulls=as_list(data.get("pulls")),
            issues=as_list(data.get("issues")),
        )


@dataclass
class ActivityData:
    """Aggregated activity of a dashboard over a window.

    ``repos`` follows the dashboard's repository order.
    """

    since: str
    until: str
    repos: list[RepoActivity] = field(default_factory=list)

    @classmethod
    def from_payload(
        cls,
        activity: dict[str, Any],
        since: str | None = None,
        until: str | None = None,
    ) -> "ActivityData":
        """Rebuild activity sent back by a client.

        Explicit ``since``/``until`` win over the ones inside the payload.

        Raises:
            ValueError: ``repos`` is not a list of objects.
        """
        repos = activity.get("repos")
        if not isinstance(repos, list):
            raise ValueError("activity.repos must be an array")
        if not all(isinstance(r, dict) for r in repos):
            raise ValueError("activity.repos must contain objects")

        return cls(
            since=str(since or activity.get("since") or ""),
            until=str(until or activity.get("until") or ""),
            repos=[RepoActivity.from_dict(r) for r in repos],
        )
