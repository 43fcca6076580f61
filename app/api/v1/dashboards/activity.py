"""Dashboard activity: commits, pull requests and issues over a time window."""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, Query

from app.api.deps import AuthContext, get_current_identity, get_owned_dashboard
from app.core.exceptions import ValidationError
from app.models import Dashboard
from app.services.activity import (
    ActivityAggregator,
    ActivityWindow,
    collect_contributors,
    filter_by_contributor,
)
from app.services.github import GitHubReadOperations

router = APIRouter()
logger = logging.getLogger(__name__)


def get_activity_aggregator(
    auth: AuthContext = Depends(get_current_identity),
) -> ActivityAggregator:
    """Dependency: an aggregator reading GitHub with the caller's token."""
    return ActivityAggregator(GitHubReadOperations(auth.token))


@router.get("/{dashboard_id}/activity")
async def get_dashboard_activity(
    since: str | None = Query(None, description="ISO-8601 start (default: 7 days ago)"),
    until: str | None = Query(None, description="ISO-8601 end (default: now)"),
    contributor: str | None = Query(None, description="Only this login's activity ('all' for everyone)"),
    dashboard: Dashboard = Depends(get_owned_dashboard),
    aggregator: ActivityAggregator = Depends(get_activity_aggregator),
) -> dict:
    """
    Aggregate recent activity across the dashboard's repositories.

    A repository GitHub fails to answer for contributes empty lists instead of
    failing the request. ``contributors`` always lists everyone active in the
    window, even when ``contributor`` narrows ``repos``.
    """
    try:
        window = ActivityWindow.from_params(since, until)
    except ValueError as e:
        raise ValidationError(str(e)) from e

    activity = await aggregator.aggregate(dashboard.repo_full_names, window)
    contributors = collect_contributors(activity)
    visible = filter_by_contributor(activity, contributor)

    logger.info(
        f"Dashboard {dashboard.id}: {len(visible.repos)} repos, "
        f"{len(contributors)} contributors between {visible.since} and {visible.until}"
    )

    return {
        "repos": [asdict(r) for r in visible.repos],
        "since": visible.since,
        "until": visible.until,
        "contributors": contributors,
    }
