"""AI summary of dashboard activity the client already fetched."""

import logging
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.api.deps import get_owned_dashboard
from app.core.exceptions import ServiceUnavailableError, UpstreamError, ValidationError
from app.models import Dashboard
from app.services.activity import (
    ActivityData,
    ActivitySummarizer,
    SummarizerError,
    SummarizerNotConfiguredError,
    filter_by_contributor,
    get_activity_summarizer,
)

router = APIRouter()
logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "AI summary is not configured on the server"


class SummaryRequest(BaseModel):
    """Activity as returned by the activity endpoint, plus its window."""

    activity: Any = None
    since: str | None = None
    until: str | None = None
    contributor: str | None = None


def _parse_activity(body: SummaryRequest) -> ActivityData:
    if body.activity is None:
        raise ValidationError("activity is required")
    if not isinstance(body.activity, dict):
        raise ValidationError("activity.repos must be an array")
    try:
        return ActivityData.from_payload(body.activity, body.since, body.until)
    except ValueError as e:
        raise ValidationError(str(e)) from e


@router.post("/{dashboard_id}/summary")
async def generate_dashboard_summary(
    body: SummaryRequest | None = None,
    dashboard: Dashboard = Depends(get_owned_dashboard),
    summarizer: ActivitySummarizer = Depends(get_activity_summarizer),
) -> dict:
    """
    Summarize dashboard activity with Claude.

    The payload is validated before anything is sent upstream.
    """
    activity = _parse_activity(body or SummaryRequest())
    activity = filter_by_contributor(activity, body.contributor if body else None)

    if not summarizer.is_configured:
        raise ServiceUnavailableError(NOT_CONFIGURED_MESSAGE)

    try:
        summary = await summarizer.summarize(dashboard.name, activity)
    except SummarizerNotConfiguredError:
        raise ServiceUnavailableError(NOT_CONFIGURED_MESSAGE) from None
    except SummarizerError as e:
        raise UpstreamError(e.message) from e

    logger.info(f"Generated summary for dashboard {dashboard.id}")
    return {"summary": summary}
