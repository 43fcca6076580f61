"""AI-powered activity summarizer using Claude.

Renders a dashboard's activity into the markdown digest and asks Claude for a
readable summary. The reply is returned verbatim.
"""

import logging
from dataclasses import dataclass

import anthropic

from app.config import settings
from app.services.interpreter.base import BaseInterpreter

from .formatter import format_activity_digest
from .types import ActivityData

logger = logging.getLogger(__name__)


class SummarizerNotConfiguredError(Exception):
    """No API key is configured for the summarizer."""


class SummarizerError(Exception):
    """The summarizer call failed; ``message`` is the upstream error."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


@dataclass
class DashboardActivityInput:
    """Input for activity summary generation."""

    dashboard_name: str
    activity: ActivityData


@dataclass
class ActivitySummary:
    """Output from activity summary generation."""

    summary: str


class ActivitySummarizer(BaseInterpreter[DashboardActivityInput, ActivitySummary]):
    """Summarizes dashboard activity for an engineering manager."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        max_tokens: int | None = None,
    ):
        super().__init__(api_key)
        self.model = model or settings.summary_model
        self.max_tokens = max_tokens or settings.summary_max_tokens

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def get_system_prompt(self) -> str:
        return (
            "You are a helpful engineering manager assistant. Summarize the GitHub "
            "activity data provided in a concise, readable markdown format. Highlight "
            "key accomplishments, notable PRs, and any patterns or concerns."
        )

    def format_input(self, input_data: DashboardActivityInput) -> str:
        return format_activity_digest(input_data.dashboard_name, input_data.activity)

    def parse_output(self, response_text: str) -> ActivitySummary:
        return ActivitySummary(summary=response_text)

    async def summarize(self, dashboard_name: str, activity: ActivityData) -> str:
        """Summarize activity, returning the model's text unchanged.

        Raises:
            SummarizerNotConfiguredError: No API key configured.
            SummarizerError: The API call failed.
        """
        if not self.is_configured:
            raise SummarizerNotConfiguredError("Summarizer not configured")

        try:
            result = await self.interpret(
                DashboardActivityInput(dashboard_name=dashboard_name, activity=activity)
            )
        except anthropic.APIError as e:
            logger.warning(f"Activity summary generation failed: {e}")
            raise SummarizerError(e.message) from e

        return result.summary


def get_activity_summarizer() -> ActivitySummarizer:
    """Dependency: a summarizer built from current settings."""
    return ActivitySummarizer()
