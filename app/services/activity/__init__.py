"""
Dashboard activity package.

- types.py: ActivityWindow, RepoActivity, ActivityData, FetchSlice
- aggregator.py: Concurrent fetch + normalization per repository
- contributors.py: Contributor extraction and filtering
- formatter.py: Deterministic markdown digest
- summarizer.py: Claude-backed summary of the digest
"""

from .aggregator import ActivityAggregator, filter_issues, filter_pulls
from .contributors import (
    ALL_CONTRIBUTORS,
    collect_contributors,
    filter_by_contributor,
)
from .formatter import MAX_ITEMS_PER_KIND, format_activity_digest
from .summarizer import (
    ActivitySummarizer,
    SummarizerError,
    SummarizerNotConfiguredError,
    get_activity_summarizer,
)
from .types import ActivityData, ActivityWindow, FetchSlice, RepoActivity

__all__ = [
    "ActivityAggregator",
    "ActivityData",
    "ActivitySummarizer",
    "ActivityWindow",
    "ALL_CONTRIBUTORS",
    "FetchSlice",
    "MAX_ITEMS_PER_KIND",
    "RepoActivity",
    "SummarizerError",
    "SummarizerNotConfiguredError",
    "collect_contributors",
    "filter_by_contributor",
    "filter_issues",
    "filter_pulls",
    "format_activity_digest",
    "get_activity_summarizer",
]
