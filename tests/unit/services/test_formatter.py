"""Unit tests for the markdown activity digest."""

from __future__ import annotations

from app.services.activity import (
    MAX_ITEMS_PER_KIND,
    ActivityData,
    RepoActivity,
    format_activity_digest,
)

from tests.helpers.mock_factories import commit_json, issue_json, pull_json

T = "2026-03-04T00:00:00Z"


def _data(*repos: RepoActivity) -> ActivityData:
    return ActivityData(
        since="2026-03-01T00:00:00Z",
        until="2026-03-08T00:00:00Z",
        repos=list(repos),
    )


class TestFormatActivityDigest:
    def test_header_and_period(self):
        digest = format_activity_digest("Team", _data())

        assert digest.splitlines()[:2] == [
            '# Activity Summary for "Team"',
            "**Period:** 2026-03-01T00:00:00Z to 2026-03-08T00:00:00Z",
        ]

    def test_full_repository_section(self):
        repo = RepoActivity(
            repo_full_name="octo-org/api",
            commits=[commit_json(login="alice", message="Fix login\n\nLong body")],
            pulls=[pull_json(T, login="bob", title="Add search", state="closed")],
            issues=[issue_json(T, login="carol", title="Crash on start")],
        )

        digest = format_activity_digest("Team", _data(repo))

        assert digest == "\n".join(
            [
                '# Activity Summary for "Team"',
                "**Period:** 2026-03-01T00:00:00Z to 2026-03-08T00:00:00Z",
                "",
                "## octo-org/api",
                "- Commits: 1, Pull Requests: 1, Issues: 1",
                "### Recent Commits",
                "- Fix login (alice)",
                "### Pull Requests",
                "- [closed] Add search by bob",
                "### Issues",
                "- [open] Crash on start by carol",
                "",
            ]
        )

    def test_commit_falls_back_to_git_author_name(self):
        repo = RepoActivity(
            repo_full_name="o/r",
            commits=[commit_json(login=None, message="Initial", author_name="Jane Dev")],
        )

        assert "- Initial (Jane Dev)" in format_activity_digest("D", _data(repo))

    def test_empty_sections_are_omitted(self):
        repo = RepoActivity(repo_full_name="o/quiet")

        digest = format_activity_digest("D", _data(repo))

        assert "- Commits: 0, Pull Requests: 0, Issues: 0" in digest
        assert "###" not in digest

    def test_items_capped_but_counts_are_full(self):
        commits = [commit_json(message=f"commit {i}") for i in range(25)]
        repo = RepoActivity(repo_full_name="o/busy", commits=commits)

        digest = format_activity_digest("D", _data(repo))

        assert "- Commits: 25, Pull Requests: 0, Issues: 0" in digest
        commit_lines = [line for line in digest.splitlines() if line.startswith("- commit ")]
        assert len(commit_lines) == MAX_ITEMS_PER_KIND == 10
        assert commit_lines[-1].startswith("- commit 9 ")

    def test_deterministic(self):
        repo = RepoActivity(repo_full_name="o/r", pulls=[pull_json(T)])

        assert format_activity_digest("D", _data(repo)) == format_activity_digest("D", _data(repo))
