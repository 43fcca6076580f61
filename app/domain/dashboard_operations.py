"""Dashboard operations with owner-scoped visibility.

Dashboards belong to a GitHub login (``github_username``). Every read and
write is filtered by that login, so a dashboard owned by someone else is
indistinguishable from one that does not exist.
"""

import uuid as uuid_pkg
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.dashboard import Dashboard, DashboardRepository


def normalize_repo_names(repositories: Iterable[str]) -> list[str]:
    """Strip, drop blanks and collapse duplicates, keeping first-seen order."""
    cleaned = (name.strip() for name in repositories)
    return list(dict.fromkeys(name for name in cleaned if name))


def _build_repositories(repositories: Iterable[str]) -> list[DashboardRepository]:
    return [
        DashboardRepository(repo_full_name=name, position=position)
        for position, name in enumerate(normalize_repo_names(repositories))
    ]


class DashboardOperations:
    """CRUD operations for Dashboard model."""

    def __init__(self):
        self.model = Dashboard

    async def list_for_owner(
        self,
        db: AsyncSession,
        github_username: str,
    ) -> list[Dashboard]:
        """Get all dashboards owned by a GitHub login, newest first."""
        statement = (
            select(Dashboard)
            .where(Dashboard.github_username == github_username)
            .order_by(Dashboard.created_at.desc())
        )
        result = await db.execute(statement)
        return list(result.scalars().all())

    async def get_for_owner(
        self,
        db: AsyncSession,
        id: uuid_pkg.UUID,
        github_username: str,
    ) -> Dashboard | None:
        """Get a dashboard by ID, scoped to its owner."""
        statement = select(Dashboard).where(
            Dashboard.id == id,
            Dashboard.github_username == github_username,
        )
        result = await db.execute(statement)
        return result.scalar_one_or_none()

    async def create(
        self,
        db: AsyncSession,
        github_username: str,
        name: str,
        repositories: Iterable[str] = (),
    ) -> Dashboard:
        """Create a dashboard together with its repository rows.

        Duplicate repository names are collapsed to a single row so the
        (dashboard_id, repo_full_name) unique constraint is never violated.
        """
        dashboard = Dashboard(
            name=name,
            github_username=github_username,
            repositories=_build_repositories(repositories),
        )
        db.add(dashboard)
        await db.flush()
        await db.refresh(dashboard)
        return dashboard

    async def update(
        self,
        db: AsyncSession,
        dashboard: Dashboard,
        name: str | None = None,
        repositories: Iterable[str] | None = None,
    ) -> Dashboard:
        """Apply a partial update.

        When ``repositories`` is given the existing rows are deleted and the
        new set inserted. The delete is flushed first so re-adding a name that
        was already present does not trip the unique constraint.
        """
        if name:
            dashboard.name = name

        if repositories is not None:
            dashboard.repositories.clear()
            await db.flush()
            dashboard.repositories.extend(_build_repositories(repositories))

        dashboard.touch()
        db.add(dashboard)
        await db.flush()
        await db.refresh(dashboard)
        return dashboard

    async def delete(self, db: AsyncSession, dashboard: Dashboard) -> None:
        """Delete a dashboard; repository rows go with it (ORM and FK cascade)."""
        await db.delete(dashboard)
        await db.flush()


dashboard_ops = DashboardOperations()
