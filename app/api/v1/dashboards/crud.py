"""Dashboard CRUD operations: list, get, create, update, delete."""

import logging

from fastapi import APIRouter, Depends, status

from app.api.deps import CurrentIdentity, DbSession, get_owned_dashboard
from app.core.exceptions import ValidationError
from app.domain import dashboard_ops
from app.models import Dashboard, DashboardCreate, DashboardUpdate

from .serializers import serialize_dashboard

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=list[dict])
async def list_dashboards(auth: CurrentIdentity, db: DbSession):
    """List the caller's dashboards, newest first."""
    dashboards = await dashboard_ops.list_for_owner(db, auth.login)
    return [serialize_dashboard(d) for d in dashboards]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_dashboard(
    auth: CurrentIdentity,
    db: DbSession,
    data: DashboardCreate | None = None,
) -> dict:
    """
    Create a dashboard owned by the caller.

    Duplicate repository names are stored once, in first-seen order.
    """
    data = data or DashboardCreate()
    name = (data.name or "").strip()
    if not name:
        raise ValidationError("name is required")

    dashboard = await dashboard_ops.create(
        db,
        github_username=auth.login,
        name=name,
        repositories=data.repositories or [],
    )
    logger.info(f"Dashboard {dashboard.id} created by {auth.login}")
    return serialize_dashboard(dashboard)


@router.get("/{dashboard_id}")
async def get_dashboard(dashboard: Dashboard = Depends(get_owned_dashboard)) -> dict:
    """Get a single dashboard with its repositories."""
    return serialize_dashboard(dashboard)


@router.put("/{dashboard_id}")
@router.patch("/{dashboard_id}")
async def update_dashboard(
    db: DbSession,
    data: DashboardUpdate | None = None,
    dashboard: Dashboard = Depends(get_owned_dashboard),
) -> dict:
    """
    Update a dashboard's name and/or repositories.

    A blank name is ignored. ``repositories``, when given, replaces the whole
    set.
    """
    data = data or DashboardUpdate()
    name = (data.name or "").strip() or None
    updated = await dashboard_ops.update(
        db,
        dashboard,
        name=name,
        repositories=data.repositories,
    )
    return serialize_dashboard(updated)


@router.delete("/{dashboard_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_dashboard(
    db: DbSession,
    dashboard: Dashboard = Depends(get_owned_dashboard),
) -> None:
    """Delete a dashboard; its repository rows go with it."""
    await dashboard_ops.delete(db, dashboard)
    logger.info(f"Dashboard {dashboard.id} deleted")
