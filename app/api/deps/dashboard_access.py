"""Dashboard ownership dependencies."""

import uuid as uuid_pkg

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.exceptions import NotFoundError
from app.domain import dashboard_ops
from app.models import Dashboard

from .auth import AuthContext, get_current_identity


async def get_owned_dashboard(
    dashboard_id: uuid_pkg.UUID,
    db: AsyncSession = Depends(get_db),
    auth: AuthContext = Depends(get_current_identity),
) -> Dashboard:
    """
    Load a dashboard owned by the caller.

    Raises 404 both when the dashboard does not exist and when it belongs to
    someone else, so callers cannot probe for other users' dashboards.
    """
    dashboard = await dashboard_ops.get_for_owner(db, dashboard_id, auth.login)
    if dashboard is None:
        raise NotFoundError("Dashboard")
    return dashboard
