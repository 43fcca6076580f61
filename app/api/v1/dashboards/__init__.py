"""Dashboards API endpoints package.

- crud.py: List, get, create, update, delete
- activity.py: Aggregated commits / pull requests / issues
- summary.py: AI summary of activity
"""

from fastapi import APIRouter

from .activity import get_activity_aggregator
from .activity import router as activity_router
from .crud import router as crud_router
from .summary import router as summary_router

# Compose the main router; the prefix goes on each include because the
# collection routes have an empty path
router = APIRouter(tags=["dashboards"])
router.include_router(crud_router, prefix="/dashboards")
router.include_router(activity_router, prefix="/dashboards")
router.include_router(summary_router, prefix="/dashboards")

__all__ = [
    "router",
    "get_activity_aggregator",
]
