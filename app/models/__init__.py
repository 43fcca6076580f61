from app.models.dashboard import (
    Dashboard,
    DashboardCreate,
    DashboardRepository,
    DashboardUpdate,
)

__all__ = [
    "Dashboard",
    "DashboardCreate",
    "DashboardRepository",
    "DashboardUpdate",
]
