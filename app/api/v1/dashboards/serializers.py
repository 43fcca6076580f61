"""Response shaping for dashboard endpoints."""

from typing import Any

from app.models import Dashboard


def serialize_dashboard(dashboard: Dashboard) -> dict[str, Any]:
    return {
        "id": str(dashboard.id),
        "name": dashboard.name,
        "github_username": dashboard.github_username,
        "repositories": dashboard.repo_full_names,
        "created_at": dashboard.created_at.isoformat() if dashboard.created_at else None,
        "updated_at": dashboard.updated_at.isoformat() if dashboard.updated_at else None,
    }
