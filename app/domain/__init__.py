from app.domain.dashboard_operations import dashboard_ops

__all__ = [
    "dashboard_ops",
]
