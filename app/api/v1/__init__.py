from app.api.v1 import auth, dashboards, github

__all__ = [
    "auth",
    "dashboards",
    "github",
]
