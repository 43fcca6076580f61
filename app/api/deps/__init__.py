"""API dependencies - re-exports from submodules."""

from .auth import (
    AuthContext,
    CurrentIdentity,
    DbSession,
    extract_token,
    get_current_identity,
    get_identity_resolver,
    token_header,
)
from .dashboard_access import get_owned_dashboard

__all__ = [
    # Auth
    "token_header",
    "extract_token",
    "get_identity_resolver",
    "get_current_identity",
    "AuthContext",
    "DbSession",
    "CurrentIdentity",
    # Dashboards
    "get_owned_dashboard",
]
