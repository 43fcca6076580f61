from fastapi import APIRouter

from app.api.v1 import auth, dashboards, github

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(auth.router)
api_router.include_router(dashboards.router)
api_router.include_router(github.router)
