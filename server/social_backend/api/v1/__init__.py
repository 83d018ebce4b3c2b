"""API v1 routers."""

from fastapi import APIRouter

from social_backend.api.v1 import health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
