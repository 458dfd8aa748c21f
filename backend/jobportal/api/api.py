"""
API Router Aggregator.

Combines all v1 API routers into a single router for the main app.
"""

from fastapi import APIRouter

from jobportal.api.v1 import user

api_router = APIRouter()

api_router.include_router(
    user.router,
    prefix="/user",
    tags=["User"],
)
