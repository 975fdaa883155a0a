"""
API Router for v1 REST API endpoints

This module defines the FastAPI routers for all v1 API endpoints.
"""
from fastapi import APIRouter

from seasonal_trends.api.v1.endpoints import health, seasonal_trends

# Create main API router
api_router = APIRouter()

api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"]
)

api_router.include_router(
    seasonal_trends.router,
    prefix="/seasonal-trends",
    tags=["seasonal trends"]
)
