"""
Health check endpoint for the API
"""

from fastapi import APIRouter, Depends
from typing import Dict, Any
import time
import datetime

from seasonal_trends.api.deps import get_cache_store
from seasonal_trends.core.cache import CacheStore
from seasonal_trends.core.config import settings

router = APIRouter()


@router.get("", summary="Health Check")
async def health_check(cache: CacheStore = Depends(get_cache_store)) -> Dict[str, Any]:
    """
    Health check endpoint for monitoring services like Kubernetes.
    Returns version, environment and cache reachability.
    """
    start_time = time.time()

    cache_ok = await cache.ping()
    cache_status = {
        "backend": getattr(cache, "backend", cache.__class__.__name__),
        "status": "healthy" if cache_ok else "unhealthy",
    }

    response_time = time.time() - start_time

    return {
        "status": "ok" if cache_ok else "degraded",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "cache": cache_status,
        "timestamp": datetime.datetime.now().isoformat(),
        "response_time_ms": round(response_time * 1000, 2),
    }
