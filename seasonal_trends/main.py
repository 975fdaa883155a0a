from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from datetime import datetime

from seasonal_trends.api.v1.api import api_router
from seasonal_trends.core.config import settings
from seasonal_trends.core.exceptions import ApplicationError
from seasonal_trends.core.logging import RequestLoggingMiddleware, logger

app = FastAPI(
    title="Seasonal Trends Engine",
    description="Seasonal decomposition, forecasting and insights for the resale admin dashboard",
    version=settings.VERSION,
    docs_url="/docs" if not settings.is_production else None,
    redoc_url="/redoc" if not settings.is_production else None
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add request logging middleware
app.add_middleware(RequestLoggingMiddleware)

app.include_router(api_router, prefix=settings.API_V1_STR)


@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    detail = exc.detail if isinstance(exc.detail, dict) else {"error": exc.detail}
    return JSONResponse(
        content=jsonable_encoder({
            "success": False,
            **detail,
            "status_code": exc.status_code
        }),
        status_code=exc.status_code
    )


@app.exception_handler(ApplicationError)
async def application_error_handler(request, exc: ApplicationError):
    logger.error(f"{exc.__class__.__name__}: {str(exc)}", extra={"path": request.url.path})
    return JSONResponse(
        content=jsonable_encoder({
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__,
            "timestamp": datetime.now().isoformat()
        }),
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


@app.get("/")
async def root():
    return {
        "name": "Seasonal Trends Engine",
        "version": settings.VERSION,
        "docs": "/docs" if not settings.is_production else None
    }
