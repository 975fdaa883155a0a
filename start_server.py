"""
Start script for the Seasonal Trends Engine API server.

Runs import and environment checks before handing the app to uvicorn.
"""
import os
import sys
import traceback
import logging
import uvicorn

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger("server_startup")


def check_environment():
    """Report whether a .env file and the redis settings are present."""
    env_file = os.path.join(os.path.dirname(__file__), '.env')
    if not os.path.exists(env_file):
        logger.warning(f".env file not found at {env_file}. Using environment variables or defaults.")
    else:
        logger.info(f".env file found at {env_file}")

    if os.environ.get("REDIS_ENABLED", "false").lower() == "true" and not os.environ.get("REDIS_URL"):
        logger.warning("REDIS_ENABLED is true but REDIS_URL is not set, falling back to redis://localhost:6379/0")


def start_server():
    """Start the FastAPI server with proper error handling."""
    check_environment()

    logger.info("Importing application...")
    try:
        from seasonal_trends.main import app  # noqa: F401
        logger.info("Application imported successfully")
    except Exception as e:
        logger.error(f"Error importing application: {e}")
        traceback.print_exc()
        return 1

    host = os.environ.get("HOST", "127.0.0.1")
    port = int(os.environ.get("PORT", "8000"))
    logger.info(f"Starting server on http://{host}:{port}")
    uvicorn.run(
        "seasonal_trends.main:app",
        host=host,
        port=port,
        reload=os.environ.get("ENV", "development") == "development",
        log_level="info"
    )
    return 0


if __name__ == "__main__":
    sys.exit(start_server())
