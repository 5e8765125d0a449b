"""
Docker Dashboard API - application entry point.

Creates a FastAPI app using the library factory and starts uvicorn.
"""
import logging
import os

import uvicorn

from docker_dashboard import create_app
from docker_dashboard.services.config import ConfigService

API_PORT = int(os.getenv("API_PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
RELOAD = os.getenv("RELOAD", "false").strip().lower() in {"1", "true", "yes", "on"}

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# FastAPI Application
config = ConfigService.from_env()
app = create_app(config=config)

if __name__ == "__main__":
    logger.info(f"Starting Docker Dashboard API on http://0.0.0.0:{API_PORT}")
    logger.info(f"Docker host: {config.docker_host}")
    logger.info(f"Log level set to: {LOG_LEVEL}")
    uvicorn.run("main:app", host="0.0.0.0", port=API_PORT, reload=RELOAD)
