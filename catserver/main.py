"""
FastAPI application serving read-only access to one directory tree.
"""

import logging

from fastapi import FastAPI

from catserver.api.routers import router as api_router
from catserver.config.settings import settings

# Create FastAPI app
app = FastAPI(title="cat-server", description="Read-only file browsing API")
app.include_router(api_router)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Get logger for this module
logger = logging.getLogger(__name__)
logger.info(f"Serving files from {settings.base_directory}")
