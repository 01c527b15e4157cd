"""Serpent - FastAPI Battlesnake server.

Exposes the Battlesnake webhook API (info, start, move, end) on top of the
move decision engine.
"""

import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request

from .config import get_settings
from .api import api_router

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown."""
    logger.info(f"Starting {settings.app_name} ({settings.server_id})...")
    yield
    logger.info(f"Shutting down {settings.app_name}...")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="""
    Serpent Battlesnake API.

    Features:
    - Tail-aware board projection and flood-fill space analysis
    - Opponent intent inference and move prediction
    - Collision-risk filtered, heuristic move scoring
    """,
    version=settings.snake_version,
    debug=settings.debug,
    lifespan=lifespan,
)


@app.middleware("http")
async def add_server_id(request: Request, call_next):
    """Tag every response with the server id."""
    response = await call_next(request)
    response.headers["Server"] = settings.server_id
    return response


# Include Battlesnake routes
app.include_router(api_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# For running with uvicorn directly
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "serpent.main:app",
        host="0.0.0.0",
        port=int(os.environ.get("PORT", 8000)),
        reload=settings.debug,
        server_header=False,
    )
