"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1 import articles, categories, health, repair_requests, support_requests
from app.config import settings
from app.db import dispose_engine
from app.logging import setup_logging
from app.utils.redis import close_redis

# Configure logging before anything else
setup_logging()

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup/shutdown events."""
    logger.info("Starting ServITech API", debug=settings.debug)

    yield

    logger.info("Shutting down ServITech API")
    await dispose_engine()
    await close_redis()
    logger.info("Database and Redis connections closed")


app = FastAPI(
    title="ServITech API",
    description="Repair requests, support requests and product catalog API for ServITech",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.backend_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(health.router, prefix="/api/v1", tags=["health"])
app.include_router(repair_requests.router, prefix="/api/v1", tags=["repair-requests"])
app.include_router(categories.router, prefix="/api/v1", tags=["categories"])
app.include_router(articles.router, prefix="/api/v1", tags=["articles"])
app.include_router(support_requests.router, prefix="/api/v1", tags=["support-requests"])
