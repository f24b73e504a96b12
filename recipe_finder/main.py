"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recipe_finder.api import auth, cart, cuisines, recipes, users
from recipe_finder.config import get_settings
from recipe_finder.database import connect
from recipe_finder.exceptions import register_exception_handlers

settings = get_settings()

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Set up root logging from settings."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    configure_logging()
    logger.info(f"Starting Recipe Finder API ({settings.environment})")
    yield


app = FastAPI(
    title="Recipe Finder API",
    description="Browse, search and rate recipes, and keep a shopping cart",
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Register routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(recipes.router)
app.include_router(cuisines.router)
app.include_router(cart.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    try:
        connect()
        database = "ok"
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        database = f"error: {e}"
    return {"status": "healthy", "environment": settings.environment, "database": database}
