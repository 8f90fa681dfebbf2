"""
Social Media Backend API Server
Core functionality: account registration/login and message CRUD
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import ALLOWED_ORIGINS
from database.connection import init_database, close_database
from api.routes import health, accounts, messages
from utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)

def create_app(database_url: Optional[str] = None) -> FastAPI:
    """
    Application factory

    Args:
        database_url: Overrides DATABASE_URL for the store created at startup

    Returns:
        FastAPI application instance
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager"""
        app.state.store = await init_database(database_url)
        yield
        await close_database(app.state.store)

    app = FastAPI(
        title="Social Media Backend",
        description="Backend API for account registration, login and message management",
        version="1.0.0",
        lifespan=lifespan
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # Setup centralized error handling
    setup_error_handling(app)

    # Include API routes
    app.include_router(health.router, tags=["Health"])
    app.include_router(accounts.router, tags=["Accounts"])
    app.include_router(messages.router, tags=["Messages"])

    return app


# FastAPI app instance is exported for use by uvicorn
# Server startup is handled by main.py at the project root
app = create_app()
