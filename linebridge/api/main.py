"""
FastAPI Application — HTTP Host for the Write Node

One write node and one connection resolver live for the whole process.
Shutdown clears the node status and then releases the store client.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from linebridge import __version__
from linebridge.config import settings
from linebridge.node import WriteNode
from linebridge.storage import ConnectionResolver, load_config
from .routes import router


logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL.upper())


def build_resolver() -> Optional[ConnectionResolver]:
    """Resolver from settings, or None when no endpoint is configured."""
    config = load_config()
    if not config.endpoint:
        return None
    return ConnectionResolver(config)


def create_app(resolver: Optional[ConnectionResolver] = None) -> FastAPI:
    """
    Build the application.
    
    Args:
        resolver: Connection resolver to use. Built from settings if None.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        configure_logging()
        owned = resolver or build_resolver()
        
        # Startup
        logger.info(f"🚀 Starting {settings.PROJECT_NAME}")
        logger.info(f"📍 Running in {settings.ENVIRONMENT} mode")
        if owned is not None:
            logger.info(f"🔗 Store: {owned.config.endpoint}")
        
        app.state.resolver = owned
        app.state.node = WriteNode(
            owned,
            measurement=settings.NODE_MEASUREMENT or None,
            database=settings.NODE_DATABASE or None,
            name=settings.NODE_NAME,
            reset_after=settings.STATUS_RESET_SECONDS,
        )
        yield
        
        # Shutdown
        await app.state.node.close()
        if owned is not None:
            await owned.teardown()
        logger.info(f"👋 Shutting down {settings.PROJECT_NAME}")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Message to line protocol write API",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.include_router(router, tags=["Write"])

    @app.get("/ping", tags=["Health"])
    async def ping():
        """Lightweight heartbeat — no store access."""
        return {"status": "ok"}

    return app


app = create_app()
