"""
FastAPI Application Entry Point for PokerAssist.

This module creates and configures the FastAPI application with:
- HTTP routes for one-shot evaluation
- WebSocket endpoint for live slot-by-slot analysis
- CORS middleware for a browser front end
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pokerassist import __version__
from pokerassist.server.routes import router
from pokerassist.server.websocket import websocket_endpoint

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("PokerAssist server starting up...")
    yield
    logger.info("PokerAssist server shutting down...")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="PokerAssist",
        description="Texas Hold'em hand evaluation, outs and threats API",
        version=__version__,
        lifespan=lifespan,
    )

    # CORS middleware for development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include HTTP routes
    app.include_router(router)

    # WebSocket endpoint
    app.websocket("/ws")(websocket_endpoint)

    return app


# Create the application instance
app = create_app()


def main():
    """Run the server (for use as entry point)."""
    import uvicorn
    uvicorn.run(
        "pokerassist.server.app:app",
        host="0.0.0.0",
        port=8000,
    )


if __name__ == "__main__":
    main()
