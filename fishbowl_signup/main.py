"""FastAPI application entry point.

This module initialises the FastAPI app, configures logging and
registers API routes.  The ``uvicorn`` ASGI server can point to
``fishbowl_signup.main:app`` to serve the application.
"""

from fastapi import FastAPI
from loguru import logger

from .utils.logger import setup_logging
from .controllers.subscription_controller import router as subscription_router
from .utils.error_handler import SubscriptionError, subscription_exception_handler


def create_app() -> FastAPI:
    """Create and configure a FastAPI application."""
    setup_logging()

    app = FastAPI(title="Fishbowl Signup", version="0.1.0")

    app.add_exception_handler(SubscriptionError, subscription_exception_handler)

    app.include_router(subscription_router)

    @app.get("/health", tags=["Health"])
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        logger.debug("Health check invoked")
        return {"status": "ok"}

    return app


# Create an application instance for ASGI servers
app = create_app()
