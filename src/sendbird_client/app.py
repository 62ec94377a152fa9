"""FastAPI application serving the bot webhook, with lifespan and health endpoint.

Run with:
    uvicorn --factory sendbird_client.app:create_app
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from sendbird_client.client import SendbirdClient, get_client
from sendbird_client.config import Settings, get_settings
from sendbird_client.logging_config import configure_logging


def create_app(
    client: SendbirdClient | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Build the webhook application.

    Without arguments the process-wide client and settings are used. Register
    the bot handler on ``client.bot`` before or after building the app; the
    router reads it on every callback.
    """
    settings = settings or get_settings()
    client = client or get_client()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Configure logging and expose settings and client on startup."""
        configure_logging(settings.log_level)
        app.state.settings = settings
        app.state.sendbird = client
        yield

    app = FastAPI(title="Sendbird Bot Webhook", lifespan=lifespan)
    app.include_router(client.bot.webhook_router(settings.webhook_path))

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {
            "status": "ok",
            "service": "sendbird-client",
            "version": "0.1.0",
        }

    return app
