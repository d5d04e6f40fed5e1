"""FastAPI application with lifespan, health endpoint, and Lambda handler."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from mangum import Mangum

from devil_bot.config import get_settings, validate_settings
from devil_bot.logging_config import configure_logging
from devil_bot.slack.router import router as slack_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging and validate config on startup.

    A missing required setting raises MissingConfigurationError here, so the
    process refuses to start rather than failing mid-request.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    validate_settings(settings)
    app.state.settings = settings
    yield


app = FastAPI(
    title="Devil Bot",
    lifespan=lifespan,
)
app.include_router(slack_router)


@app.get("/health")
async def health():
    """Health check endpoint for load balancers and local development."""
    return {
        "status": "ok",
        "service": "devil-bot",
        "version": "0.1.0",
    }


# AWS Lambda entry point (API Gateway proxy events)
handler = Mangum(app, lifespan="on")
