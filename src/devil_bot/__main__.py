"""Run the webhook locally with uvicorn: ``python -m devil_bot`` or ``devil-bot``."""

import uvicorn

from devil_bot.config import get_settings


def main() -> None:
    """Serve the app on the configured port, auto-reloading in development."""
    settings = get_settings()
    uvicorn.run(
        "devil_bot.app:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.environment == "development",
        log_config=None,
    )


if __name__ == "__main__":
    main()
