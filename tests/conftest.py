"""Shared test fixtures."""

import os

# Required settings must exist before anything calls get_settings()
os.environ.setdefault("BUNS_TABLE_NAME", "buns-test")
os.environ.setdefault("DEVIL_BOT_TEST_CHANNEL_URL", "https://hooks.slack.com/services/T000/B000/XXXX")
os.environ["SLACK_SIGNING_SECRET"] = ""

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from devil_bot.app import app  # noqa: E402


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)
