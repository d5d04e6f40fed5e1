"""Slack request verification and body parsing as a FastAPI dependency."""

import logging

from fastapi import HTTPException, Request
from slack_sdk.signature import SignatureVerifier

from devil_bot.config import get_settings
from devil_bot.slack.parser import MalformedPayloadError, parse_payload

logger = logging.getLogger(__name__)


async def verify_slack_request(request: Request) -> dict:
    """Parse the body and verify the Slack signature (when configured).

    Reads the raw body once. Parsing runs first so a body that is not UTF-8
    JSON is reported as malformed; the signature is then checked against the
    exact bytes Slack signed. Signature checking is skipped when no signing
    secret is configured.

    Raises HTTPException(400) if the body is not valid JSON and
    HTTPException(403) if the signature is invalid.
    """
    settings = get_settings()
    body = await request.body()

    try:
        payload = parse_payload(body)
    except MalformedPayloadError as exc:
        logger.warning("Rejected malformed payload: %s", exc)
        raise HTTPException(status_code=400, detail="Malformed JSON payload") from exc

    if settings.slack_signing_secret:
        timestamp = request.headers.get("X-Slack-Request-Timestamp", "")
        signature = request.headers.get("X-Slack-Signature", "")
        verifier = SignatureVerifier(signing_secret=settings.slack_signing_secret)
        # parse_payload guarantees the body is valid UTF-8
        if not verifier.is_valid(body=body.decode("utf-8"), timestamp=timestamp, signature=signature):
            raise HTTPException(status_code=403, detail="Invalid Slack signature")

    return payload
