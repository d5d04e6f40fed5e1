"""DynamoDB counter store.

Counters are incremented with an ``ADD`` update expression, so concurrent
invocations racing on the same key are serialised by DynamoDB itself.
A missing item or attribute is created with the increment as its value.
"""

import asyncio
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from devil_bot.config import get_settings

logger = logging.getLogger(__name__)

_resource = None


class CounterStoreError(RuntimeError):
    """Raised when the counter store rejects or fails an update."""


def get_dynamo_resource():
    """Return a cached boto3 DynamoDB resource.

    Uses aws_region from settings when set, otherwise the default boto3
    region resolution (AWS_REGION / AWS_DEFAULT_REGION on Lambda).
    """
    global _resource
    if _resource is None:
        settings = get_settings()
        kwargs = {"region_name": settings.aws_region} if settings.aws_region else {}
        _resource = boto3.resource("dynamodb", **kwargs)
    return _resource


def reset_client() -> None:
    """Reset the cached resource. Used for testing."""
    global _resource
    _resource = None


def _update_counter(table_name: str, key_name: str, key_value: str, field_name: str) -> None:
    table = get_dynamo_resource().Table(table_name)
    table.update_item(
        Key={key_name: key_value},
        UpdateExpression="ADD #field :inc",
        ExpressionAttributeNames={"#field": field_name},
        ExpressionAttributeValues={":inc": 1},
    )


async def increment_item(
    table_name: str, key_name: str, key_value: str, field_name: str
) -> None:
    """Atomically add 1 to ``field_name`` on the item keyed by ``key_name=key_value``.

    The blocking boto3 call runs in a worker thread. No retries beyond
    botocore's own.

    Raises:
        CounterStoreError: if DynamoDB or the AWS client fails (network,
            credentials, throttling, missing table).
    """
    try:
        await asyncio.to_thread(_update_counter, table_name, key_name, key_value, field_name)
    except (ClientError, BotoCoreError) as exc:
        raise CounterStoreError(
            f"Failed to increment {field_name} for {key_name}={key_value} in {table_name}: {exc}"
        ) from exc

    logger.info(
        "Counter incremented",
        extra={"table": table_name, "key": key_value, "field": field_name},
    )
