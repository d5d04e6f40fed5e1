"""Persistent counter storage backed by DynamoDB."""

from devil_bot.store.dynamo import (
    CounterStoreError,
    get_dynamo_resource,
    increment_item,
    reset_client,
)

__all__ = [
    "CounterStoreError",
    "get_dynamo_resource",
    "increment_item",
    "reset_client",
]
