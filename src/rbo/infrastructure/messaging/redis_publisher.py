from __future__ import annotations

import logging
import os

from rbo.application.ports.publisher import EventPublisher
from rbo.application.use_cases.publishing import DEFAULT_EVENTS_CHANNEL
from rbo.infrastructure.cache.redis_client import get_redis_client

logger = logging.getLogger(__name__)


def events_channel() -> str:
    return os.getenv("EVENTS_CHANNEL", DEFAULT_EVENTS_CHANNEL)


class RedisEventPublisher(EventPublisher):
    """Publishes event envelopes on a Redis pub/sub channel.

    Delivery is fire-and-forget: a message published while nobody is
    subscribed is dropped by Redis.
    """

    def __init__(self, timeout_seconds: float = 1.0) -> None:
        self._timeout_seconds = timeout_seconds

    def publish(self, channel: str, message: str) -> None:
        client = get_redis_client(timeout_seconds=self._timeout_seconds)
        receivers = client.publish(channel, message)
        if not receivers:
            logger.debug("event_published_without_subscribers")
