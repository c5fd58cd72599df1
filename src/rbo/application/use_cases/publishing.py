from __future__ import annotations

import logging

from rbo.application.ports.publisher import EventPublisher

DEFAULT_EVENTS_CHANNEL = "events:backoffice"

logger = logging.getLogger(__name__)


def publish_best_effort(publisher: EventPublisher, channel: str, message: str) -> None:
    try:
        publisher.publish(channel=channel, message=message)
    except Exception:
        logger.warning("event_publish_failed", exc_info=True)
