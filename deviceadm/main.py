"""Store Bootstrap — process-start entry point for callers of the device store.

Invariants:
    - Logging configured before the first connection attempt
    - Returns a connected store or raises StoreConnectionError; never half-initialized

Design Decisions:
    - Settings injectable for tests and embedding; defaults to get_settings()
"""

import logging

from deviceadm.config import Settings, get_settings
from deviceadm.infrastructure.device_store import (
    MongoDeviceStore, connect_device_store,
)
from deviceadm.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def open_device_store(settings: Settings | None = None) -> MongoDeviceStore:
    """Configure logging and connect the device store from settings."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    store = connect_device_store(
        settings.mongo_url,
        server_selection_timeout_ms=settings.mongo_server_selection_timeout_ms,
    )
    logger.info("Device store ready")
    return store
