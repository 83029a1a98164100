"""MongoDB Device Store — DeviceStore implementation over a pooled MongoClient.

Invariants:
    - One MongoClient (connection pool) per store; never mutated after construction
    - Every operation derives a collection handle inside _devices() and performs
      exactly one round trip; the pooled connection is released on every exit path
    - All pymongo/bson exceptions mapped to StoreAccessError (core/errors.py)
    - Documents are materialized inside _devices(): a stored record that does
      not decode into a Device is a StoreAccessError, not a raw ValidationError
    - A missing device surfaces as DeviceNotFoundError, never StoreAccessError
    - No retries and no error logging in the data operations: callers own recovery

Design Decisions:
    - Client injected, connect_device_store() does the dial + ping: the adapter
      can be built over any client (tests pass mongomock) and is never half-initialized
    - Database and collection names are constants, not settings
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from pymongo import MongoClient
from pymongo.collection import Collection

from deviceadm.core.domain_types import DeviceId
from deviceadm.core.errors import StoreConnectionError
from deviceadm.infrastructure.mongo_errors import (
    STORE_ERRORS, require_document, translate_error,
)
from deviceadm.infrastructure.mongo_queries import (
    build_identity_filter, build_list_filter, build_upsert_update,
    document_to_device,
)
from deviceadm.schemas.device import Device, DevicePatch

logger = logging.getLogger(__name__)

DB_NAME = "deviceadm"
DEVICES_COLLECTION = "devices"


class MongoDeviceStore:
    """Device persistence backed by the `deviceadm.devices` collection."""

    def __init__(self, client: MongoClient):
        self.client = client

    def __enter__(self) -> "MongoDeviceStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @contextmanager
    def _devices(
        self, operation: str, device_id: str | None = None,
    ) -> Iterator[Collection]:
        """Provide a devices collection handle with driver errors translated."""
        try:
            yield self.client[DB_NAME][DEVICES_COLLECTION]
        except STORE_ERRORS as e:
            raise translate_error(e, operation, device_id) from e

    def get_devices(
        self, skip: int, limit: int, status: str = "",
    ) -> list[Device]:
        with self._devices("failed to fetch device list") as coll:
            cursor = coll.find(build_list_filter(status)).skip(skip).limit(limit)
            devices = [document_to_device(doc) for doc in cursor]
        logger.debug(
            f"Fetched {len(devices)} devices",
            extra={"operation": "get_devices"},
        )
        return devices

    def get_device(self, device_id: DeviceId) -> Device:
        with self._devices("failed to fetch device", device_id) as coll:
            doc = coll.find_one(build_identity_filter(device_id))
            return document_to_device(require_document(doc, device_id))

    def put_device(self, dev: Device | DevicePatch) -> None:
        patch = dev if isinstance(dev, DevicePatch) else DevicePatch.from_device(dev)
        with self._devices("failed to store device", patch.id) as coll:
            result = coll.update_one(
                build_identity_filter(patch.id),
                build_upsert_update(patch),
                upsert=True,
            )
        action = "inserted" if result.upserted_id is not None else "updated"
        logger.debug(
            f"Stored device ({action})",
            extra={"operation": "put_device", "device_id": patch.id},
        )

    def health_check(self) -> bool:
        """Check store connectivity (for readiness probes)."""
        try:
            self.client.admin.command("ping")
            return True
        except STORE_ERRORS as e:
            logger.warning(f"Device store health check failed: {e}")
            return False

    def close(self) -> None:
        self.client.close()
        logger.info("Device store closed")


def connect_device_store(
    url: str, server_selection_timeout_ms: int = 5000,
) -> MongoDeviceStore:
    """Dial the store and verify it answers before handing out an adapter."""
    client = None
    try:
        client = MongoClient(
            url, serverSelectionTimeoutMS=server_selection_timeout_ms,
        )
        client.admin.command("ping")
    except (*STORE_ERRORS, ValueError, TypeError) as e:
        # pymongo rejects bad client options with plain ValueError/TypeError
        if client is not None:
            client.close()
        raise StoreConnectionError(e) from e
    logger.info("Connected to device store", extra={"operation": "connect"})
    return MongoDeviceStore(client)
