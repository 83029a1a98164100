"""Boundary Protocols — contract between admission workflow and device persistence.

Invariants:
    - Workflow code depends on DeviceStore only, never on a concrete adapter
    - get_device raises DeviceNotFoundError for an absent identity and
      StoreAccessError for every other failure; never returns None
    - get_devices returns an empty list (not an error) when nothing matches
    - put_device is insert-or-update by identity; absent fields are left untouched

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous methods: each call is a single blocking round trip to the store
"""

from typing import Protocol

from deviceadm.core.domain_types import DeviceId
from deviceadm.schemas.device import Device, DevicePatch


class DeviceStore(Protocol):
    """Contract for device persistence — implemented by infrastructure."""

    def get_devices(
        self, skip: int, limit: int, status: str = "",
    ) -> list[Device]:
        """List devices in natural store order, skipping `skip` and returning at most `limit`.

        An empty `status` applies no filter.
        """
        ...

    def get_device(self, device_id: DeviceId) -> Device:
        """Find the device with the given identity or raise DeviceNotFoundError."""
        ...

    def put_device(self, dev: Device | DevicePatch) -> None:
        """Upsert by identity, merging only the supplied fields."""
        ...
