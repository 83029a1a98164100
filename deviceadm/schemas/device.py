"""Device Schemas — the stored device record and an explicit partial update.

Invariants:
    - Device.id is the logical primary key; the store's own key is never exposed
    - Empty Device fields mean "not supplied" when a Device is used as an update
    - DevicePatch fields are None when absent; a present "" or {} clears the field
    - attributes are replaced wholesale, never merged per key

Design Decisions:
    - DevicePatch exists because plain strings cannot tell "absent" from "empty";
      from_device() keeps the legacy emptiness policy for Device payloads
    - present_fields() is keyed by stored field name so the adapter can $set it directly
"""

from typing import Any

from pydantic import BaseModel, Field

from deviceadm.core.domain_types import DeviceId

MUTABLE_FIELDS = ("status", "key", "device_identity", "attributes")


class Device(BaseModel):
    """A device known to the admission workflow."""
    id: DeviceId
    status: str = ""
    key: str = ""
    device_identity: str = ""
    attributes: dict[str, Any] = Field(default_factory=dict)


class DevicePatch(BaseModel):
    """Partial device update — only non-None fields are written."""
    id: DeviceId
    status: str | None = None
    key: str | None = None
    device_identity: str | None = None
    attributes: dict[str, Any] | None = None

    @classmethod
    def from_device(cls, dev: Device) -> "DevicePatch":
        """Build a patch carrying only the non-empty fields of `dev`."""
        return cls(
            id=dev.id,
            status=dev.status or None,
            key=dev.key or None,
            device_identity=dev.device_identity or None,
            attributes=dict(dev.attributes) if dev.attributes else None,
        )

    def present_fields(self) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        for name in MUTABLE_FIELDS:
            value = getattr(self, name)
            if value is not None:
                fields[name] = value
        return fields
