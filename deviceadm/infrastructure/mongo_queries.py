"""Mongo Queries — pure builders for filter and update documents.

Invariants:
    - Empty status → empty filter (matches every device)
    - Identity lookups always filter on the logical `id` field, never `_id`
    - Upsert updates use $set with supplied fields only; an empty patch uses
      $setOnInsert so existing documents are left untouched
    - `_id` is stripped before a document becomes a Device
    - Null stored fields decode as the empty default, never as None

Design Decisions:
    - Plain dicts over bson.SON: filters are single-key, ordering is irrelevant
"""

from typing import Any, Mapping

from deviceadm.core.domain_types import DeviceId
from deviceadm.schemas.device import Device, DevicePatch


def build_list_filter(status: str) -> dict[str, Any]:
    """Filter for get_devices — no constraint when status is empty."""
    if not status:
        return {}
    # DeviceStatus members store by value
    return {"status": getattr(status, "value", status)}


def build_identity_filter(device_id: DeviceId) -> dict[str, Any]:
    return {"id": device_id}


def build_upsert_update(patch: DevicePatch) -> dict[str, Any]:
    """Update document merging only the fields present in `patch`."""
    fields = patch.present_fields()
    if not fields:
        return {"$setOnInsert": {"id": patch.id}}
    return {"$set": fields}


def document_to_device(doc: Mapping[str, Any]) -> Device:
    """Decode a stored document; null fields fall back to the Device defaults."""
    return Device.model_validate(
        {k: v for k, v in doc.items() if k != "_id" and v is not None},
    )
