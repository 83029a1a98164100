"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - DeviceId wraps str — never pass a bare string where an identity is meant
    - Admission states encoded as a str Enum; stored status remains a plain string

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: DeviceStatus.PENDING == "pending", so it can be passed straight
      to get_devices() or stored in Device.status without conversion
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

DeviceId = NewType("DeviceId", str)


# ─── Enums ───────────────────────────────────────────────────────

class DeviceStatus(str, Enum):
    """Admission states — maps to the stored `status` field."""
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
