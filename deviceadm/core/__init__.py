"""Core Layer — device domain types, error vocabulary and store contract.

Invariants:
    - No module in core/ imports from infrastructure/ or pymongo
    - Callers depend on core/ only; the MongoDB adapter is injected

Design Decisions:
    - Contract and errors live beside each other so callers can branch on
      DeviceNotFoundError without knowing which store is behind the protocol
"""
