"""Pydantic Schemas — device record and partial-update values.

Invariants:
    - Schemas carry no store-native types (no ObjectId, no `_id`)
    - Domain types from core/ used for identity fields

Design Decisions:
    - Separate from infrastructure: schemas are the caller contract, documents
      are the persistence shape
"""
