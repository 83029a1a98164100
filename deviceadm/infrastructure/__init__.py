"""Infrastructure Layer — MongoDB adapter and cross-cutting concerns.

Invariants:
    - Only this layer imports pymongo/bson
    - All driver exceptions mapped to core/errors.py before leaving the layer

Design Decisions:
    - Query construction and error mapping are pure modules so they can be
      tested without a live store
"""
