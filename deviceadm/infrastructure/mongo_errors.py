"""Mongo Error Mapping — translates store-native signals into the domain taxonomy.

Invariants:
    - find_one returning None is the store's "no document matched" signal → DeviceNotFoundError
    - A stored document that fails Device validation is a serialization failure
    - Every pymongo/bson exception maps to exactly one StoreErrorKind via _ERROR_KINDS
    - Translated errors chain the driver exception; nothing is swallowed

Design Decisions:
    - Ordered (exception class, kind) table: first isinstance match wins, so
      subclasses are listed before their bases
    - Kind recorded in ErrorContext.debug_info rather than separate exception
      classes: callers only branch on not-found vs access failure
"""

from enum import Enum
from typing import Any, Mapping

from bson.errors import BSONError, InvalidDocument
from pydantic import ValidationError
from pymongo.errors import (
    ConfigurationError, ConnectionFailure, OperationFailure, PyMongoError,
)

from deviceadm.core.errors import (
    DeviceNotFoundError, ErrorContext, StoreAccessError,
)


class StoreErrorKind(str, Enum):
    """Classification of store-side failures."""
    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"
    REJECTED = "rejected"
    SERIALIZATION = "serialization"
    UNKNOWN = "unknown"


_ERROR_KINDS: tuple[tuple[type[BaseException], StoreErrorKind], ...] = (
    (ConnectionFailure, StoreErrorKind.UNAVAILABLE),
    (ConfigurationError, StoreErrorKind.UNAVAILABLE),
    (OperationFailure, StoreErrorKind.REJECTED),
    (InvalidDocument, StoreErrorKind.SERIALIZATION),
    (BSONError, StoreErrorKind.SERIALIZATION),
    (ValidationError, StoreErrorKind.SERIALIZATION),
    (PyMongoError, StoreErrorKind.UNKNOWN),
)

STORE_ERRORS: tuple[type[BaseException], ...] = (
    PyMongoError, BSONError, ValidationError,
)


def classify(exc: BaseException) -> StoreErrorKind:
    for exc_type, kind in _ERROR_KINDS:
        if isinstance(exc, exc_type):
            return kind
    return StoreErrorKind.UNKNOWN


def translate_error(
    exc: BaseException, operation: str, device_id: str | None = None,
) -> StoreAccessError:
    """Wrap a driver exception as StoreAccessError; caller raises it `from exc`."""
    context = ErrorContext(
        device_id=device_id,
        debug_info={
            "kind": classify(exc).value,
            "driver_error": type(exc).__name__,
        },
    )
    return StoreAccessError(operation, exc, context)


def require_document(
    doc: Mapping[str, Any] | None, device_id: str,
) -> Mapping[str, Any]:
    """Return `doc`, or raise DeviceNotFoundError when the lookup matched nothing."""
    if doc is None:
        raise DeviceNotFoundError(
            device_id,
            ErrorContext(debug_info={"kind": StoreErrorKind.NOT_FOUND.value}),
        )
    return doc
