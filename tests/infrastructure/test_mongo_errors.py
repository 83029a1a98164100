"""Mongo Error Mapping — verifies the store-error → domain-error table.

Invariants:
    - None from find_one → DeviceNotFoundError, never StoreAccessError
    - Each pymongo/bson exception class maps to one StoreErrorKind
    - translate_error keeps the driver exception as cause
"""

import pytest
from bson.errors import InvalidBSON, InvalidDocument
from pydantic import ValidationError
from pymongo.errors import (
    AutoReconnect, ConfigurationError, DuplicateKeyError, InvalidURI,
    NetworkTimeout, OperationFailure, PyMongoError, ServerSelectionTimeoutError,
    WriteError,
)

from deviceadm.core.errors import DeviceNotFoundError, StoreAccessError
from deviceadm.infrastructure.mongo_errors import (
    StoreErrorKind, classify, require_document, translate_error,
)
from deviceadm.schemas.device import Device


@pytest.mark.parametrize("exc, kind", [
    (ServerSelectionTimeoutError("no servers"), StoreErrorKind.UNAVAILABLE),
    (AutoReconnect("connection reset"), StoreErrorKind.UNAVAILABLE),
    (NetworkTimeout("timed out"), StoreErrorKind.UNAVAILABLE),
    (InvalidURI("bad uri"), StoreErrorKind.UNAVAILABLE),
    (ConfigurationError("bad option"), StoreErrorKind.UNAVAILABLE),
    (OperationFailure("unknown operator", code=2), StoreErrorKind.REJECTED),
    (WriteError("write failed", code=9), StoreErrorKind.REJECTED),
    (DuplicateKeyError("dup", code=11000), StoreErrorKind.REJECTED),
    (InvalidDocument("cannot encode object"), StoreErrorKind.SERIALIZATION),
    (InvalidBSON("bad bytes"), StoreErrorKind.SERIALIZATION),
    (PyMongoError("other"), StoreErrorKind.UNKNOWN),
])
def test_classify_maps_driver_errors(exc, kind):
    assert classify(exc) is kind


def test_classify_unknown_exception():
    assert classify(ValueError("x")) is StoreErrorKind.UNKNOWN


def test_translate_error_wraps_with_operation():
    cause = AutoReconnect("connection reset")
    err = translate_error(cause, "failed to fetch device", "dev-1")
    assert isinstance(err, StoreAccessError)
    assert err.operation == "failed to fetch device"
    assert err.cause is cause
    assert err.context.device_id == "dev-1"
    assert err.context.debug_info == {
        "kind": "unavailable", "driver_error": "AutoReconnect",
    }


def test_require_document_passes_match_through():
    doc = {"id": "dev-1"}
    assert require_document(doc, "dev-1") is doc


def test_require_document_translates_no_match():
    with pytest.raises(DeviceNotFoundError) as exc_info:
        require_document(None, "dev-1")
    assert exc_info.value.device_id == "dev-1"
    assert exc_info.value.context.debug_info == {"kind": "not_found"}


def test_empty_document_is_still_a_match():
    assert require_document({}, "dev-1") == {}


def test_validation_error_is_serialization():
    with pytest.raises(ValidationError) as exc_info:
        Device.model_validate({"status": "pending"})

    exc = exc_info.value
    assert classify(exc) is StoreErrorKind.SERIALIZATION
    err = translate_error(exc, "failed to fetch device")
    assert err.context.debug_info["kind"] == "serialization"
