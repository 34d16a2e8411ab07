"""Unit tests for the exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from krakenwire.core import (
    ArityMismatchError,
    BidAskShapeMismatchError,
    DataError,
    DecodeError,
    FieldTypeMismatchError,
    MalformedJsonError,
    MissingChannelIdError,
    MissingFieldError,
    MissingPairError,
    UnexpectedScalarShapeError,
    UnrecognizedShapeError,
    ValidationError,
)


def test_decode_errors_share_base():
    """Every decode failure is catchable as DecodeError and DataError."""
    errors = [
        MalformedJsonError("bad"),
        ArityMismatchError("arity", expected=4, actual=3),
        FieldTypeMismatchError("type", location=8),
        UnexpectedScalarShapeError("shape", location="a[0]"),
        MissingChannelIdError("channel"),
        MissingPairError("pair"),
        BidAskShapeMismatchError("order", location="b[1]"),
        MissingFieldError("t"),
        UnrecognizedShapeError("nothing matched"),
    ]
    for error in errors:
        assert isinstance(error, DecodeError)
        assert isinstance(error, DataError)


def test_scalar_and_slot_errors_are_type_mismatches():
    """Slot-specific errors specialise FieldTypeMismatchError."""
    for cls in (
        UnexpectedScalarShapeError,
        MissingChannelIdError,
        MissingPairError,
        BidAskShapeMismatchError,
    ):
        assert issubclass(cls, FieldTypeMismatchError)


def test_arity_mismatch_carries_counts():
    """ArityMismatchError records expected and actual lengths."""
    error = ArityMismatchError("wrong length", expected=9, actual=8, location="payload")
    assert error.expected == 9
    assert error.actual == 8
    assert error.location == "payload"
    assert str(error) == "wrong length"


def test_missing_field_names_key():
    """MissingFieldError exposes the key and uses it as location."""
    error = MissingFieldError("o")
    assert error.key == "o"
    assert error.location == "o"
    assert "'o'" in str(error)


def test_envelope_errors_fix_their_slot():
    """Channel id and pair errors always point at slots 0 and 3."""
    assert MissingChannelIdError("x").location == 0
    assert MissingPairError("x").location == 3


def test_unrecognized_shape_defaults_to_empty_attempts():
    """UnrecognizedShapeError without attempts has an empty mapping."""
    assert UnrecognizedShapeError("none").attempts == {}


def test_validation_error_is_not_decode_error():
    """Request misuse is a DataError but not a DecodeError."""
    error = ValidationError("bad request")
    assert isinstance(error, DataError)
    assert not isinstance(error, DecodeError)
