"""Core components."""

from .enums import (
    BookDepth,
    OhlcInterval,
    RequestEvent,
    SubscriptionName,
    Timeframe,
)
from .exceptions import (
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

__all__ = [
    # Enums
    "Timeframe",
    "OhlcInterval",
    "BookDepth",
    "SubscriptionName",
    "RequestEvent",
    # Exceptions
    "DataError",
    "ValidationError",
    "DecodeError",
    "MalformedJsonError",
    "ArityMismatchError",
    "FieldTypeMismatchError",
    "UnexpectedScalarShapeError",
    "MissingChannelIdError",
    "MissingPairError",
    "BidAskShapeMismatchError",
    "MissingFieldError",
    "UnrecognizedShapeError",
]
