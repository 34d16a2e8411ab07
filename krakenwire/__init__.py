"""krakenwire - Typed decoding of Kraken websocket market-data messages."""

from .api import Subscription, WsRequest
from .core import (
    ArityMismatchError,
    BidAskShapeMismatchError,
    BookDepth,
    DataError,
    DecodeError,
    FieldTypeMismatchError,
    MalformedJsonError,
    MissingChannelIdError,
    MissingFieldError,
    MissingPairError,
    OhlcInterval,
    RequestEvent,
    SubscriptionName,
    Timeframe,
    UnexpectedScalarShapeError,
    UnrecognizedShapeError,
    ValidationError,
)
from .decoding import (
    MessageDispatcher,
    decode_many,
    decode_message,
    decode_ohlc,
    decode_ticker,
    normalize_scalar,
)
from .models import (
    BidAskEntry,
    DecimalScalar,
    DecodedMessage,
    DualValue,
    IntegerScalar,
    OhlcRecord,
    ScalarValue,
    TickerRecord,
)

__version__ = "0.1.0"

__all__ = [
    # Core enums
    "Timeframe",
    "OhlcInterval",
    "BookDepth",
    "SubscriptionName",
    "RequestEvent",
    # Models
    "BidAskEntry",
    "DecimalScalar",
    "DecodedMessage",
    "DualValue",
    "IntegerScalar",
    "OhlcRecord",
    "ScalarValue",
    "TickerRecord",
    # Decoding
    "MessageDispatcher",
    "decode_message",
    "decode_many",
    "decode_ticker",
    "decode_ohlc",
    "normalize_scalar",
    # Requests
    "Subscription",
    "WsRequest",
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
