"""Data models for decoded market-data messages.

All models are immutable pydantic v2 models (frozen=True). Decimal values are
kept as the exchange's original text and are never converted to floats.
Field aliases give the camelCase names used by ``model_dump(by_alias=True)``.
"""

from typing import Union

from .ohlc import OHLC_DECIMAL_FIELDS, OhlcRecord
from .scalars import U64_MAX, DecimalScalar, DecimalText, IntegerScalar, ScalarValue, UInt64
from .ticker import BidAskEntry, DualValue, TickerRecord

# Closed set of record kinds the dispatcher can produce
DecodedMessage = Union[TickerRecord, OhlcRecord]

__all__ = [
    "BidAskEntry",
    "DecimalScalar",
    "DecimalText",
    "DecodedMessage",
    "DualValue",
    "IntegerScalar",
    "OHLC_DECIMAL_FIELDS",
    "OhlcRecord",
    "ScalarValue",
    "TickerRecord",
    "U64_MAX",
    "UInt64",
]
