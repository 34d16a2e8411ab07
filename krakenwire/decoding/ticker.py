"""Ticker message decoder.

Wire shape::

    [channel_id, {"a": [price, whole_lot_volume, lot_volume], "b": [...],
                  "c": [today, last24h], "v": [...], "p": [...], "t": [...],
                  "l": [...], "h": [...], "o": [...]}, "ticker", pair]

``t`` holds integer trade counts; every other pair holds decimal text.
"""

from __future__ import annotations

from typing import Any

from krakenwire.core.exceptions import (
    BidAskShapeMismatchError,
    FieldTypeMismatchError,
    MissingFieldError,
)
from krakenwire.models import BidAskEntry, DecimalScalar, DualValue, IntegerScalar, TickerRecord

from .base import (
    MessageAdapter,
    decode_channel_id,
    decode_channel_name,
    decode_pair,
    expect_envelope,
)
from .scalars import describe, expect_array, expect_decimal, expect_integer, normalize_scalar

# Decoding order; the first missing or malformed key aborts the record
TICKER_PAYLOAD_KEYS = ("a", "b", "c", "v", "p", "t", "l", "h", "o")

_BID_ASK_KINDS = (DecimalScalar, IntegerScalar, DecimalScalar)


def _field(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise MissingFieldError(key)
    return data[key]


def decode_bid_ask(value: Any, key: str) -> BidAskEntry:
    """Decode an ``a``/``b`` triple of (decimal, integer, decimal)."""
    items = expect_array(value, 3, key)
    scalars = [normalize_scalar(item, f"{key}[{i}]") for i, item in enumerate(items)]
    for i, (scalar, kind) in enumerate(zip(scalars, _BID_ASK_KINDS)):
        if not isinstance(scalar, kind):
            raise BidAskShapeMismatchError(
                f"{key!r} must be (decimal, integer, decimal); element {i} is {scalar.kind}",
                location=f"{key}[{i}]",
            )
    price, whole_lot_volume, lot_volume = scalars
    return BidAskEntry(
        price=price.value,
        whole_lot_volume=whole_lot_volume.value,
        lot_volume=lot_volume.value,
    )


def decode_decimal_pair(value: Any, key: str) -> DualValue[str]:
    today, last_24h = expect_array(value, 2, key)
    return DualValue[str](
        current_period=expect_decimal(today, f"{key}[0]"),
        trailing_24h=expect_decimal(last_24h, f"{key}[1]"),
    )


def decode_integer_pair(value: Any, key: str) -> DualValue[int]:
    today, last_24h = expect_array(value, 2, key)
    return DualValue[int](
        current_period=expect_integer(today, f"{key}[0]"),
        trailing_24h=expect_integer(last_24h, f"{key}[1]"),
    )


class TickerAdapter(MessageAdapter):
    """Adapter for ticker update frames."""

    name = "ticker"

    def parse(self, payload: Any) -> TickerRecord:
        """Decode a parsed ticker frame.

        Args:
            payload: Parsed JSON frame

        Returns:
            TickerRecord with decimal fields copied verbatim

        Raises:
            DecodeError: On the first structural problem, in slot order
        """
        message = expect_envelope(payload)
        channel_id = decode_channel_id(message[0])

        data = message[1]
        if not isinstance(data, dict):
            raise FieldTypeMismatchError(
                f"Ticker payload must be an object, got {describe(data)}", location="payload"
            )
        # Unknown keys are ignored
        fields = {
            "ask": decode_bid_ask(_field(data, "a"), "a"),
            "bid": decode_bid_ask(_field(data, "b"), "b"),
            "close": decode_decimal_pair(_field(data, "c"), "c"),
            "volume": decode_decimal_pair(_field(data, "v"), "v"),
            "vwap": decode_decimal_pair(_field(data, "p"), "p"),
            "trade_count": decode_integer_pair(_field(data, "t"), "t"),
            "low": decode_decimal_pair(_field(data, "l"), "l"),
            "high": decode_decimal_pair(_field(data, "h"), "h"),
            "open": decode_decimal_pair(_field(data, "o"), "o"),
        }

        # Subscription name only matters for routing
        decode_channel_name(message[2])
        pair = decode_pair(message[3])
        return TickerRecord(channel_id=channel_id, pair=pair, **fields)


def decode_ticker(payload: Any) -> TickerRecord:
    """Decode a parsed ticker frame, raising on malformed input."""
    return TickerAdapter().parse(payload)
