"""OHLC message decoder.

Wire shape::

    [channel_id, [time, etime, open, high, low, close, vwap, volume, count],
     "ohlc-<interval>", pair]

The first eight payload elements are decimal text, the ninth the integer trade
count. Type errors are reported with the payload index as location.
"""

from __future__ import annotations

from typing import Any

from krakenwire.models import OHLC_DECIMAL_FIELDS, OhlcRecord

from .base import (
    MessageAdapter,
    decode_channel_id,
    decode_channel_name,
    decode_pair,
    expect_envelope,
)
from .scalars import expect_array, expect_decimal, expect_integer

OHLC_PAYLOAD_LENGTH = len(OHLC_DECIMAL_FIELDS) + 1


class OhlcAdapter(MessageAdapter):
    """Adapter for OHLC candle update frames."""

    name = "ohlc"

    def parse(self, payload: Any) -> OhlcRecord:
        """Decode a parsed OHLC frame.

        Args:
            payload: Parsed JSON frame

        Returns:
            OhlcRecord with decimal fields copied verbatim

        Raises:
            DecodeError: On the first structural problem, in slot order
        """
        message = expect_envelope(payload)
        channel_id = decode_channel_id(message[0])

        values = expect_array(message[1], OHLC_PAYLOAD_LENGTH, "payload")
        fields = {
            name: expect_decimal(values[index], index)
            for index, name in enumerate(OHLC_DECIMAL_FIELDS)
        }
        trade_count = expect_integer(values[-1], OHLC_PAYLOAD_LENGTH - 1)

        return OhlcRecord(
            channel_id=channel_id,
            channel_name=decode_channel_name(message[2]),
            pair=decode_pair(message[3]),
            trade_count=trade_count,
            **fields,
        )


def decode_ohlc(payload: Any) -> OhlcRecord:
    """Decode a parsed OHLC frame, raising on malformed input."""
    return OhlcAdapter().parse(payload)
