"""OHLC candle update data model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from krakenwire.config import OHLC_CHANNEL_PREFIX
from krakenwire.core import OhlcInterval

from .scalars import DecimalText, UInt64

# Payload order on the wire; trade count follows as the ninth element
OHLC_DECIMAL_FIELDS = ("time", "etime", "open", "high", "low", "close", "vwap", "volume")


class OhlcRecord(BaseModel):
    """Candle update for a pair on one OHLC channel.

    ``time`` and ``etime`` are epoch seconds with microsecond fractions and,
    like prices and volumes, stay as the exchange's decimal text.
    """

    channel_id: UInt64 = Field(..., alias="channelId")
    channel_name: StrictStr = Field(..., alias="channelName")
    pair: StrictStr
    time: DecimalText
    etime: DecimalText
    open: DecimalText
    high: DecimalText
    low: DecimalText
    close: DecimalText
    vwap: DecimalText
    volume: DecimalText
    trade_count: UInt64 = Field(..., alias="count")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def interval(self) -> OhlcInterval | None:
        """Candle interval named by the channel, or None for unknown names."""
        if not self.channel_name.startswith(OHLC_CHANNEL_PREFIX):
            return None
        minutes = self.channel_name[len(OHLC_CHANNEL_PREFIX) :]
        if not minutes.isdigit():
            return None
        return OhlcInterval.from_minutes(int(minutes))

    def payload(self) -> list[Any]:
        """Rebuild the nine-element payload array of the wire message."""
        return [getattr(self, name) for name in OHLC_DECIMAL_FIELDS] + [self.trade_count]

    def to_message(self) -> list[Any]:
        """Rebuild the positional wire message this record decodes from."""
        return [self.channel_id, self.payload(), self.channel_name, self.pair]
