"""Ticker update data model."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from krakenwire.config import TICKER_CHANNEL

from .scalars import DecimalText, UInt64

T = TypeVar("T")


class DualValue(BaseModel, Generic[T]):
    """A metric for the current period alongside its trailing 24 hour value."""

    current_period: T = Field(..., alias="today")
    trailing_24h: T = Field(..., alias="last24h")

    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True)

    def to_message(self) -> list[T]:
        return [self.current_period, self.trailing_24h]


class BidAskEntry(BaseModel):
    """Best ask or bid: price, whole lot volume and lot volume."""

    price: DecimalText
    whole_lot_volume: UInt64 = Field(..., alias="wholeLotVolume")
    lot_volume: DecimalText = Field(..., alias="lotVolume")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_message(self) -> list[Any]:
        return [self.price, self.whole_lot_volume, self.lot_volume]


class TickerRecord(BaseModel):
    """Ticker state for a pair at a point in time.

    Every price and volume field holds the exchange's decimal text unchanged.
    """

    channel_id: UInt64 = Field(..., alias="channelId")
    pair: StrictStr
    ask: BidAskEntry
    bid: BidAskEntry
    close: DualValue[str]
    volume: DualValue[str]
    vwap: DualValue[str] = Field(..., alias="volumeWeightedAvgPrice")
    trade_count: DualValue[int] = Field(..., alias="tradeCount")
    low: DualValue[str] = Field(..., alias="lowPrice")
    high: DualValue[str] = Field(..., alias="highPrice")
    open: DualValue[str] = Field(..., alias="openPrice")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def payload(self) -> dict[str, list[Any]]:
        """Rebuild the keyed payload object of the wire message."""
        return {
            "a": self.ask.to_message(),
            "b": self.bid.to_message(),
            "c": self.close.to_message(),
            "v": self.volume.to_message(),
            "p": self.vwap.to_message(),
            "t": self.trade_count.to_message(),
            "l": self.low.to_message(),
            "h": self.high.to_message(),
            "o": self.open.to_message(),
        }

    def to_message(self, channel_name: str = TICKER_CHANNEL) -> list[Any]:
        """Rebuild the positional wire message this record decodes from."""
        return [self.channel_id, self.payload(), channel_name, self.pair]
