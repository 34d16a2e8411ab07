"""Core enumerations shared by the decoders and the request encoder.

Key Types:
    - Timeframe: Standardized time intervals
    - OhlcInterval: Candle intervals the exchange publishes, in minutes
    - BookDepth: Order book depths accepted by book subscriptions
    - SubscriptionName: Channel names used in subscribe requests
    - RequestEvent: Outbound request kinds
"""

from enum import Enum, IntEnum
from typing import Optional

from .exceptions import ValidationError

_SECONDS_MAP = {
    "1m": 60,
    "3m": 180,
    "5m": 300,
    "15m": 900,
    "30m": 1800,
    "1h": 3600,
    "2h": 7200,
    "4h": 14400,
    "6h": 21600,
    "8h": 28800,
    "12h": 43200,
    "1d": 86400,
    "3d": 259200,
    "1w": 604800,
    "1M": 2592000,  # 30 days approximation
}


class Timeframe(str, Enum):
    """Standardized time intervals.

    Not every timeframe has an exchange counterpart; see
    ``OhlcInterval.from_timeframe``.
    """

    # Minutes
    M1 = "1m"
    M3 = "3m"
    M5 = "5m"
    M15 = "15m"
    M30 = "30m"

    # Hours
    H1 = "1h"
    H2 = "2h"
    H4 = "4h"
    H6 = "6h"
    H8 = "8h"
    H12 = "12h"

    # Days/Weeks/Months
    D1 = "1d"
    D3 = "3d"
    W1 = "1w"
    MO1 = "1M"

    @property
    def seconds(self) -> int:
        """Number of seconds in this interval."""
        return _SECONDS_MAP[self.value]

    @property
    def minutes(self) -> int:
        """Number of whole minutes in this interval."""
        return self.seconds // 60

    @classmethod
    def from_str(cls, tf: str) -> Optional["Timeframe"]:
        """Get interval from string value. Returns None if no match."""
        try:
            return cls(tf)
        except ValueError:
            return None


class OhlcInterval(IntEnum):
    """Candle interval in minutes, serialized as a bare integer."""

    M1 = 1
    M5 = 5
    M15 = 15
    M30 = 30
    H1 = 60
    H4 = 240
    D1 = 1440
    W1 = 10080
    D15 = 21600

    @classmethod
    def from_minutes(cls, minutes: int) -> Optional["OhlcInterval"]:
        """Get interval from a minute count. Returns None if no match."""
        try:
            return cls(minutes)
        except ValueError:
            return None

    @classmethod
    def from_timeframe(cls, timeframe: Timeframe) -> "OhlcInterval":
        """Map a standardized timeframe onto an exchange interval.

        Raises:
            ValidationError: If the exchange publishes no candles at that interval
        """
        interval = cls.from_minutes(timeframe.minutes)
        if interval is None:
            raise ValidationError(f"No OHLC interval for timeframe {timeframe.value}")
        return interval


class BookDepth(IntEnum):
    """Order book depth, serialized as a bare integer."""

    N10 = 10
    N25 = 25
    N100 = 100
    N500 = 500
    N1000 = 1000


class SubscriptionName(str, Enum):
    """Channel names accepted in the ``subscription.name`` field."""

    TICKER = "ticker"
    TRADE = "trade"
    SPREAD = "spread"
    BOOK = "book"
    OHLC = "ohlc"
    OPEN_ORDERS = "openOrders"
    OWN_TRADES = "ownTrades"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value

    @property
    def is_private(self) -> bool:
        """Whether the channel needs an authentication token."""
        return self in (SubscriptionName.OPEN_ORDERS, SubscriptionName.OWN_TRADES)


class RequestEvent(str, Enum):
    """Outbound request kinds, serialized in the ``event`` field."""

    PING = "ping"
    SUBSCRIBE = "subscribe"
    UNSUBSCRIBE = "unsubscribe"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value
