"""Shared Kraken websocket constants.

This module centralizes endpoint URLs and channel naming used by the decoders,
the request encoder and the example scripts.
"""

from krakenwire.core import SubscriptionName

# Public market data (ticker, ohlc, trade, spread, book)
WS_PUBLIC_URL = "wss://ws.kraken.com"

# Private feeds (openOrders, ownTrades) need a token and a separate endpoint
WS_PRIVATE_URL = "wss://ws-auth.kraken.com"

# Every data frame is [channel_id, payload, channel_name, pair]
MESSAGE_ARITY = 4

# OHLC channel names carry the interval: "ohlc-<minutes>"
OHLC_CHANNEL_PREFIX = f"{SubscriptionName.OHLC.value}-"

TICKER_CHANNEL = SubscriptionName.TICKER.value


def endpoint_for(name: SubscriptionName) -> str:
    """Return the websocket URL serving a subscription channel."""
    return WS_PRIVATE_URL if name.is_private else WS_PUBLIC_URL
