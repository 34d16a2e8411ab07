"""Decoders for positional websocket messages."""

from .base import MessageAdapter
from .dispatcher import MessageDispatcher, decode_many, decode_message
from .ohlc import OhlcAdapter, decode_ohlc
from .scalars import normalize_scalar, parse_json
from .ticker import TickerAdapter, decode_ticker

__all__ = [
    "MessageAdapter",
    "MessageDispatcher",
    "OhlcAdapter",
    "TickerAdapter",
    "decode_many",
    "decode_message",
    "decode_ohlc",
    "decode_ticker",
    "normalize_scalar",
    "parse_json",
]
