"""Shared sample frames."""

import json

import pytest

TICKER_FRAME = """[
  0,
  {
    "a": ["5525.40000", 1, "1.000"],
    "b": ["5525.10000", 1, "1.000"],
    "c": ["5525.10000", "0.00398963"],
    "h": ["5783.00000", "5783.00000"],
    "l": ["5505.00000", "5505.00000"],
    "o": ["5760.70000", "5763.40000"],
    "p": ["5631.44067", "5653.78939"],
    "t": [11493, 16267],
    "v": ["2634.11501494", "3591.17907851"]
  },
  "ticker",
  "XBT/USD"
]"""

OHLC_FRAME = """[
  42,
  [
    "1542057314.748456",
    "1542057360.435743",
    "3586.70001",
    "3586.70000",
    "3586.60001",
    "3586.60000",
    "3586.68894",
    "0.03373000",
    2
  ],
  "ohlc-5",
  "XBT/USD"
]"""


@pytest.fixture
def ticker_frame() -> str:
    return TICKER_FRAME


@pytest.fixture
def ohlc_frame() -> str:
    return OHLC_FRAME


@pytest.fixture
def ticker_message() -> list:
    """Parsed ticker frame, safe to mutate."""
    return json.loads(TICKER_FRAME)


@pytest.fixture
def ohlc_message() -> list:
    """Parsed OHLC frame, safe to mutate."""
    return json.loads(OHLC_FRAME)
