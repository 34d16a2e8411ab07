#!/usr/bin/env python3
"""Stream Kraken ticker and OHLC updates for a pair and print decoded records."""

from __future__ import annotations

import argparse
import asyncio
import logging

import websockets

from krakenwire import OhlcInterval, OhlcRecord, TickerRecord, decode_message
from krakenwire.api import Subscription, WsRequest
from krakenwire.config import endpoint_for
from krakenwire.core import SubscriptionName, Timeframe, ValidationError

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream Kraken ticker and OHLC updates for a pair")
    p.add_argument("pair", nargs="?", default="ETH/USD")
    p.add_argument("--timeframe", default="15m", help="OHLC timeframe, e.g. 1m, 15m, 4h, 1d")
    p.add_argument("--limit", type=int, default=10, help="Stop after this many records")
    p.add_argument("--verbose", action="store_true", help="Log skipped frames")
    args = p.parse_args()

    timeframe = Timeframe.from_str(args.timeframe)
    if timeframe is None:
        p.error(f"unknown timeframe: {args.timeframe}")
    try:
        args.interval = OhlcInterval.from_timeframe(timeframe)
    except ValidationError as e:
        p.error(str(e))
    return args


def format_record(record: TickerRecord | OhlcRecord) -> str:
    if isinstance(record, TickerRecord):
        return (
            f"{record.pair} | ticker | ask={record.ask.price} bid={record.bid.price} "
            f"last={record.close.current_period} trades24h={record.trade_count.trailing_24h}"
        )
    return (
        f"{record.pair} | {record.channel_name} | o={record.open} h={record.high} "
        f"l={record.low} c={record.close} v={record.volume} n={record.trade_count}"
    )


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    subscriptions = [Subscription.ticker(), Subscription.ohlc(args.interval)]
    url = endpoint_for(SubscriptionName.TICKER)

    async with websockets.connect(url) as websocket:
        await websocket.send(WsRequest.ping(request_id=10).to_json())
        for subscription in subscriptions:
            await websocket.send(
                WsRequest.subscribe([args.pair], subscription, request_id=12).to_json()
            )
        logger.info("Subscribed to %d channels for %s", len(subscriptions), args.pair)

        received = 0
        try:
            async for frame in websocket:
                record = decode_message(frame)
                if record is None:
                    continue
                print(format_record(record))
                received += 1
                if received >= args.limit:
                    break
        finally:
            for subscription in subscriptions:
                await websocket.send(
                    WsRequest.unsubscribe([args.pair], subscription, request_id=12).to_json()
                )


if __name__ == "__main__":
    asyncio.run(main())
