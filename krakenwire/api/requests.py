"""Outbound websocket requests.

Builds the ping, subscribe and unsubscribe messages the exchange accepts.
Serialization is compact and key order is fixed, so the JSON text matches the
exchange documentation byte for byte::

    {"event":"subscribe","reqid":13,"pair":["XBT/USD"],"subscription":{"name":"ohlc","interval":30}}

Optional fields (``reqid``, ``ratecounter``, ``snapshot``) are omitted when
unset.

Example:
    >>> request = WsRequest.subscribe(["XBT/USD"], Subscription.ticker())
    >>> request.to_json()
    '{"event":"subscribe","pair":["XBT/USD"],"subscription":{"name":"ticker"}}'
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from ..core.enums import BookDepth, OhlcInterval, RequestEvent, SubscriptionName
from ..core.exceptions import ValidationError

__all__ = ["Subscription", "WsRequest"]


@dataclass(frozen=True)
class Subscription:
    """The ``subscription`` object of a subscribe or unsubscribe request.

    Use the named constructors; each channel takes a different set of options.
    """

    name: SubscriptionName
    depth: BookDepth | None = None
    interval: OhlcInterval | None = None
    token: str | None = None
    rate_counter: bool | None = None
    snapshot: bool | None = None

    def __post_init__(self) -> None:
        if self.name == SubscriptionName.BOOK and self.depth is None:
            raise ValidationError("book subscription requires a depth")
        if self.name == SubscriptionName.OHLC and self.interval is None:
            raise ValidationError("ohlc subscription requires an interval")
        if self.name.is_private and not self.token:
            raise ValidationError(f"{self.name} subscription requires a token")

    @classmethod
    def ticker(cls) -> Subscription:
        return cls(SubscriptionName.TICKER)

    @classmethod
    def trade(cls) -> Subscription:
        return cls(SubscriptionName.TRADE)

    @classmethod
    def spread(cls) -> Subscription:
        return cls(SubscriptionName.SPREAD)

    @classmethod
    def book(cls, depth: BookDepth | int = BookDepth.N10) -> Subscription:
        try:
            return cls(SubscriptionName.BOOK, depth=BookDepth(depth))
        except ValueError as e:
            raise ValidationError(f"Unsupported book depth: {depth}") from e

    @classmethod
    def ohlc(cls, interval: OhlcInterval | int = OhlcInterval.M1) -> Subscription:
        try:
            return cls(SubscriptionName.OHLC, interval=OhlcInterval(interval))
        except ValueError as e:
            raise ValidationError(f"Unsupported OHLC interval: {interval}") from e

    @classmethod
    def open_orders(cls, token: str, rate_counter: bool | None = None) -> Subscription:
        return cls(SubscriptionName.OPEN_ORDERS, token=token, rate_counter=rate_counter)

    @classmethod
    def own_trades(cls, token: str, snapshot: bool | None = None) -> Subscription:
        return cls(SubscriptionName.OWN_TRADES, token=token, snapshot=snapshot)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name.value}
        if self.name == SubscriptionName.BOOK:
            out["depth"] = int(self.depth)
        elif self.name == SubscriptionName.OHLC:
            out["interval"] = int(self.interval)
        elif self.name == SubscriptionName.OPEN_ORDERS:
            if self.rate_counter is not None:
                out["ratecounter"] = self.rate_counter
            out["token"] = self.token
        elif self.name == SubscriptionName.OWN_TRADES:
            if self.snapshot is not None:
                out["snapshot"] = self.snapshot
            out["token"] = self.token
        return out


@dataclass(frozen=True)
class WsRequest:
    """An outbound websocket request."""

    event: RequestEvent
    request_id: int | None = None
    pairs: tuple[str, ...] = field(default_factory=tuple)
    subscription: Subscription | None = None

    def __post_init__(self) -> None:
        if self.event == RequestEvent.PING:
            if self.pairs or self.subscription is not None:
                raise ValidationError("ping request takes no pairs or subscription")
            return
        if not self.pairs:
            raise ValidationError(f"{self.event} request requires at least one pair")
        if self.subscription is None:
            raise ValidationError(f"{self.event} request requires a subscription")

    @classmethod
    def ping(cls, request_id: int | None = None) -> WsRequest:
        return cls(RequestEvent.PING, request_id=request_id)

    @classmethod
    def subscribe(
        cls,
        pairs: Iterable[str],
        subscription: Subscription,
        request_id: int | None = None,
    ) -> WsRequest:
        """Build a subscribe request for one channel across pairs.

        Args:
            pairs: Pair names in exchange format (e.g., "XBT/USD")
            subscription: Channel to subscribe to
            request_id: Optional client id echoed back in the acknowledgement
        """
        return cls(
            RequestEvent.SUBSCRIBE,
            request_id=request_id,
            pairs=tuple(pairs),
            subscription=subscription,
        )

    @classmethod
    def unsubscribe(
        cls,
        pairs: Iterable[str],
        subscription: Subscription,
        request_id: int | None = None,
    ) -> WsRequest:
        return cls(
            RequestEvent.UNSUBSCRIBE,
            request_id=request_id,
            pairs=tuple(pairs),
            subscription=subscription,
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"event": self.event.value}
        if self.request_id is not None:
            out["reqid"] = self.request_id
        if self.subscription is not None:
            out["pair"] = list(self.pairs)
            out["subscription"] = self.subscription.to_dict()
        return out

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))
