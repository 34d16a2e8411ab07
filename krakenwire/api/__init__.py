"""Outbound request construction."""

from .requests import Subscription, WsRequest

__all__ = ["Subscription", "WsRequest"]
