"""Decoder interface and the envelope slots shared by every data frame.

A data frame is ``[channel_id, payload, channel_name, pair]``. Only the
payload differs between message kinds, so each kind gets one adapter that
decodes the whole frame slot by slot and raises on the first problem.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from krakenwire.config import MESSAGE_ARITY
from krakenwire.core.exceptions import (
    FieldTypeMismatchError,
    MissingChannelIdError,
    MissingPairError,
)
from krakenwire.models import DecodedMessage

from .scalars import describe, expect_array, expect_integer


class MessageAdapter(ABC):
    """Decodes one message kind from a parsed JSON frame."""

    name: str = ""

    @abstractmethod
    def parse(self, payload: Any) -> DecodedMessage:
        """Decode a parsed frame into a record.

        Raises:
            DecodeError: On the first structural problem found
        """


def expect_envelope(payload: Any) -> list[Any]:
    return expect_array(payload, MESSAGE_ARITY, "message")


def decode_channel_id(value: Any) -> int:
    """Decode slot 0."""
    try:
        return expect_integer(value, 0)
    except FieldTypeMismatchError as e:
        raise MissingChannelIdError(f"First slot must be the channel id: {e}") from e


def decode_channel_name(value: Any) -> str:
    """Decode slot 2."""
    if not isinstance(value, str):
        raise FieldTypeMismatchError(
            f"Third slot must be the channel name, got {describe(value)}", location=2
        )
    return value


def decode_pair(value: Any) -> str:
    """Decode slot 3."""
    if not isinstance(value, str):
        raise MissingPairError(f"Last slot must be the pair, got {describe(value)}")
    return value
