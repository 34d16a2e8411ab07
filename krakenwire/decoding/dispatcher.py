"""Routes raw frames to the decoder matching their shape.

Frames carry no explicit message-kind tag. The dispatcher tries each adapter
in order (ticker, then OHLC) and keeps the first record produced. Frames that
are not JSON, or that no adapter accepts (heartbeats, status events,
subscription acknowledgements), are skipped by ``decode`` and reported by
``decode_strict``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from krakenwire.core.exceptions import DecodeError, MalformedJsonError, UnrecognizedShapeError
from krakenwire.models import DecodedMessage

from .base import MessageAdapter
from .ohlc import OhlcAdapter
from .scalars import parse_json
from .ticker import TickerAdapter

logger = logging.getLogger(__name__)

DEFAULT_ADAPTERS: tuple[MessageAdapter, ...] = (TickerAdapter(), OhlcAdapter())


class MessageDispatcher:
    """Stateless router from frame text to typed records."""

    def __init__(self, adapters: Sequence[MessageAdapter] | None = None) -> None:
        """Initialize dispatcher.

        Args:
            adapters: Adapters to try, in order. Defaults to ticker then OHLC.
        """
        self._adapters = tuple(adapters) if adapters is not None else DEFAULT_ADAPTERS

    @property
    def adapters(self) -> tuple[MessageAdapter, ...]:
        return self._adapters

    def decode_payload(self, payload: Any) -> DecodedMessage:
        """Decode an already-parsed frame.

        Raises:
            UnrecognizedShapeError: If no adapter accepts the frame
        """
        attempts: dict[str, DecodeError] = {}
        for adapter in self._adapters:
            try:
                return adapter.parse(payload)
            except DecodeError as e:
                attempts[adapter.name] = e
        raise UnrecognizedShapeError("Frame matches no known message shape", attempts=attempts)

    def decode_strict(self, text: str | bytes) -> DecodedMessage:
        """Decode frame text, raising instead of skipping.

        Raises:
            MalformedJsonError: If the text is not valid JSON
            UnrecognizedShapeError: If no adapter accepts the frame
        """
        return self.decode_payload(parse_json(text))

    def decode(self, text: str | bytes) -> DecodedMessage | None:
        """Decode frame text, returning None for frames that carry no record."""
        try:
            return self.decode_strict(text)
        except MalformedJsonError as e:
            logger.debug("Skipping non-JSON frame", extra={"reason": str(e)})
        except UnrecognizedShapeError as e:
            logger.debug(
                "Skipping unrecognized frame",
                extra={"attempts": {name: str(err) for name, err in e.attempts.items()}},
            )
        return None

    def decode_many(self, texts: Iterable[str | bytes]) -> Iterator[DecodedMessage]:
        """Decode a stream of frames, yielding only records."""
        for text in texts:
            record = self.decode(text)
            if record is not None:
                yield record


_default_dispatcher = MessageDispatcher()


def decode_message(text: str | bytes) -> DecodedMessage | None:
    """Decode one frame with the default adapters; None means skip."""
    return _default_dispatcher.decode(text)


def decode_many(texts: Iterable[str | bytes]) -> Iterator[DecodedMessage]:
    """Decode a stream of frames with the default adapters."""
    return _default_dispatcher.decode_many(texts)
