"""Custom exception hierarchy.

Decode failures carry a ``location`` that points at the offending slot: an
integer index into a positional array, a payload key such as ``"t"``, or a
key path such as ``"c[1]"``.
"""

from __future__ import annotations

from typing import Union

Location = Union[int, str, None]


class DataError(Exception):
    """Base exception for all library errors."""

    pass


class ValidationError(DataError):
    """Invalid arguments for an outbound request."""

    pass


class DecodeError(DataError):
    """A message could not be decoded into a record."""

    def __init__(self, message: str, location: Location = None) -> None:
        super().__init__(message)
        self.location = location


class MalformedJsonError(DecodeError):
    """Frame text is not valid JSON."""

    def __init__(self, message: str, text: str | bytes | None = None) -> None:
        super().__init__(message)
        self.text = text


class ArityMismatchError(DecodeError):
    """An array has the wrong number of elements."""

    def __init__(
        self,
        message: str,
        expected: int,
        actual: int,
        location: Location = None,
    ) -> None:
        super().__init__(message, location=location)
        self.expected = expected
        self.actual = actual


class FieldTypeMismatchError(DecodeError):
    """A slot holds a JSON value of the wrong kind."""

    pass


class UnexpectedScalarShapeError(FieldTypeMismatchError):
    """A scalar slot holds something other than an unsigned integer or a string."""

    pass


class MissingChannelIdError(FieldTypeMismatchError):
    """First slot is not an unsigned integer channel id."""

    def __init__(self, message: str) -> None:
        super().__init__(message, location=0)


class MissingPairError(FieldTypeMismatchError):
    """Last slot is not a pair name."""

    def __init__(self, message: str) -> None:
        super().__init__(message, location=3)


class BidAskShapeMismatchError(FieldTypeMismatchError):
    """Bid/ask triple is not ordered (decimal, integer, decimal)."""

    pass


class MissingFieldError(DecodeError):
    """A required key is absent from a payload object."""

    def __init__(self, key: str) -> None:
        super().__init__(f"payload is missing required key {key!r}", location=key)
        self.key = key


class UnrecognizedShapeError(DecodeError):
    """No decoder accepted the message.

    ``attempts`` maps each decoder name to the error it raised, in the order
    the decoders were tried.
    """

    def __init__(self, message: str, attempts: dict[str, DecodeError] | None = None) -> None:
        super().__init__(message)
        self.attempts = attempts or {}
