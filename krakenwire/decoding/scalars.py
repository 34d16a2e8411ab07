"""Scalar normalization and slot-shape checks.

Frames are parsed with ``parse_float=Decimal`` so fractional numbers are never
materialized as binary floats. A fractional number at a scalar position is
rejected rather than reformatted: prices must arrive as strings.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

from krakenwire.core.exceptions import (
    ArityMismatchError,
    FieldTypeMismatchError,
    Location,
    MalformedJsonError,
    UnexpectedScalarShapeError,
)
from krakenwire.models.scalars import U64_MAX, DecimalScalar, IntegerScalar, ScalarValue


def parse_json(text: str | bytes) -> Any:
    """Parse one frame without ever producing a float.

    Raises:
        MalformedJsonError: If the text is not valid JSON, holds an integer
            too long to convert, or nests too deeply to parse
    """
    try:
        return json.loads(text, parse_float=Decimal, parse_constant=Decimal)
    # JSONDecodeError, UnicodeDecodeError and the int digit limit are all ValueError
    except (ValueError, RecursionError) as e:
        raise MalformedJsonError(f"Frame is not valid JSON: {e}", text=text) from e


def describe(value: Any) -> str:
    """Name the JSON kind of a parsed value for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, (Decimal, float)):
        return "fractional number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def normalize_scalar(value: Any, location: Location = None) -> ScalarValue:
    """Classify a JSON scalar as an unsigned integer or decimal text.

    Args:
        value: Parsed JSON value
        location: Slot index or key path, for diagnostics

    Returns:
        IntegerScalar for an integer in the u64 range, DecimalScalar for a string

    Raises:
        UnexpectedScalarShapeError: For anything else, including booleans,
            negative or oversized integers and fractional numbers
    """
    # bool is an int subclass
    if isinstance(value, bool):
        raise UnexpectedScalarShapeError(
            f"Expected a number or string at {location!r}, got boolean", location=location
        )
    if isinstance(value, int):
        if 0 <= value <= U64_MAX:
            return IntegerScalar(value=value)
        raise UnexpectedScalarShapeError(
            f"Integer {value} at {location!r} is outside the unsigned 64-bit range",
            location=location,
        )
    if isinstance(value, str):
        return DecimalScalar(value=value)
    raise UnexpectedScalarShapeError(
        f"Expected a number or string at {location!r}, got {describe(value)}", location=location
    )


def expect_decimal(value: Any, location: Location) -> str:
    """Normalize a scalar that must be decimal text and return the text."""
    scalar = normalize_scalar(value, location)
    if not isinstance(scalar, DecimalScalar):
        raise FieldTypeMismatchError(
            f"Expected decimal text at {location!r}, got integer", location=location
        )
    return scalar.value


def expect_integer(value: Any, location: Location) -> int:
    """Normalize a scalar that must be an unsigned integer and return it."""
    scalar = normalize_scalar(value, location)
    if not isinstance(scalar, IntegerScalar):
        raise FieldTypeMismatchError(
            f"Expected an integer at {location!r}, got string", location=location
        )
    return scalar.value


def expect_array(value: Any, length: int, location: Location) -> list[Any]:
    """Check that a value is an array of exactly ``length`` elements."""
    if not isinstance(value, list):
        raise FieldTypeMismatchError(
            f"Expected an array at {location!r}, got {describe(value)}", location=location
        )
    if len(value) != length:
        raise ArityMismatchError(
            f"Expected {length} elements at {location!r}, got {len(value)}",
            expected=length,
            actual=len(value),
            location=location,
        )
    return value
