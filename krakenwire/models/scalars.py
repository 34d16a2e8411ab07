"""Scalar leaf values of positional messages.

Prices and volumes arrive as JSON strings and stay strings: ``DecimalText``
fields keep the exchange's exact text so "1.000" never becomes "1.0".
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

U64_MAX = 2**64 - 1

DecimalText = StrictStr
UInt64 = Annotated[StrictInt, Field(ge=0, le=U64_MAX)]


class IntegerScalar(BaseModel):
    """JSON number holding an unsigned 64-bit integer."""

    kind: Literal["integer"] = "integer"
    value: UInt64

    model_config = ConfigDict(frozen=True)


class DecimalScalar(BaseModel):
    """JSON string holding a decimal number, kept verbatim."""

    kind: Literal["decimal"] = "decimal"
    value: DecimalText

    model_config = ConfigDict(frozen=True)


ScalarValue = Union[IntegerScalar, DecimalScalar]
