"""Unit tests for the OHLC decoder."""

import json

import pytest

from krakenwire.core import (
    ArityMismatchError,
    FieldTypeMismatchError,
    MissingChannelIdError,
    MissingPairError,
    OhlcInterval,
    UnexpectedScalarShapeError,
)
from krakenwire.decoding import OhlcAdapter, decode_ohlc
from krakenwire.decoding.scalars import parse_json
from krakenwire.models import OHLC_DECIMAL_FIELDS, OhlcRecord


def test_decode_valid_ohlc(ohlc_frame):
    """Full OHLC frame decodes into the expected record."""
    record = decode_ohlc(parse_json(ohlc_frame))

    assert record == OhlcRecord(
        channel_id=42,
        channel_name="ohlc-5",
        pair="XBT/USD",
        time="1542057314.748456",
        etime="1542057360.435743",
        open="3586.70001",
        high="3586.70000",
        low="3586.60001",
        close="3586.60000",
        vwap="3586.68894",
        volume="0.03373000",
        trade_count=2,
    )
    assert record.interval == OhlcInterval.M5


def test_fields_follow_payload_order(ohlc_message):
    """Each decimal field comes from its documented index."""
    ohlc_message[1][:8] = [f"{index}.0" for index in range(8)]
    record = decode_ohlc(ohlc_message)
    for index, name in enumerate(OHLC_DECIMAL_FIELDS):
        assert getattr(record, name) == f"{index}.0"


def test_swapping_count_and_volume(ohlc_message):
    """Putting count before volume is a type mismatch at index 7."""
    payload = ohlc_message[1]
    payload[7], payload[8] = payload[8], payload[7]
    with pytest.raises(FieldTypeMismatchError) as exc_info:
        decode_ohlc(ohlc_message)
    assert exc_info.value.location == 7


@pytest.mark.parametrize("index", range(8))
def test_decimal_index_rejects_integer(ohlc_message, index):
    """Indices 0-7 must be decimal text."""
    ohlc_message[1][index] = 3586
    with pytest.raises(FieldTypeMismatchError) as exc_info:
        decode_ohlc(ohlc_message)
    assert exc_info.value.location == index


def test_count_rejects_string(ohlc_message):
    """Index 8 must be an integer."""
    ohlc_message[1][8] = "2"
    with pytest.raises(FieldTypeMismatchError) as exc_info:
        decode_ohlc(ohlc_message)
    assert exc_info.value.location == 8


def test_fractional_count_rejected():
    """A fractional trade count is not silently truncated."""
    frame = '[42, ["1","2","3","4","5","6","7","8", 2.0], "ohlc-5", "XBT/USD"]'
    with pytest.raises(UnexpectedScalarShapeError) as exc_info:
        decode_ohlc(parse_json(frame))
    assert exc_info.value.location == 8


def test_null_in_payload(ohlc_message):
    ohlc_message[1][3] = None
    with pytest.raises(UnexpectedScalarShapeError):
        decode_ohlc(ohlc_message)


@pytest.mark.parametrize("length", [8, 10])
def test_payload_arity(ohlc_message, length):
    """The payload must have exactly nine elements."""
    ohlc_message[1] = (ohlc_message[1] + ["extra"])[:length]
    with pytest.raises(ArityMismatchError) as exc_info:
        decode_ohlc(ohlc_message)
    assert exc_info.value.expected == 9
    assert exc_info.value.location == "payload"


def test_payload_object_rejected(ohlc_message, ticker_message):
    """A ticker-style object payload is not an OHLC payload."""
    ohlc_message[1] = ticker_message[1]
    with pytest.raises(FieldTypeMismatchError) as exc_info:
        decode_ohlc(ohlc_message)
    assert exc_info.value.location == "payload"


def test_bad_channel_id(ohlc_message):
    ohlc_message[0] = "42"
    with pytest.raises(MissingChannelIdError):
        decode_ohlc(ohlc_message)


def test_bad_pair(ohlc_message):
    ohlc_message[3] = None
    with pytest.raises(MissingPairError):
        decode_ohlc(ohlc_message)


def test_channel_name_copied_verbatim(ohlc_message):
    """Any channel name string is kept, even one without a known interval."""
    ohlc_message[2] = "ohlc-3"
    record = decode_ohlc(ohlc_message)
    assert record.channel_name == "ohlc-3"
    assert record.interval is None


def test_channel_name_must_be_string(ohlc_message):
    ohlc_message[2] = None
    with pytest.raises(FieldTypeMismatchError) as exc_info:
        decode_ohlc(ohlc_message)
    assert exc_info.value.location == 2


def test_round_trip(ohlc_frame):
    """Re-encoding a record and decoding it again reproduces the record."""
    record = decode_ohlc(parse_json(ohlc_frame))
    assert decode_ohlc(parse_json(json.dumps(record.to_message()))) == record


def test_adapter_name():
    assert OhlcAdapter.name == "ohlc"
