"""Tests for the conversion utilities."""

from datetime import datetime, timezone

import pytest

from eac_sdk.utils.converters import (
    format_schedule_timestamp,
    gas_price_to_wei,
    parse_schedule_timestamp,
    to_call_data_bytes,
)


@pytest.mark.parametrize(
    "call_data, expected",
    [
        (b"\x01\x02", b"\x01\x02"),
        (bytearray(b"\x01"), b"\x01"),
        ("", b""),
        ("0xdeadbeef", b"\xde\xad\xbe\xef"),
        ("hello", b"hello"),
        ("deadbeef", b"deadbeef"),
    ],
)
def test_to_call_data_bytes(call_data, expected):
    assert to_call_data_bytes(call_data) == expected


def test_gas_price_to_wei():
    assert gas_price_to_wei(20) == 20_000_000_000
    assert gas_price_to_wei("1.5") == 1_500_000_000


def test_parse_schedule_timestamp_is_utc():
    expected = int(datetime(2018, 6, 1, 12, 30, 0, tzinfo=timezone.utc).timestamp())

    assert parse_schedule_timestamp("2018-06-01 12:30:00") == expected


def test_format_schedule_timestamp():
    assert format_schedule_timestamp(0) == "1970-01-01 00:00:00"
    assert parse_schedule_timestamp(format_schedule_timestamp(1_530_000_000)) == 1_530_000_000


def test_parse_schedule_timestamp_rejects_other_formats():
    with pytest.raises(ValueError):
        parse_schedule_timestamp("01/06/2018 12:30")
