"""
Conversion utilities for the EAC scheduling SDK.

This module provides functions for converting call data, gas prices and
schedule timestamps into the units the EAC contracts expect.
"""

from typing import Union

from datetime import datetime, timezone
from decimal import Decimal

from eth_utils import is_0x_prefixed, is_hexstr
from hexbytes import HexBytes
from web3 import Web3

from eac_sdk.scheduling.config import EAC_SCHEDULING_CONFIG, SchedulingConfig


def to_call_data_bytes(call_data: Union[bytes, bytearray, str]) -> bytes:
    """
    Convert call data to raw bytes.

    Args:
        call_data: Raw bytes, a 0x-prefixed hex string, or any other text (encoded as UTF-8)

    Returns:
        Call data as bytes
    """
    if isinstance(call_data, (bytes, bytearray)):
        return bytes(call_data)

    if not call_data:
        return b""

    if is_0x_prefixed(call_data) and is_hexstr(call_data):
        return bytes(HexBytes(call_data))

    return call_data.encode("utf-8")


def gas_price_to_wei(gas_price_gwei: Union[str, int, Decimal]) -> int:
    """
    Convert a human readable gas price in gwei to wei.

    Args:
        gas_price_gwei: Gas price in gwei

    Returns:
        Gas price in wei
    """
    return int(Web3.to_wei(gas_price_gwei, "gwei"))


def parse_schedule_timestamp(value: str, config: SchedulingConfig = EAC_SCHEDULING_CONFIG) -> int:
    """
    Parse a schedule date (UTC) into a unix timestamp usable as a window start.

    Args:
        value: Date string in config.schedule_timestamp_format
        config: Scheduling configuration

    Returns:
        Unix timestamp in seconds
    """
    parsed = datetime.strptime(value, config.schedule_timestamp_format)
    return int(parsed.replace(tzinfo=timezone.utc).timestamp())


def format_schedule_timestamp(timestamp: int, config: SchedulingConfig = EAC_SCHEDULING_CONFIG) -> str:
    """
    Format a unix timestamp (UTC) as a schedule date string.

    Args:
        timestamp: Unix timestamp in seconds
        config: Scheduling configuration

    Returns:
        Date string in config.schedule_timestamp_format
    """
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime(config.schedule_timestamp_format)
