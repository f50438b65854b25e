"""
Utility functions for the EAC scheduling SDK.
"""

from eac_sdk.utils.converters import (
    format_schedule_timestamp,
    gas_price_to_wei,
    parse_schedule_timestamp,
    to_call_data_bytes,
)

__all__ = ["to_call_data_bytes", "gas_price_to_wei", "parse_schedule_timestamp", "format_schedule_timestamp"]
