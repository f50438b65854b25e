"""
EAC Scheduling SDK - Python SDK for scheduling transactions with the Ethereum Alarm Clock.

This package provides modules for preparing scheduled calls:
- scheduling: Cost formulas, call data builders and validity decoding for the EAC contracts
- utils: Conversions for call data, gas prices and schedule timestamps
"""

from eac_sdk._version import SDK_VERSION
from eac_sdk.scheduling import (
    EAC_SCHEDULING_CONFIG,
    SchedulingConfig,
    calc_endowment,
    calc_future_execution_cost,
    calc_total_cost,
    get_schedule_data,
    get_scheduler_address,
    get_tx_details_check_url,
    get_validate_request_params_data,
    parse_scheduling_parameters_validity,
)

__all__ = [
    "SDK_VERSION",
    "EAC_SCHEDULING_CONFIG",
    "SchedulingConfig",
    "calc_endowment",
    "calc_future_execution_cost",
    "calc_total_cost",
    "get_schedule_data",
    "get_scheduler_address",
    "get_tx_details_check_url",
    "get_validate_request_params_data",
    "parse_scheduling_parameters_validity",
]
