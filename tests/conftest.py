"""
Pytest fixtures for EAC scheduling SDK tests.
"""

import pytest
from web3 import Web3

from eac_sdk.scheduling.config import SchedulingConfig
from tests.utils import FROM_ADDRESS, TO_ADDRESS


@pytest.fixture
def config() -> SchedulingConfig:
    return SchedulingConfig()


@pytest.fixture
def schedule_kwargs() -> dict:
    """Arguments for a valid block based schedule call"""
    return {
        "to_address": TO_ADDRESS,
        "call_data": b"\x12\x34",
        "call_gas": 21000,
        "call_value": Web3.to_wei(1, "ether"),
        "window_size": 90,
        "window_start": 8_000_000,
        "call_gas_price": Web3.to_wei(20, "gwei"),
        "time_bounty": Web3.to_wei(10, "finney"),
        "required_deposit": 0,
    }


@pytest.fixture
def validate_request_kwargs() -> dict:
    """Arguments for a timestamp based validateRequestParams call"""
    return {
        "to_address": TO_ADDRESS,
        "call_data": "0xdeadbeef",
        "call_gas": 50000,
        "call_value": 123,
        "window_size": 600,
        "window_start": 1_530_000_000,
        "gas_price": Web3.to_wei(5, "gwei"),
        "time_bounty": 1000,
        "required_deposit": 7,
        "is_timestamp": True,
        "endowment": Web3.to_wei(1, "ether"),
        "from_address": FROM_ADDRESS,
    }
