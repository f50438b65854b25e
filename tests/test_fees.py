"""Tests for the scheduling cost formulas."""

from dataclasses import replace

import pytest

from eac_sdk.scheduling.fees import (
    calc_endowment,
    calc_future_execution_cost,
    calc_total_cost,
    get_default_window_size,
    is_time_bounty_in_range,
)
from tests.utils import EXPECTED_FEE_TOTAL, GWEI


def test_future_execution_cost_hand_computed():
    # 1 + 2242000000000000 * 2 + (21000 + 180000) * 20 gwei
    assert calc_future_execution_cost(21000, 20 * GWEI, 1) == 8504000000000001


@pytest.mark.parametrize("call_gas, call_gas_price", [(0, 0), (21000, 20 * GWEI), (3_000_000, 1), (10**30, 10**30)])
def test_future_execution_cost_defaults_time_bounty_to_minimum(config, call_gas, call_gas_price):
    assert calc_future_execution_cost(call_gas, call_gas_price, None) == calc_future_execution_cost(
        call_gas, call_gas_price, config.time_bounty_min
    )


def test_future_execution_cost_keeps_zero_time_bounty():
    """Zero is a given bounty, only None falls back to the minimum"""
    assert calc_future_execution_cost(0, 0, 0) == EXPECTED_FEE_TOTAL
    assert calc_future_execution_cost(0, 0) == EXPECTED_FEE_TOTAL + 1


def test_future_execution_cost_uses_given_config(config):
    cheap = replace(config, fee=0, future_execution_cost=0)
    assert calc_future_execution_cost(100, 2, 5, config=cheap) == 205


def test_total_cost_hand_computed():
    # deployment: 20 gwei * 1500000 = 30000000000000000
    assert calc_total_cost(21000, 20 * GWEI, 20 * GWEI, 1) == 38504000000000001


def test_total_cost_is_deployment_plus_future_execution(config):
    call_gas, gas_price, call_gas_price, time_bounty = 90000, 3 * GWEI, 7 * GWEI, 10**15

    expected = gas_price * config.scheduling_gas_limit + calc_future_execution_cost(
        call_gas, call_gas_price, time_bounty
    )
    assert calc_total_cost(call_gas, gas_price, call_gas_price, time_bounty) == expected


def test_total_cost_defaults_time_bounty():
    assert calc_total_cost(21000, GWEI, GWEI) == calc_total_cost(21000, GWEI, GWEI, 1)


def test_endowment_fallbacks(config):
    """Missing call value, gas and gas price fall back to 0, 21000 and 20 gwei"""
    assert calc_endowment(None, None, None, 1) == 8504000000000001
    assert calc_endowment(None, None, None, 1) == calc_endowment(
        config.schedule_gas_limit_fallback, 0, 20 * GWEI, 1
    )


def test_endowment_adds_call_value():
    base = calc_endowment(21000, 0, GWEI, 5)
    assert calc_endowment(21000, 10**18, GWEI, 5) == base + 10**18


@pytest.mark.parametrize("position", [0, 1, 2, 3])
def test_endowment_is_non_decreasing_in_each_argument(position):
    args = [21000, 10**16, 2 * GWEI, 10**14]
    previous = calc_endowment(*args)

    for step in (0, 1, 1000, 10**9, 10**20):
        bumped = list(args)
        bumped[position] += step
        current = calc_endowment(*bumped)
        assert current >= previous, f"Endowment decreased when raising argument {position} by {step}"
        previous = current


@pytest.mark.parametrize(
    "time_bounty, expected",
    [(0, False), (1, True), (10**18, True), (900 * 10**18, True), (900 * 10**18 + 1, False)],
)
def test_time_bounty_range(time_bounty, expected):
    assert is_time_bounty_in_range(time_bounty) is expected


def test_default_window_size(config):
    assert get_default_window_size("time") == 10
    assert get_default_window_size("block") == 90
    assert get_default_window_size("anything") == 90
    assert get_default_window_size(None) == config.window_size_default_block


def test_endowment_keeps_explicit_zeros(config):
    """Zero call gas, value and gas price are used as given, not replaced by fallbacks"""
    assert calc_endowment(0, 0, 0, 0) == config.fee * config.fee_multiplier
    assert calc_endowment(0, 0, 0, 0) == EXPECTED_FEE_TOTAL
