"""Cost formulas for funding a call scheduled through the Ethereum Alarm Clock.

All values are integers in wei (or gas units for gas limits). Only addition and
multiplication are involved so results are exact.
"""

from typing import Optional

from eac_sdk.scheduling.config import EAC_SCHEDULING_CONFIG, SchedulingConfig
from eac_sdk.utils.converters import gas_price_to_wei


def calc_future_execution_cost(
    call_gas: int,
    call_gas_price: int,
    time_bounty: Optional[int] = None,
    config: SchedulingConfig = EAC_SCHEDULING_CONFIG,
) -> int:
    """
    Calculates what executing the scheduled call will cost when its window opens.

    Args:
        call_gas (int): Gas limit of the scheduled call.
        call_gas_price (int): Gas price of the scheduled call in wei.
        time_bounty (int, optional): Executor reward in wei, defaults to config.time_bounty_min.
        config (SchedulingConfig): Fee and gas constants.

    Returns:
        int: time bounty + EAC fee * fee multiplier + (call gas + execution overhead) * call gas price
    """
    total_gas = call_gas + config.future_execution_cost

    if time_bounty is None:
        time_bounty = config.time_bounty_min

    return time_bounty + config.fee * config.fee_multiplier + total_gas * call_gas_price


def calc_endowment(
    call_gas: Optional[int],
    call_value: Optional[int],
    call_gas_price: Optional[int],
    time_bounty: int,
    config: SchedulingConfig = EAC_SCHEDULING_CONFIG,
) -> int:
    """
    Calculates the endowment a scheduled request has to be funded with.

    Missing call value defaults to 0, missing call gas to the fallback gas limit
    and missing call gas price to the fallback gas price.

    Returns:
        int: call value + future execution cost, in wei
    """
    if call_value is None:
        call_value = 0
    if call_gas is None:
        call_gas = config.schedule_gas_limit_fallback
    if call_gas_price is None:
        call_gas_price = gas_price_to_wei(config.schedule_gas_price_fallback)

    return call_value + calc_future_execution_cost(call_gas, call_gas_price, time_bounty, config=config)


def calc_total_cost(
    call_gas: int,
    gas_price: int,
    call_gas_price: int,
    time_bounty: Optional[int] = None,
    config: SchedulingConfig = EAC_SCHEDULING_CONFIG,
) -> int:
    """Total cost of scheduling: deploying the request now plus executing it later."""
    deploy_cost = gas_price * config.scheduling_gas_limit

    return deploy_cost + calc_future_execution_cost(call_gas, call_gas_price, time_bounty, config=config)


def is_time_bounty_in_range(time_bounty: int, config: SchedulingConfig = EAC_SCHEDULING_CONFIG) -> bool:
    return config.time_bounty_min <= time_bounty <= config.time_bounty_max


def get_default_window_size(
    scheduling_method: Optional[str], config: SchedulingConfig = EAC_SCHEDULING_CONFIG
) -> int:
    """Default execution window: minutes for "time" scheduling, blocks otherwise (None included)."""
    if scheduling_method == "time":
        return config.window_size_default_time
    return config.window_size_default_block
