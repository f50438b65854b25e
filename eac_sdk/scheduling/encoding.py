"""
Call data builders for the EAC Scheduler and RequestFactory contracts.

Payloads are the 4-byte function selector followed by the ABI-encoded arguments,
ready to be used as the data field of a transaction.
"""

from typing import Optional, Union

import logging

from eth_abi import encode
from web3 import Web3

from eac_sdk.scheduling.config import EAC_SCHEDULING_CONFIG, SchedulingConfig
from eac_sdk.scheduling.types import (
    ScheduleParams,
    ScheduleUintArgs,
    TemporalPolicy,
    TemporalUnit,
    ValidateRequestParams,
    ValidateRequestUintArgs,
)
from eac_sdk.utils.converters import to_call_data_bytes

logger = logging.getLogger("eac.scheduling")

SCHEDULE_SIGNATURE = "schedule(address,bytes,uint256[8])"
SCHEDULE_ARG_TYPES = ["address", "bytes", "uint256[8]"]

VALIDATE_REQUEST_PARAMS_SIGNATURE = "validateRequestParams(address[3],uint256[12],bytes,uint256)"
VALIDATE_REQUEST_PARAMS_ARG_TYPES = ["address[3]", "uint256[12]", "bytes", "uint256"]

# The request factory does not get a real fee recipient yet
FEE_RECIPIENT_PLACEHOLDER = "0x0000000000000000000000000000000000000000"

UINT256_BITS = 256


def function_selector(signature: str) -> bytes:
    """First four bytes of the keccak hash of a canonical function signature."""
    return bytes(Web3.keccak(text=signature)[:4])


def get_temporal_policy(is_timestamp: bool) -> TemporalPolicy:
    """Freeze, reserved and claim windows for timestamp (seconds) or block based scheduling."""
    if is_timestamp:
        return TemporalPolicy(
            temporal_unit=TemporalUnit.TIMESTAMP,
            freeze_period=3 * 60,  # 3 minutes
            reserved_window_size=5 * 60,  # 5 minutes
            claim_window_size=60 * 60,  # 60 minutes
        )
    return TemporalPolicy(
        temporal_unit=TemporalUnit.BLOCKS,
        freeze_period=10,
        reserved_window_size=16,
        claim_window_size=255,
    )


def _schedule_data_problem(
    call_gas: Optional[int],
    call_value: Optional[int],
    window_size: Optional[int],
    window_start: Optional[int],
    call_gas_price: Optional[int],
    time_bounty: Optional[int],
) -> Optional[str]:
    """Returns why the schedule arguments cannot be encoded, or None if they can."""
    required = {
        "call_value": call_value,
        "call_gas": call_gas,
        "call_gas_price": call_gas_price,
        "window_start": window_start,
        "window_size": window_size,
        "time_bounty": time_bounty,
    }
    missing = [name for name, value in required.items() if value is None]
    if missing:
        return f"missing {', '.join(missing)}"

    if time_bounty < 0:
        return "time_bounty is negative"
    if call_gas_price < 0:
        return "call_gas_price is negative"
    if window_size < 0:
        return "window_size is negative"
    if window_size.bit_length() > UINT256_BITS:
        return "window_size does not fit in uint256"

    return None


def get_schedule_data(
    to_address: str,
    call_data: Union[bytes, str] = b"",
    call_gas: Optional[int] = None,
    call_value: Optional[int] = None,
    window_size: Optional[int] = None,
    window_start: Optional[int] = None,
    call_gas_price: Optional[int] = None,
    time_bounty: Optional[int] = None,
    required_deposit: Optional[int] = None,
    config: SchedulingConfig = EAC_SCHEDULING_CONFIG,
) -> Optional[bytes]:
    """
    Builds the call data for Scheduler.schedule(address,bytes,uint256[8]).

    Args:
        to_address (str): Address the scheduled call is sent to.
        call_data (bytes | str): Data of the scheduled call, raw or 0x-prefixed hex.
        call_gas (int): Gas limit of the scheduled call.
        call_value (int): Wei sent with the scheduled call.
        window_size (int): Length of the execution window in blocks or seconds.
        window_start (int): Block number or timestamp the execution window opens at.
        call_gas_price (int): Gas price of the scheduled call in wei.
        time_bounty (int): Executor reward in wei.
        required_deposit (int, optional): Claim deposit in wei, negative or missing means 0.
        config (SchedulingConfig): Supplies the EAC fee.

    Returns:
        bytes | None: Encoded payload, or None when a required argument is missing or out of range.
    """
    if required_deposit is None or required_deposit < 0:
        required_deposit = 0

    call_data = to_call_data_bytes(call_data)

    problem = _schedule_data_problem(call_gas, call_value, window_size, window_start, call_gas_price, time_bounty)
    if problem is not None:
        logger.debug(f"Cannot encode schedule call: {problem}")
        return None

    uint_args = ScheduleUintArgs(
        call_gas=call_gas,
        call_value=call_value,
        window_size=window_size,
        window_start=window_start,
        call_gas_price=call_gas_price,
        fee=config.fee,
        time_bounty=time_bounty,
        required_deposit=required_deposit,
    )

    encoded_args = encode(SCHEDULE_ARG_TYPES, [to_address, call_data, list(uint_args.as_tuple())])
    return function_selector(SCHEDULE_SIGNATURE) + encoded_args


def encode_schedule_params(
    params: ScheduleParams, config: SchedulingConfig = EAC_SCHEDULING_CONFIG
) -> Optional[bytes]:
    """Builds the Scheduler.schedule call data from a ScheduleParams bundle."""
    return get_schedule_data(
        to_address=params.to_address,
        call_data=params.call_data,
        call_gas=params.call_gas,
        call_value=params.call_value,
        window_size=params.window_size,
        window_start=params.window_start,
        call_gas_price=params.call_gas_price,
        time_bounty=params.time_bounty,
        required_deposit=params.required_deposit,
        config=config,
    )


def get_validate_request_params_data(
    to_address: str,
    call_data: Union[bytes, str] = b"",
    *,
    call_gas: int,
    call_value: int,
    window_size: Optional[int],
    window_start: int,
    gas_price: int,
    time_bounty: int,
    required_deposit: int,
    is_timestamp: bool,
    endowment: int,
    from_address: str,
    config: SchedulingConfig = EAC_SCHEDULING_CONFIG,
) -> bytes:
    """
    Builds the call data for RequestFactory.validateRequestParams.

    The claim, freeze and reserved windows are derived from is_timestamp and the
    fee recipient is always FEE_RECIPIENT_PLACEHOLDER.

    Returns:
        bytes: Encoded payload; the contract answers with bool[6], see parse_scheduling_parameters_validity.
    """
    if window_size is None:
        window_size = 0

    policy = get_temporal_policy(is_timestamp)

    address_args = [from_address, FEE_RECIPIENT_PLACEHOLDER, to_address]
    uint_args = ValidateRequestUintArgs(
        fee=config.fee,
        time_bounty=time_bounty,
        claim_window_size=policy.claim_window_size,
        freeze_period=policy.freeze_period,
        reserved_window_size=policy.reserved_window_size,
        temporal_unit=int(policy.temporal_unit),
        window_size=window_size,
        window_start=window_start,
        call_gas=call_gas,
        call_value=call_value,
        gas_price=gas_price,
        required_deposit=required_deposit,
    )

    encoded_args = encode(
        VALIDATE_REQUEST_PARAMS_ARG_TYPES,
        [address_args, list(uint_args.as_tuple()), to_call_data_bytes(call_data), endowment],
    )
    return function_selector(VALIDATE_REQUEST_PARAMS_SIGNATURE) + encoded_args


def encode_validate_request_params(
    params: ValidateRequestParams, config: SchedulingConfig = EAC_SCHEDULING_CONFIG
) -> bytes:
    """Builds the RequestFactory.validateRequestParams call data from a ValidateRequestParams bundle."""
    return get_validate_request_params_data(
        to_address=params.to_address,
        call_data=params.call_data,
        call_gas=params.call_gas,
        call_value=params.call_value,
        window_size=params.window_size,
        window_start=params.window_start,
        gas_price=params.gas_price,
        time_bounty=params.time_bounty,
        required_deposit=params.required_deposit,
        is_timestamp=params.is_timestamp,
        endowment=params.endowment,
        from_address=params.from_address,
        config=config,
    )
