from typing import Optional, Union

from dataclasses import dataclass
from enum import Enum, IntEnum


class TemporalUnit(IntEnum):
    """Unit the execution window of a scheduled request is measured in"""

    BLOCKS = 1
    TIMESTAMP = 2


class SchedulingValidityError(str, Enum):
    """Checks performed by RequestFactory.validateRequestParams, in the order of its bool[6] result."""

    INSUFFICIENT_ENDOWMENT = "InsufficientEndowment"
    RESERVED_WINDOW_BIGGER_THAN_EXECUTION_WINDOW = "ReservedWindowBiggerThanExecutionWindow"
    INVALID_TEMPORAL_UNIT = "InvalidTemporalUnit"
    EXECUTION_WINDOW_TOO_SOON = "ExecutionWindowTooSoon"
    CALL_GAS_TOO_HIGH = "CallGasTooHigh"
    EMPTY_TO_ADDRESS = "EmptyToAddress"


@dataclass(frozen=True)
class TemporalPolicy:
    """Claim and freeze windows the request factory applies for a temporal unit."""

    temporal_unit: TemporalUnit
    freeze_period: int
    reserved_window_size: int
    claim_window_size: int


@dataclass(frozen=True)
class ScheduleUintArgs:
    """The uint256[8] argument of Scheduler.schedule"""

    call_gas: int
    call_value: int
    window_size: int
    window_start: int
    call_gas_price: int
    fee: int
    time_bounty: int
    required_deposit: int

    def as_tuple(self) -> tuple[int, ...]:
        # Order is the contract's ABI, do not reorder
        return (
            self.call_gas,
            self.call_value,
            self.window_size,
            self.window_start,
            self.call_gas_price,
            self.fee,
            self.time_bounty,
            self.required_deposit,
        )


@dataclass(frozen=True)
class ValidateRequestUintArgs:
    """The uint256[12] argument of RequestFactory.validateRequestParams"""

    fee: int
    time_bounty: int
    claim_window_size: int
    freeze_period: int
    reserved_window_size: int
    temporal_unit: int
    window_size: int
    window_start: int
    call_gas: int
    call_value: int
    gas_price: int
    required_deposit: int

    def as_tuple(self) -> tuple[int, ...]:
        # Order is the contract's ABI, do not reorder
        return (
            self.fee,
            self.time_bounty,
            self.claim_window_size,
            self.freeze_period,
            self.reserved_window_size,
            self.temporal_unit,
            self.window_size,
            self.window_start,
            self.call_gas,
            self.call_value,
            self.gas_price,
            self.required_deposit,
        )


@dataclass
class ScheduleParams:
    """Data class to store the parameters of a scheduled call."""

    to_address: str  # Address the scheduled call is sent to
    call_data: Union[bytes, str] = b""  # Raw bytes or 0x-prefixed hex
    call_gas: Optional[int] = None  # Gas limit of the scheduled call
    call_value: Optional[int] = None  # Wei sent with the scheduled call
    window_size: Optional[int] = None  # Blocks or seconds the call stays executable
    window_start: Optional[int] = None  # Block number or unix timestamp the window opens at
    call_gas_price: Optional[int] = None  # Gas price of the scheduled call (wei)
    time_bounty: Optional[int] = None  # Reward for the executing agent (wei)
    required_deposit: Optional[int] = None  # Deposit a claimer must put up (wei)


@dataclass
class ValidateRequestParams:
    """Data class to store the parameters checked by RequestFactory.validateRequestParams."""

    to_address: str
    from_address: str
    call_gas: int
    call_value: int
    window_start: int
    gas_price: int
    time_bounty: int
    required_deposit: int
    is_timestamp: bool
    endowment: int
    call_data: Union[bytes, str] = b""
    window_size: Optional[int] = None
