# Config
from eac_sdk.scheduling.config import (
    EAC_ADDRESSES,
    EAC_SCHEDULING_CONFIG,
    NetworkAddresses,
    SchedulingConfig,
    get_config,
    get_network_addresses,
)

# Exceptions
from eac_sdk.scheduling.exceptions import InvalidNetworkError, SchedulingError, ValidityFlagsError

# Types
from eac_sdk.scheduling.types import (
    ScheduleParams,
    SchedulingValidityError,
    TemporalPolicy,
    TemporalUnit,
    ValidateRequestParams,
)

# Fees
from eac_sdk.scheduling.fees import (
    calc_endowment,
    calc_future_execution_cost,
    calc_total_cost,
    get_default_window_size,
    is_time_bounty_in_range,
)

# Encoding
from eac_sdk.scheduling.encoding import (
    FEE_RECIPIENT_PLACEHOLDER,
    encode_schedule_params,
    encode_validate_request_params,
    get_schedule_data,
    get_temporal_policy,
    get_validate_request_params_data,
)

# Validity
from eac_sdk.scheduling.validity import decode_validity_flags, parse_scheduling_parameters_validity

# Addresses
from eac_sdk.scheduling.addresses import get_request_factory_address, get_scheduler_address, get_tx_details_check_url

__all__ = [
    # Config
    "EAC_ADDRESSES",
    "EAC_SCHEDULING_CONFIG",
    "NetworkAddresses",
    "SchedulingConfig",
    "get_config",
    "get_network_addresses",
    # Exceptions
    "InvalidNetworkError",
    "SchedulingError",
    "ValidityFlagsError",
    # Types
    "ScheduleParams",
    "SchedulingValidityError",
    "TemporalPolicy",
    "TemporalUnit",
    "ValidateRequestParams",
    # Fees
    "calc_endowment",
    "calc_future_execution_cost",
    "calc_total_cost",
    "get_default_window_size",
    "is_time_bounty_in_range",
    # Encoding
    "FEE_RECIPIENT_PLACEHOLDER",
    "encode_schedule_params",
    "encode_validate_request_params",
    "get_schedule_data",
    "get_temporal_policy",
    "get_validate_request_params_data",
    # Validity
    "decode_validity_flags",
    "parse_scheduling_parameters_validity",
    # Addresses
    "get_request_factory_address",
    "get_scheduler_address",
    "get_tx_details_check_url",
]
