"""Build the call data for scheduling a transfer and for checking its parameters.

The payloads are only printed: sign and send them with your own wallet tooling.
Requires TO_ADDRESS and FROM_ADDRESS in the environment.
"""

import logging
import os

from dotenv import load_dotenv
from web3 import Web3

from eac_sdk.scheduling import (
    ScheduleParams,
    ValidateRequestParams,
    calc_endowment,
    encode_schedule_params,
    encode_validate_request_params,
    get_config,
    get_default_window_size,
    get_request_factory_address,
    get_scheduler_address,
)
from eac_sdk.utils import parse_schedule_timestamp

logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

logger = logging.getLogger("eac.example")


def main():
    load_dotenv()

    config = get_config()
    to_address = os.environ["TO_ADDRESS"]
    from_address = os.environ["FROM_ADDRESS"]
    is_timestamp = config.default_scheduling_method == "time"

    window_start = parse_schedule_timestamp(os.environ.get("SCHEDULE_AT", "2030-01-01 12:00:00"), config=config)
    # Default time window is given in minutes
    window_size = get_default_window_size(config.default_scheduling_method, config=config)
    if is_timestamp:
        window_size *= 60

    params = ScheduleParams(
        to_address=to_address,
        call_gas=config.schedule_gas_limit_fallback,
        call_value=Web3.to_wei(0.1, "ether"),
        window_size=window_size,
        window_start=window_start,
        call_gas_price=Web3.to_wei(20, "gwei"),
        time_bounty=Web3.to_wei(10, "finney"),
    )

    endowment = calc_endowment(
        params.call_gas, params.call_value, params.call_gas_price, params.time_bounty, config=config
    )

    validate_data = encode_validate_request_params(
        ValidateRequestParams(
            to_address=to_address,
            from_address=from_address,
            call_gas=params.call_gas,
            call_value=params.call_value,
            window_size=params.window_size,
            window_start=params.window_start,
            gas_price=params.call_gas_price,
            time_bounty=params.time_bounty,
            required_deposit=0,
            is_timestamp=is_timestamp,
            endowment=endowment,
        ),
        config=config,
    )
    logger.info(f"validateRequestParams call to {get_request_factory_address()}: 0x{validate_data.hex()}")

    schedule_data = encode_schedule_params(params, config=config)
    if schedule_data is None:
        logger.error("Scheduling parameters are incomplete, nothing to send")
        return

    logger.info(f"Send {endowment} wei to {get_scheduler_address(config.default_scheduling_method)}")
    logger.info(f"Call data: 0x{schedule_data.hex()}")


if __name__ == "__main__":
    main()
