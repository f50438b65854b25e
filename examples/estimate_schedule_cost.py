"""Estimate what scheduling a plain ether transfer with the Ethereum Alarm Clock costs.

Gas prices are read from the GAS_PRICE_GWEI and CALL_GAS_PRICE_GWEI environment
variables (defaults: 20 gwei).
"""

import logging
import os

from dotenv import load_dotenv
from web3 import Web3

from eac_sdk.scheduling import calc_endowment, calc_total_cost, get_config, get_default_window_size
from eac_sdk.utils import gas_price_to_wei

# Set up logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

logger = logging.getLogger("eac.example")


def main():
    """
    Example script printing the endowment and total cost of a scheduled transfer.
    """

    # Load environment variables from .env file
    load_dotenv()

    config = get_config()

    gas_price = gas_price_to_wei(os.environ.get("GAS_PRICE_GWEI", "20"))
    call_gas_price = gas_price_to_wei(os.environ.get("CALL_GAS_PRICE_GWEI", "20"))
    call_value = Web3.to_wei(0.5, "ether")
    call_gas = config.schedule_gas_limit_fallback
    time_bounty = Web3.to_wei(10, "finney")

    endowment = calc_endowment(call_gas, call_value, call_gas_price, time_bounty, config=config)
    total_cost = calc_total_cost(call_gas, gas_price, call_gas_price, time_bounty, config=config)

    window_size = get_default_window_size(config.default_scheduling_method, config=config)

    logger.info(f"Default window size ({config.default_scheduling_method}): {window_size}")
    logger.info(f"Endowment: {Web3.from_wei(endowment, 'ether')} ETH")
    logger.info(f"Total cost excluding value: {Web3.from_wei(total_cost, 'ether')} ETH")


if __name__ == "__main__":
    main()
