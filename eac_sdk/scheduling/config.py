"""
Configuration for EAC scheduling: fee constants, gas fallbacks and contract addresses.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from web3 import Web3

from eac_sdk.scheduling.exceptions import InvalidNetworkError

SCHEDULING_METHODS = ("time", "block")
DEFAULT_NETWORK = "KOVAN"


@dataclass(frozen=True)
class SchedulingConfig:
    """Fee, gas and window constants used to price and encode a scheduled call.

    Monetary values are in wei, gas values in gas units.
    """

    dapp_address: str = "https://app.chronologic.network"
    schedule_gas_limit_fallback: int = 21000
    schedule_gas_price_fallback: int = 20  # Gwei
    fee: int = 2242000000000000  # $2
    fee_multiplier: int = 2
    future_execution_cost: int = 180000
    scheduling_gas_limit: int = 1500000
    window_size_default_time: int = 10
    window_size_default_block: int = 90
    time_bounty_min: int = 1
    time_bounty_max: int = Web3.to_wei(900, "ether")
    schedule_timestamp_format: str = "%Y-%m-%d %H:%M:%S"
    default_scheduling_method: str = "time"

    @property
    def time_bounty_default(self) -> int:
        return self.time_bounty_min

    @classmethod
    def from_env(cls) -> "SchedulingConfig":
        """Create a config instance from environment variables.

        Only the DApp URL and the default scheduling method can be overridden,
        fee and gas constants always come from the defaults above.
        """
        load_dotenv()

        default_method = os.environ.get("EAC_DEFAULT_SCHEDULING_METHOD", cls.default_scheduling_method)
        if default_method not in SCHEDULING_METHODS:
            raise ValueError(
                f"EAC_DEFAULT_SCHEDULING_METHOD must be one of {SCHEDULING_METHODS}, got {default_method!r}"
            )

        return cls(
            dapp_address=os.environ.get("EAC_DAPP_ADDRESS", cls.dapp_address).rstrip("/"),
            default_scheduling_method=default_method,
        )


@dataclass(frozen=True)
class NetworkAddresses:
    """EAC contract addresses deployed on one network"""

    block_scheduler: str
    request_factory: str
    timestamp_scheduler: str


EAC_SCHEDULING_CONFIG = SchedulingConfig()

EAC_ADDRESSES = {
    "KOVAN": NetworkAddresses(
        block_scheduler="0x1afc19a7e642761ba2b55d2a45b32c7ef08269d1",
        request_factory="0x496e2b6089bde77293a994469b08e9f266d87adb",
        timestamp_scheduler="0xc6370807f0164bdf10a66c08d0dab1028dbe80a3",
    ),
}


def get_network_addresses(network: str = DEFAULT_NETWORK) -> NetworkAddresses:
    """Get the EAC contract addresses for a network name (case-insensitive)."""
    try:
        return EAC_ADDRESSES[network.upper()]
    except KeyError:
        raise InvalidNetworkError(
            f"No EAC addresses configured for network {network!r}. Known networks: {', '.join(EAC_ADDRESSES)}"
        ) from None


def get_config() -> SchedulingConfig:
    """Get configuration from environment."""
    return SchedulingConfig.from_env()
