"""Scheduler address lookup and links to the ChronoLogic DApp."""

from typing import Optional

from web3 import Web3

from eac_sdk.scheduling.config import DEFAULT_NETWORK, EAC_SCHEDULING_CONFIG, SchedulingConfig, get_network_addresses


def get_scheduler_address(schedule_type: Optional[str], network: str = DEFAULT_NETWORK) -> str:
    """Timestamp scheduler for "time", block scheduler for anything else."""
    addresses = get_network_addresses(network)

    if schedule_type == "time":
        return Web3.to_checksum_address(addresses.timestamp_scheduler)
    return Web3.to_checksum_address(addresses.block_scheduler)


def get_request_factory_address(network: str = DEFAULT_NETWORK) -> str:
    return Web3.to_checksum_address(get_network_addresses(network).request_factory)


def get_tx_details_check_url(tx_hash: str, config: SchedulingConfig = EAC_SCHEDULING_CONFIG) -> str:
    """Link to the DApp page tracking a scheduling transaction."""
    return f"{config.dapp_address}/awaiting/scheduler/{tx_hash}"
