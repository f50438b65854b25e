"""Decoding of RequestFactory.validateRequestParams results."""

from collections.abc import Sequence

from eth_abi import decode

from eac_sdk.scheduling.exceptions import ValidityFlagsError
from eac_sdk.scheduling.types import SchedulingValidityError

VALIDITY_CHECKS = tuple(SchedulingValidityError)


def decode_validity_flags(data: bytes) -> list[bool]:
    """Decode the raw bool[6] returned by an eth_call to validateRequestParams."""
    (flags,) = decode([f"bool[{len(VALIDITY_CHECKS)}]"], data)
    return list(flags)


def parse_scheduling_parameters_validity(is_valid: Sequence[bool]) -> list[str]:
    """
    Names the checks that failed in a validateRequestParams result.

    Args:
        is_valid: One flag per check, in the order of SchedulingValidityError.

    Returns:
        list[str]: Error names of the false flags, in input order.

    Raises:
        ValidityFlagsError: If the number of flags differs from the number of checks.
    """
    if len(is_valid) != len(VALIDITY_CHECKS):
        raise ValidityFlagsError(f"Expected {len(VALIDITY_CHECKS)} validity flags, got {len(is_valid)}")

    return [check.value for check, passed in zip(VALIDITY_CHECKS, is_valid) if not passed]
