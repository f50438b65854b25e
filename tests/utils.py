"""Shared values for EAC scheduling SDK tests."""

TO_ADDRESS = "0x" + "ab" * 20
FROM_ADDRESS = "0x" + "cd" * 20
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

GWEI = 10**9
EXPECTED_FEE_TOTAL = 2242000000000000 * 2
