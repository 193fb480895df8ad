"""
Values that are part of the compatibility surface of a generated genesis file.

Changing any of them changes the meaning of the genesis document for every
chain that expects the deployed voting and governance contracts.
"""

from genesis_types import Address, Number

VOTING_CONTRACT_ADDRESS = Address("0x0000000000000000000000000000000000000020")
GOVERNANCE_CONTRACT_ADDRESS = Address("0x000000000000000000000000000000000000002a")

FUNDING_BALANCE = Number(10**27)
"""Balance in wei given to every participant and to both contracts."""

DEFAULT_CONFIG_FILENAME = "quorum-config.json"
DEFAULT_OUTPUT_FILENAME = "quorum-genesis.json"
