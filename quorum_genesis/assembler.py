"""
Assembly of the genesis allocation.

Each phase takes the allocation it works on as an argument. `assemble_genesis`
runs them in order on a fresh copy of the template, so the template itself is
never changed and a run that fails part way leaves nothing behind.
"""

import logging
from typing import Iterable

from genesis_types import Account, Address, Alloc, Number, Storage

from .config import GenesisConfig
from .constants import FUNDING_BALANCE, GOVERNANCE_CONTRACT_ADDRESS, VOTING_CONTRACT_ADDRESS
from .contracts import build_governance_storage, build_voting_storage
from .document import GenesisDocument

logger = logging.getLogger(__name__)


def merge_storage(alloc: Alloc, address: Address, storage: Storage) -> None:
    """
    Add `storage` to the storage of the contract at `address`.

    Slots already present in the allocation and not written by `storage` are
    kept.
    """
    account = alloc[address]
    if account.storage is None:
        account.storage = Storage()
    account.storage.update(storage)
    logger.debug(f"Merged {len(storage)} storage slots into {address}")


def fund_addresses(
    alloc: Alloc, addresses: Iterable[Address], balance: Number = FUNDING_BALANCE
) -> None:
    """
    Set the balance of every address, and of both fixed contracts, to `balance`.

    An address given more than once is funded once. Accounts that already
    exist keep their other fields.
    """
    unique = list(dict.fromkeys(addresses))
    for address in unique:
        if address in alloc:
            alloc[address].balance = balance
        else:
            alloc[address] = Account(balance=balance)
    for contract in (VOTING_CONTRACT_ADDRESS, GOVERNANCE_CONTRACT_ADDRESS):
        alloc[contract].balance = balance
    logger.debug(f"Funded {len(unique)} participant addresses and 2 contracts")


def assemble_genesis(template: GenesisDocument, config: GenesisConfig) -> GenesisDocument:
    """Return a new genesis document built from `template` and `config`."""
    document = template.fresh_copy()

    merge_storage(document.alloc, VOTING_CONTRACT_ADDRESS, build_voting_storage(config))
    logger.info(
        f"Voting contract: threshold {config.threshold}, {len(config.voters)} voters, "
        f"{len(config.makers)} block makers"
    )

    merge_storage(document.alloc, GOVERNANCE_CONTRACT_ADDRESS, build_governance_storage(config))
    logger.info(f"Governance contract: {len(config.owners)} owners")

    if config.gas_limit is not None:
        document.gas_limit = config.gas_limit

    fund_addresses(document.alloc, config.funded_addresses())
    return document
