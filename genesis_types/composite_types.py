"""Composite types that make up the `alloc` section of a genesis document."""

from dataclasses import dataclass
from typing import Dict, Iterator

from pydantic import Field, TypeAdapter

from .base_types import Address, Bytes, HexNumber, Number, StorageSlot
from .conversions import FixedSizeBytesConvertible, NumberConvertible
from .pydantic import CamelModel, GenesisRootModel

StorageKeyTypeAdapter = TypeAdapter(StorageSlot)
StorageValueTypeAdapter = TypeAdapter(HexNumber)


class Storage(GenesisRootModel[Dict[StorageSlot, HexNumber]]):
    """
    Definition of contract storage at genesis.

    This model accepts a dictionary with keys and values as any of: str, int,
    bytes, or any type that supports conversion to bytes. Keys are cast to
    `StorageSlot` and values to `HexNumber`, so a key always serializes as a
    64-digit hex string and a value as a minimal-length hex string.
    """

    root: Dict[StorageSlot, HexNumber] = Field(default_factory=dict)

    def __contains__(self, key: FixedSizeBytesConvertible | StorageSlot) -> bool:
        """Check for an item in the storage."""
        return StorageKeyTypeAdapter.validate_python(key) in self.root

    def __getitem__(self, key: FixedSizeBytesConvertible | StorageSlot) -> HexNumber:
        """Return an item from the storage."""
        return self.root[StorageKeyTypeAdapter.validate_python(key)]

    def __setitem__(
        self,
        key: FixedSizeBytesConvertible | StorageSlot,
        value: NumberConvertible | HexNumber,
    ):
        """Set an item in the storage."""
        self.root[StorageKeyTypeAdapter.validate_python(key)] = (
            StorageValueTypeAdapter.validate_python(value)
        )

    def __iter__(self) -> Iterator[StorageSlot]:  # type: ignore[override]
        """Return an iterator over the storage keys."""
        return iter(self.root)

    def __len__(self) -> int:
        """Return the number of storage entries."""
        return len(self.root)

    def __eq__(self, other) -> bool:
        """Return True if both storages are equal."""
        if not isinstance(other, Storage):
            return False
        return self.root == other.root

    def keys(self) -> set[StorageSlot]:
        """Return the keys of the storage."""
        return set(self.root.keys())

    def items(self):
        """Return the items of the storage."""
        return self.root.items()

    def update(self, other: "Storage") -> None:
        """Write every entry of `other` into this storage, keeping entries it does not touch."""
        for key, value in other.items():
            self.root[key] = value


class Account(CamelModel):
    """
    Genesis state associated with an address.

    Every field is optional: participant accounts only carry a balance while
    the fixed contracts also carry code and storage.
    """

    balance: Number | None = None
    """
    The amount of Wei the account holds, written as a decimal string.
    """
    nonce: HexNumber | None = None
    code: Bytes | None = None
    """
    Bytecode deployed at the address.
    """
    storage: Storage | None = None
    """
    Storage within a contract.
    """


class Alloc(GenesisRootModel[Dict[Address, Account]]):
    """Allocation of accounts in the genesis state."""

    root: Dict[Address, Account] = Field(default_factory=dict, validate_default=True)

    @dataclass(kw_only=True)
    class MissingAccountError(Exception):
        """Expected account not found in the allocation."""

        address: Address

        def __str__(self):
            """Print exception string."""
            return f"Account missing from allocation {self.address}"

    def __iter__(self) -> Iterator[Address]:  # type: ignore[override]
        """Return iterator over the allocation."""
        return iter(self.root)

    def __len__(self) -> int:
        """Return the number of accounts in the allocation."""
        return len(self.root)

    def items(self):
        """Return iterator over the allocation items."""
        return self.root.items()

    def __getitem__(self, address: Address | FixedSizeBytesConvertible) -> Account:
        """Return account associated with an address."""
        if not isinstance(address, Address):
            address = Address(address)
        if address not in self.root:
            raise Alloc.MissingAccountError(address=address)
        return self.root[address]

    def __setitem__(self, address: Address | FixedSizeBytesConvertible, account: Account):
        """Set account associated with an address."""
        if not isinstance(address, Address):
            address = Address(address)
        self.root[address] = account

    def __contains__(self, address: Address | FixedSizeBytesConvertible) -> bool:
        """Check if an account is in the allocation."""
        if not isinstance(address, Address):
            address = Address(address)
        return address in self.root

    def __eq__(self, other) -> bool:
        """Return True if both allocations are equal."""
        if not isinstance(other, Alloc):
            return False
        return self.root == other.root
