"""
Storage slot derivation for Solidity state variables.

Solidity assigns value-type state variables to consecutive slots in
declaration order. Mappings and dynamic arrays reserve a base slot and store
their entries at slots derived from it with Keccak-256:

- scalar at index `i`: `i` as a 32-byte big-endian word
- `mapping(address => T)` entry for key `a` at base `i`:
  `keccak256(leftPad32(a) ++ leftPad32(i))`
- dynamic array element `n` at base `i`: `keccak256(leftPad32(i)) + n`
"""

from genesis_types import Address, Bytes, StorageSlot
from genesis_types.conversions import FixedSizeBytesConvertible

SLOT_MODULUS = 2**256


def scalar_slot(index: int) -> StorageSlot:
    """Return the slot of the value-type variable declared at `index`."""
    return StorageSlot(index)


def mapping_slot(index: int, address: Address | FixedSizeBytesConvertible) -> StorageSlot:
    """
    Return the slot holding `mapping[address]` for a mapping declared at `index`.

    The key is left-padded to 32 bytes and concatenated with the 32-byte index
    before hashing. Using SHA3-256 instead of Keccak-256 here produces slots the
    EVM never reads.
    """
    key = StorageSlot(Address(address))
    return StorageSlot(Bytes(key + scalar_slot(index)).keccak256())


def array_element_slot(index: int, position: int) -> StorageSlot:
    """
    Return the slot of element `position` of a dynamic array declared at `index`.

    The array length itself lives at `scalar_slot(index)`.
    """
    start = int(StorageSlot(Bytes(scalar_slot(index)).keccak256()))
    return StorageSlot((start + position) % SLOT_MODULUS)
