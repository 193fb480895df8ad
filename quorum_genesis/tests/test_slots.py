"""
Test suite for storage slot derivation.
"""

from hashlib import sha3_256

import pytest
from Crypto.Hash import keccak

from genesis_types import Address, StorageSlot
from quorum_genesis import array_element_slot, mapping_slot, scalar_slot

ZERO_ADDRESS = "0x" + "00" * 20
VOTER = "0xaa00000000000000000000000000000000000001"


@pytest.mark.parametrize("index", [0, 1, 2, 5, 255, 256, 2**64, 2**256 - 1])
def test_scalar_slot_round_trip(index: int):
    """
    Test that a scalar slot decodes back to its variable index.
    """
    slot = scalar_slot(index)
    assert len(slot) == 32
    assert int.from_bytes(slot, byteorder="big") == index
    assert str(slot) == "0x" + index.to_bytes(32, byteorder="big").hex()


@pytest.mark.parametrize(
    "index, address, expected",
    [
        (
            0,
            ZERO_ADDRESS,
            "0xad3228b676f7d3cd4284a5443f17f1962b36e491b30a40b2405849e597ba5fb5",
        ),
    ],
)
def test_mapping_slot_known_values(index: int, address: str, expected: str):
    """
    Test mapping slots against Keccak-256 digests known from Ethereum.
    """
    assert str(mapping_slot(index, address)) == expected


def keccak_digest(preimage: bytes) -> str:
    """Hash `preimage` directly with pycryptodome, bypassing the genesis types."""
    return "0x" + keccak.new(digest_bits=256).update(preimage).hexdigest()


@pytest.mark.parametrize(
    "index, address",
    [
        (3, VOTER),
        (5, "0xcc00000000000000000000000000000000000003"),
        (0, "0x14747a698Ec1227e6753026C08B29b4d5D3bC484"),
        (2**255 + 7, "0xffffffffffffffffffffffffffffffffffffffff"),
    ],
)
def test_mapping_slot_preimage_layout(index: int, address: str):
    """
    Test that the hashed word is the left-padded key followed by the base index.
    """
    key = bytes.fromhex(address[2:])
    key_first = keccak_digest(bytes(12) + key + index.to_bytes(32, byteorder="big"))
    index_first = keccak_digest(index.to_bytes(32, byteorder="big") + bytes(12) + key)
    right_padded = keccak_digest(key + bytes(12) + index.to_bytes(32, byteorder="big"))
    slot = str(mapping_slot(index, address))
    assert slot == key_first
    assert slot != index_first
    assert slot != right_padded


@pytest.mark.parametrize(
    "index, position, expected",
    [
        (0, 0, "0x290decd9548b62a8d60345a988386fc84ba6bc95484008f6362f93160ef3e563"),
        (0, 1, "0x290decd9548b62a8d60345a988386fc84ba6bc95484008f6362f93160ef3e564"),
        (1, 0, "0xb10e2d527612073b26eecdfd717e6a320cf44b4afac2b0732d9fcbe2b7fa0cf6"),
        (2, 0, "0x405787fa12a823e0f2b7631cc41b3ba8828b3321ca811111fa75cd3aa3bb5ace"),
    ],
)
def test_array_element_slot_known_values(index: int, position: int, expected: str):
    """
    Test dynamic array element slots against known Keccak-256 digests.
    """
    assert str(array_element_slot(index, position)) == expected


def test_mapping_slot_uses_keccak_not_sha3():
    """
    Test that the NIST SHA3-256 digest of the same preimage is not used.
    """
    preimage = bytes(32) + bytes(32)
    assert mapping_slot(0, ZERO_ADDRESS) != StorageSlot(sha3_256(preimage).digest())


def test_mapping_slot_is_deterministic():
    """
    Test that the same inputs always produce the same 64 digit slot.
    """
    first = str(mapping_slot(3, VOTER))
    second = str(mapping_slot(3, Address(VOTER)))
    assert first == second
    assert len(first) == 66


def test_mapping_slot_ignores_address_spelling():
    """
    Test that prefix and letter case of the key do not change the slot.
    """
    address = "0xAbCdEf0000000000000000000000000000000001"
    assert mapping_slot(5, address) == mapping_slot(5, address.lower())
    assert mapping_slot(5, address) == mapping_slot(5, address[2:])


def test_mapping_slot_depends_on_index_and_key():
    """
    Test that different bases or keys give different slots.
    """
    other = "0xbb00000000000000000000000000000000000002"
    assert mapping_slot(3, VOTER) != mapping_slot(5, VOTER)
    assert mapping_slot(3, VOTER) != mapping_slot(3, other)
    assert mapping_slot(3, VOTER) != scalar_slot(3)


def test_mapping_slot_rejects_malformed_address():
    """
    Test that an address that is not 20 bytes long is not hashed.
    """
    with pytest.raises(ValueError):
        mapping_slot(3, "0x1234")


def test_array_element_slot_wraps_around():
    """
    Test that element positions past the end of the slot space wrap.
    """
    start = int(array_element_slot(0, 0))
    assert int(array_element_slot(0, 2**256 - start)) == 0
