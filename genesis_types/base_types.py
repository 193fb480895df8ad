"""Basic type primitives used to define other types."""

from typing import Any, ClassVar, SupportsBytes, Type, TypeVar

from Crypto.Hash import keccak
from pydantic import GetCoreSchemaHandler
from pydantic_core.core_schema import (
    PlainValidatorFunctionSchema,
    no_info_plain_validator_function,
    to_string_ser_schema,
)

from .conversions import (
    BytesConvertible,
    FixedSizeBytesConvertible,
    NumberConvertible,
    to_bytes,
    to_fixed_size_bytes,
    to_number,
)

N = TypeVar("N", bound="Number")


class ToStringSchema:
    """
    Type converter to add a simple pydantic schema that correctly
    parses and serializes the type.
    """

    @staticmethod
    def __get_pydantic_core_schema__(
        source_type: Any, handler: GetCoreSchemaHandler
    ) -> PlainValidatorFunctionSchema:
        """Call the class constructor without info and appends the serialization schema."""
        return no_info_plain_validator_function(
            source_type,
            serialization=to_string_ser_schema(),
        )


class Number(int, ToStringSchema):
    """Class that helps represent numbers, serialized as decimal strings."""

    def __new__(cls, input_number: NumberConvertible | N):
        """Create a new Number object."""
        return super(Number, cls).__new__(cls, to_number(input_number))

    def __str__(self) -> str:
        """Return the string representation of the number."""
        return str(int(self))

    def hex(self) -> str:
        """Return the hexadecimal representation of the number."""
        return hex(self)


class HexNumber(Number):
    """
    Class that helps represent hexadecimal numbers.

    The hex string is minimal-length, which is how genesis storage values are
    written: `1` becomes `0x1`.
    """

    def __str__(self) -> str:
        """Return the string representation of the number."""
        return self.hex()


class Bytes(bytes, ToStringSchema):
    """Class that helps represent bytes of variable length."""

    def __new__(cls, input_bytes: BytesConvertible = b""):
        """Create a new Bytes object."""
        if type(input_bytes) is cls:
            return input_bytes
        return super(Bytes, cls).__new__(cls, to_bytes(input_bytes))

    def __hash__(self) -> int:
        """Return the hash of the bytes."""
        return super(Bytes, self).__hash__()

    def __str__(self) -> str:
        """Return the hexadecimal representation of the bytes."""
        return self.hex()

    def hex(self, *args, **kwargs) -> str:
        """Return the hexadecimal representation of the bytes."""
        return "0x" + super().hex(*args, **kwargs)

    def keccak256(self) -> "Hash":
        """
        Return the keccak256 hash of the bytes.

        This is the original Keccak padding used by the EVM, not the NIST
        SHA3-256 found in `hashlib`.
        """
        k = keccak.new(digest_bits=256)
        return Hash(k.update(bytes(self)).digest())


T = TypeVar("T", bound="FixedSizeBytes")


class FixedSizeBytes(Bytes):
    """Class that helps represent bytes of fixed length."""

    byte_length: ClassVar[int]

    def __class_getitem__(cls, length: int) -> Type["FixedSizeBytes"]:
        """Create a new FixedSizeBytes class with the given length."""

        class Sized(cls):  # type: ignore
            byte_length = length

        return Sized

    def __new__(
        cls,
        input_bytes: FixedSizeBytesConvertible | T,
        *,
        left_padding: bool = False,
    ):
        """Create a new FixedSizeBytes object."""
        if type(input_bytes) is cls:
            return input_bytes
        return super(FixedSizeBytes, cls).__new__(
            cls,
            to_fixed_size_bytes(input_bytes, cls.byte_length, left_padding=left_padding),
        )

    def __hash__(self) -> int:
        """Return the hash of the bytes."""
        return super(FixedSizeBytes, self).__hash__()

    def __eq__(self, other: object) -> bool:
        """Compare two FixedSizeBytes objects to be equal."""
        if other is None:
            return False
        if not isinstance(other, FixedSizeBytes):
            if not isinstance(other, (str, int, bytes, SupportsBytes)):
                return NotImplemented
            try:
                other = type(self)(other)
            except (ValueError, OverflowError):
                return False
        return super().__eq__(other)

    def __ne__(self, other: object) -> bool:
        """Compare two FixedSizeBytes objects to be not equal."""
        return not self.__eq__(other)


class Address(FixedSizeBytes[20]):  # type: ignore
    """
    Class that helps represent Ethereum addresses.

    Accepts hex strings with or without the `0x` prefix in any letter case and
    always serializes to the lower-case prefixed form, so two spellings of the
    same address compare and hash equal.
    """

    pass


class Hash(FixedSizeBytes[32]):  # type: ignore
    """Class that helps represent hashes."""

    pass


class StorageSlot(Hash):
    """
    A 32-byte storage key.

    Integers are encoded big-endian and shorter byte strings are left-padded,
    so `StorageSlot(1)` and `StorageSlot("0x01")` are the same slot.
    """

    def __new__(cls, input_bytes: FixedSizeBytesConvertible | Hash):
        """Create a new storage slot, always allowing left padding."""
        if type(input_bytes) is cls:
            return input_bytes
        return super(StorageSlot, cls).__new__(cls, input_bytes, left_padding=True)

    def __int__(self) -> int:
        """Return the slot as a big-endian integer."""
        return int.from_bytes(self, byteorder="big")
