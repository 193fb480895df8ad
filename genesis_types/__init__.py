"""
Common definitions and types of a genesis document.
"""

from .base_types import (
    Address,
    Bytes,
    FixedSizeBytes,
    Hash,
    HexNumber,
    Number,
    StorageSlot,
)
from .composite_types import Account, Alloc, Storage
from .conversions import to_bytes
from .json import to_json
from .pydantic import CamelModel

__all__ = (
    "Account",
    "Address",
    "Alloc",
    "Bytes",
    "CamelModel",
    "FixedSizeBytes",
    "Hash",
    "HexNumber",
    "Number",
    "Storage",
    "StorageSlot",
    "to_bytes",
    "to_json",
)
