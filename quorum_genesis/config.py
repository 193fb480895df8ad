"""
Genesis configuration: the participants and thresholds a network starts with.

One schema serves every deployment variant. The variant is picked with an
explicit `ConfigMode`, which decides whether governance owners fall back to the
voters, whether funded observers are read, and whether owners must be listed.
"""

import json
import logging
import re
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Sequence

from pydantic import Field

from genesis_types import Address, CamelModel

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Base class of the errors that stop a run before anything is built."""

    pass


@dataclass(kw_only=True)
class MissingConfigError(ConfigurationError):
    """The configuration file does not exist."""

    filename: str

    def __str__(self):
        """Print exception string."""
        return f"Missing config file '{self.filename}' in the current directory"


@dataclass(kw_only=True)
class InvalidConfigError(ConfigurationError):
    """The configuration file breaks one of the validation rules."""

    reason: str

    def __str__(self):
        """Print exception string."""
        return self.reason


@dataclass(frozen=True)
class Capabilities:
    """Behaviour switches that differ between deployment variants."""

    owners_default_to_voters: bool
    observers_supported: bool
    explicit_owners_required: bool


class ConfigMode(str, Enum):
    """Deployment variant of the configuration file."""

    STANDARD = "standard"
    LEGACY = "legacy"
    GOVERNED = "governed"

    @property
    def capabilities(self) -> Capabilities:
        """Return the capability set of this mode."""
        return MODE_CAPABILITIES[self]


MODE_CAPABILITIES: Dict[ConfigMode, Capabilities] = {
    ConfigMode.STANDARD: Capabilities(
        owners_default_to_voters=True,
        observers_supported=True,
        explicit_owners_required=False,
    ),
    ConfigMode.LEGACY: Capabilities(
        owners_default_to_voters=True,
        observers_supported=False,
        explicit_owners_required=False,
    ),
    ConfigMode.GOVERNED: Capabilities(
        owners_default_to_voters=False,
        observers_supported=True,
        explicit_owners_required=True,
    ),
}

FIELD_NAMES: Dict[str, Sequence[str]] = {
    "voters": ("voters", "blockVoters"),
    "makers": ("makers", "blockMakers"),
    "owners": ("owners", "governanceOwners"),
    "funded_observers": ("fundedObservers",),
}
"""Accepted spellings of each list field, first match wins."""

ADDRESS_PATTERN = re.compile(r"(0[xX])?[0-9a-fA-F]{40}")


def _lookup(data: Dict[str, Any], field: str) -> Any:
    for name in FIELD_NAMES[field]:
        if name in data:
            return data[name]
    return None


def _is_list(value: Any) -> bool:
    return isinstance(value, list)


def _parse_addresses(field: str, values: List[Any]) -> List[Address]:
    addresses = []
    for value in values:
        # `Address` pads odd-length hex and drops whitespace, so check the spelling first
        if not isinstance(value, str) or ADDRESS_PATTERN.fullmatch(value) is None:
            raise InvalidConfigError(reason=f"Invalid address '{value}' in '{field}'")
        addresses.append(Address(value))
    duplicates = [str(address) for address, count in Counter(addresses).items() if count > 1]
    if duplicates:
        logger.warning(f"Duplicate addresses in '{field}': {', '.join(duplicates)}")
    return addresses


class GenesisConfig(CamelModel):
    """Validated input of a genesis generation run."""

    threshold: int
    """Number of votes a block needs to be accepted."""
    voters: List[Address]
    makers: List[Address]
    owners: List[Address] = Field(default_factory=list)
    funded_observers: List[Address] = Field(default_factory=list)
    """Addresses that only receive a balance and hold no contract role."""
    gas_limit: int | str | None = None
    """Copied verbatim into the genesis `gasLimit` when present."""

    @classmethod
    def from_json(
        cls, data: Dict[str, Any], mode: ConfigMode = ConfigMode.STANDARD
    ) -> "GenesisConfig":
        """
        Validate the raw configuration and fill in the defaults of `mode`.

        Rules are checked in a fixed order and the first violation raises
        `InvalidConfigError`; nothing is accumulated.
        """
        capabilities = mode.capabilities

        threshold = data.get("threshold")
        if not isinstance(threshold, int) or isinstance(threshold, bool) or threshold < 1:
            raise InvalidConfigError(reason="Voting threshold missing or less than 1")

        voters = _lookup(data, "voters")
        if not _is_list(voters) or len(voters) < threshold:
            raise InvalidConfigError(reason="Voter addresses missing or less than the threshold")

        makers = _lookup(data, "makers")
        if not _is_list(makers) or len(makers) < 1:
            raise InvalidConfigError(reason="Maker addresses missing or less than 1")

        owners = _lookup(data, "owners")
        if not _is_list(owners) or len(owners) < 1:
            if capabilities.explicit_owners_required:
                raise InvalidConfigError(
                    reason="Governance owner addresses missing or less than 1"
                )
            if capabilities.owners_default_to_voters:
                logger.info("No governance owners configured, using the voters")
                owners = voters
            else:
                owners = []

        observers = _lookup(data, "funded_observers")
        if observers is not None and not capabilities.observers_supported:
            logger.warning(f"Ignoring 'fundedObservers', not supported in {mode.value} mode")
            observers = None
        if observers is None:
            observers = []
        elif not _is_list(observers):
            raise InvalidConfigError(reason="Funded observer addresses must be a list")

        gas_limit = data.get("gasLimit")
        if gas_limit is not None and (
            isinstance(gas_limit, bool) or not isinstance(gas_limit, (int, str))
        ):
            raise InvalidConfigError(reason="Gas limit must be a number or a hex string")

        return cls(
            threshold=threshold,
            voters=_parse_addresses("voters", voters),
            makers=_parse_addresses("makers", makers),
            owners=_parse_addresses("owners", owners),
            funded_observers=_parse_addresses("fundedObservers", observers),
            gas_limit=gas_limit,
        )

    def funded_addresses(self) -> List[Address]:
        """Return every address that receives a balance, once, in first-seen order."""
        return list(dict.fromkeys(self.makers + self.voters + self.funded_observers + self.owners))


def load_config(path: Path, mode: ConfigMode = ConfigMode.STANDARD) -> GenesisConfig:
    """Read and validate the configuration file at `path`."""
    if not path.is_file():
        raise MissingConfigError(filename=path.name)
    try:
        with path.open("r") as f:
            data = json.load(f)
    except json.JSONDecodeError:
        raise InvalidConfigError(reason=f"Config file '{path.name}' is not valid JSON") from None
    if not isinstance(data, dict):
        raise InvalidConfigError(reason=f"Config file '{path.name}' is not a JSON object")
    logger.debug(f"Loaded configuration from {path}")
    return GenesisConfig.from_json(data, mode)
