"""
Storage layouts of the fixed genesis contracts and the builders that populate them.

The layouts mirror the declaration order of the deployed Solidity contracts;
changing an index here writes values into slots the contract never reads.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Sequence

from genesis_types import Address, HexNumber, Storage

from .config import GenesisConfig
from .slots import array_element_slot, mapping_slot, scalar_slot

MEMBER_FLAG = HexNumber(1)
"""Value stored for every member of an address set, read as `true` by the contract."""


@dataclass(frozen=True)
class ScalarVariable:
    """A value-type state variable stored directly in its slot."""

    name: str
    index: int


@dataclass(frozen=True)
class AddressSetVariable:
    """A `mapping(address => bool)` state variable used as a membership set."""

    name: str
    index: int


@dataclass(frozen=True)
class AddressArrayVariable:
    """An `address[]` state variable: length at the base slot, elements after its hash."""

    name: str
    index: int


LayoutVariable = ScalarVariable | AddressSetVariable | AddressArrayVariable


@dataclass(frozen=True)
class ContractLayout:
    """Declared storage variables of one contract."""

    name: str
    variables: Sequence[LayoutVariable]

    @dataclass(kw_only=True)
    class OverlappingSlotError(Exception):
        """Two variables of the same contract were declared at one index."""

        contract: str
        index: int

        def __str__(self):
            """Print exception string."""
            return f"contract {self.contract} declares two variables at index {self.index}"

    @dataclass(kw_only=True)
    class MissingValueError(Exception):
        """A declared variable was not given a value to store."""

        contract: str
        variable: str

        def __str__(self):
            """Print exception string."""
            return f"no value given for {self.contract}.{self.variable}"

    @dataclass(kw_only=True)
    class InvalidValueError(Exception):
        """A variable was given a value of the wrong kind."""

        contract: str
        variable: str
        expected: str

        def __str__(self):
            """Print exception string."""
            return f"{self.contract}.{self.variable} expects {self.expected}"

    def __post_init__(self):
        """Reject layouts whose variables share a base index."""
        seen: set[int] = set()
        for variable in self.variables:
            if variable.index in seen:
                raise ContractLayout.OverlappingSlotError(
                    contract=self.name, index=variable.index
                )
            seen.add(variable.index)

    def build_storage(self, values: Mapping[str, int | Iterable[Address]]) -> Storage:
        """
        Return the storage holding `values` at the slots of this layout.

        Scalars take an integer; address sets take an iterable of addresses,
        each of which is stored with the membership flag. An address listed
        twice writes the same slot twice. Address arrays store their length
        followed by every element in order.
        """
        storage = Storage()
        for variable in self.variables:
            if variable.name not in values:
                raise ContractLayout.MissingValueError(contract=self.name, variable=variable.name)
            value = values[variable.name]
            if isinstance(variable, ScalarVariable):
                if not isinstance(value, int):
                    raise ContractLayout.InvalidValueError(
                        contract=self.name, variable=variable.name, expected="an integer"
                    )
                storage[scalar_slot(variable.index)] = value
                continue
            if isinstance(value, int):
                raise ContractLayout.InvalidValueError(
                    contract=self.name, variable=variable.name, expected="a list of addresses"
                )
            if isinstance(variable, AddressSetVariable):
                for address in value:
                    storage[mapping_slot(variable.index, address)] = MEMBER_FLAG
            else:
                addresses = [Address(address) for address in value]
                storage[scalar_slot(variable.index)] = len(addresses)
                for position, address in enumerate(addresses):
                    storage[array_element_slot(variable.index, position)] = int.from_bytes(
                        address, byteorder="big"
                    )
        return storage


VOTING_LAYOUT = ContractLayout(
    name="BlockVoting",
    variables=(
        ScalarVariable("threshold", 1),
        ScalarVariable("voterCount", 2),
        AddressSetVariable("canVote", 3),
        ScalarVariable("blockMakerCount", 4),
        AddressSetVariable("canCreateBlocks", 5),
    ),
)

GOVERNANCE_LAYOUT = ContractLayout(
    name="Governance",
    variables=(
        AddressSetVariable("owners", 0),
        ScalarVariable("ownerCount", 1),
    ),
)


def build_voting_storage(config: GenesisConfig) -> Storage:
    """Return the block voting contract storage for the configured voters and makers."""
    values: Dict[str, int | List[Address]] = {
        "threshold": config.threshold,
        "voterCount": len(config.voters),
        "canVote": config.voters,
        "blockMakerCount": len(config.makers),
        "canCreateBlocks": config.makers,
    }
    return VOTING_LAYOUT.build_storage(values)


def build_governance_storage(config: GenesisConfig) -> Storage:
    """Return the governance contract storage for the configured owners."""
    values: Dict[str, int | List[Address]] = {
        "owners": config.owners,
        "ownerCount": len(config.owners),
    }
    return GOVERNANCE_LAYOUT.build_storage(values)
