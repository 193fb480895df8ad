"""
Genesis generator for the Quorum block voting and governance contracts.
"""

from .assembler import assemble_genesis, fund_addresses, merge_storage
from .config import (
    Capabilities,
    ConfigMode,
    ConfigurationError,
    GenesisConfig,
    InvalidConfigError,
    MissingConfigError,
    load_config,
)
from .constants import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_OUTPUT_FILENAME,
    FUNDING_BALANCE,
    GOVERNANCE_CONTRACT_ADDRESS,
    VOTING_CONTRACT_ADDRESS,
)
from .contracts import (
    GOVERNANCE_LAYOUT,
    VOTING_LAYOUT,
    AddressArrayVariable,
    AddressSetVariable,
    ContractLayout,
    ScalarVariable,
    build_governance_storage,
    build_voting_storage,
)
from .document import (
    GenesisDocument,
    TemplateError,
    dump_genesis,
    load_template,
    parse_template,
    write_genesis,
)
from .slots import array_element_slot, mapping_slot, scalar_slot

__all__ = (
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_OUTPUT_FILENAME",
    "FUNDING_BALANCE",
    "GOVERNANCE_CONTRACT_ADDRESS",
    "GOVERNANCE_LAYOUT",
    "VOTING_CONTRACT_ADDRESS",
    "VOTING_LAYOUT",
    "AddressArrayVariable",
    "AddressSetVariable",
    "Capabilities",
    "ConfigMode",
    "ConfigurationError",
    "ContractLayout",
    "GenesisConfig",
    "GenesisDocument",
    "InvalidConfigError",
    "MissingConfigError",
    "ScalarVariable",
    "TemplateError",
    "array_element_slot",
    "assemble_genesis",
    "build_governance_storage",
    "build_voting_storage",
    "dump_genesis",
    "fund_addresses",
    "load_config",
    "load_template",
    "mapping_slot",
    "merge_storage",
    "parse_template",
    "scalar_slot",
    "write_genesis",
)
