"""Fixtures shared by the genesis generator test suites."""

import pytest

from quorum_genesis import GenesisConfig, GenesisDocument, load_template


@pytest.fixture
def template() -> GenesisDocument:
    """The genesis template shipped with the package."""
    return load_template()


@pytest.fixture
def config() -> GenesisConfig:
    """Two voters with threshold two, one block maker, owners defaulted to the voters."""
    return GenesisConfig.from_json(
        {
            "threshold": 2,
            "voters": [
                "0xaa00000000000000000000000000000000000001",
                "0xbb00000000000000000000000000000000000002",
            ],
            "makers": ["0xcc00000000000000000000000000000000000003"],
            "owners": [],
        }
    )
