"""
JSON encoding for genesis types.
"""

from typing import Any

from .pydantic import GenesisBaseModel, GenesisRootModel


def to_json(input: GenesisBaseModel | GenesisRootModel | str) -> Any:
    """
    Converts a model to its json data representation.
    """
    if isinstance(input, (GenesisBaseModel, GenesisRootModel)):
        return input.serialize(mode="json", by_alias=True)
    return str(input)
