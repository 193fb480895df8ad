"""Base pydantic classes used to define the models of a genesis document."""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel
from pydantic.alias_generators import to_camel

from .mixins import ModelCustomizationsMixin

RootModelRootType = TypeVar("RootModelRootType")


class GenesisBaseModel(BaseModel, ModelCustomizationsMixin):
    """Base model for all genesis models."""

    pass


class GenesisRootModel(RootModel[RootModelRootType], ModelCustomizationsMixin):
    """Base root model for all genesis models."""

    root: Any


class CamelModel(GenesisBaseModel):
    """
    A base model that converts field names to camel case when serializing.

    For example, the field name `gas_limit` in a Python model will be represented
    as `gasLimit` when it is serialized to json.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
    )
