"""Base model classes for PsychoScore.

Every model accepts both snake_case field names and the camelCase keys used by
callers of the engine, and serializes back to camelCase.
"""

from types import MappingProxyType
from typing import Annotated, Any, Dict, Mapping, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, SerializerFunctionWrapHandler, WrapSerializer
from pydantic.alias_generators import to_camel

KeyType = TypeVar("KeyType")
ValueType = TypeVar("ValueType")


def _freeze_mapping(value: Dict[Any, Any]) -> Mapping[Any, Any]:
    return MappingProxyType(value)


def _serialize_mapping(value: Mapping[Any, Any], handler: SerializerFunctionWrapHandler):
    return handler(dict(value))


# Validated as a dict, stored behind a read-only proxy
FrozenDict = Annotated[
    Dict[KeyType, ValueType],
    AfterValidator(_freeze_mapping),
    WrapSerializer(_serialize_mapping),
]


def empty_mapping() -> Mapping[Any, Any]:
    return MappingProxyType({})


class EngineModel(BaseModel):
    """Base model for engine inputs.

    Inputs are frozen once validated so a scoring run cannot alter them.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ReportSection(BaseModel):
    """Base model for report output sections.

    Sections are immutable all the way down: sequences are tuples and
    mappings are ``FrozenDict`` fields.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_json_dict(self) -> dict:
        """Serialize with camelCase keys and JSON-compatible values."""
        return self.model_dump(mode="json", by_alias=True)
