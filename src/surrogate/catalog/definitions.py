"""Static catalog of the value kinds the engine can generate.

Each :class:`TransformerDefinition` names a kind, describes it and carries the
default parameters merged under caller-supplied ones.  The tuple below is plain
data; :func:`surrogate.catalog.registry.build_catalog` turns it into a sorted,
validated :class:`~surrogate.catalog.registry.Catalog`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal

from surrogate.generate.request import ValueKind

__all__ = ["TransformerDefinition", "SYSTEM_TRANSFORMERS", "define"]

DataType = Literal["string", "int64", "boolean"]


@dataclass(frozen=True, slots=True)
class TransformerDefinition:
    """Metadata and default parameters for one value kind."""

    identifier: ValueKind
    name: str
    description: str
    data_type: DataType = "string"
    default_params: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


def define(
    identifier: ValueKind,
    name: str,
    description: str,
    *,
    data_type: DataType = "string",
    **default_params: Any,
) -> TransformerDefinition:
    """Build a :class:`TransformerDefinition` with read-only defaults."""

    return TransformerDefinition(
        identifier=identifier,
        name=name,
        description=description,
        data_type=data_type,
        default_params=MappingProxyType(dict(default_params)),
    )


SYSTEM_TRANSFORMERS: tuple[TransformerDefinition, ...] = (
    define(
        ValueKind.EMAIL,
        "Generate Email",
        "Generates a new randomized email address.",
        max_length=100000,
        email_type="fullname",
    ),
    define(
        ValueKind.USERNAME,
        "Generate Username",
        "Randomly generates a username in the format <first_initial><last_name>.",
        max_length=10000,
    ),
    define(
        ValueKind.FIRST_NAME,
        "Generate First Name",
        "Generates a random first name.",
        max_length=10000,
    ),
    define(
        ValueKind.LAST_NAME,
        "Generate Last Name",
        "Generates a random last name.",
        max_length=10000,
    ),
    define(
        ValueKind.FULL_NAME,
        "Generate Full Name",
        "Generates a new full name consisting of a first and last name.",
        max_length=10000,
    ),
    define(
        ValueKind.CITY,
        "Generate City",
        "Randomly selects a city from a list of predefined US cities.",
        max_length=10000,
    ),
    define(
        ValueKind.STATE,
        "Generate State",
        "Randomly selects a US state and returns the two-character state code, "
        "or the full state name when full_name is set.",
        max_length=10000,
        full_name=False,
    ),
    define(
        ValueKind.ZIPCODE,
        "Generate Zipcode",
        "Randomly selects a zip code from a list of predefined US zipcodes.",
        max_length=10000,
    ),
    define(
        ValueKind.STREET_ADDRESS,
        "Generate Street Address",
        "Randomly generates a street address in the format: "
        "{street_num} {street_name} {street_suffix}. For example, 123 Main St.",
        max_length=10000,
    ),
    define(
        ValueKind.FULL_ADDRESS,
        "Generate Full Address",
        "Randomly generates an address in the format: {street_num} {street_name} "
        "{street_suffix} {city}, {state} {zipcode}. For example, "
        "123 Main St Boston, MA 02169.",
        max_length=10000,
    ),
    define(
        ValueKind.RANDOM_STRING,
        "Generate Random String",
        "Creates a randomly ordered alphanumeric string between the specified range.",
        min_length=2,
        max_length=7,
    ),
)
