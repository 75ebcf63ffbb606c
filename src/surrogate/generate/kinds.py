"""Default mapping from value kind to generator function."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .address import (
    generate_city,
    generate_full_address,
    generate_state,
    generate_street_address,
    generate_zipcode,
)
from .base import GeneratorFn
from .email import generate_email
from .names import generate_first_name, generate_full_name, generate_last_name, generate_username
from .request import ValueKind
from .strings import generate_random_string

__all__ = ["DEFAULT_GENERATORS"]

DEFAULT_GENERATORS: Mapping[ValueKind, GeneratorFn] = MappingProxyType(
    {
        ValueKind.EMAIL: generate_email,
        ValueKind.USERNAME: generate_username,
        ValueKind.FIRST_NAME: generate_first_name,
        ValueKind.LAST_NAME: generate_last_name,
        ValueKind.FULL_NAME: generate_full_name,
        ValueKind.CITY: generate_city,
        ValueKind.STATE: generate_state,
        ValueKind.ZIPCODE: generate_zipcode,
        ValueKind.STREET_ADDRESS: generate_street_address,
        ValueKind.FULL_ADDRESS: generate_full_address,
        ValueKind.RANDOM_STRING: generate_random_string,
    }
)
