from __future__ import annotations

from types import MappingProxyType

import pytest

from surrogate.catalog import (
    SYSTEM_TRANSFORMERS,
    build_catalog,
    build_registry,
    define,
    get_by_identifier,
    list_all,
)
from surrogate.generate import DEFAULT_GENERATORS, ValueKind
from surrogate.utils.errors import InvalidParameterError, RegistryError


def test_list_all_sorted_by_name() -> None:
    catalog = build_catalog()
    names = [d.name for d in list_all(catalog)]
    assert names == sorted(names)
    assert {d.identifier for d in list_all(catalog)} == set(ValueKind)


def test_get_by_identifier() -> None:
    catalog = build_catalog()
    definition = get_by_identifier(catalog, "generate_email")
    assert definition.identifier is ValueKind.EMAIL
    assert definition.default_params["email_type"] == "fullname"
    assert get_by_identifier(catalog, ValueKind.CITY).data_type == "string"


def test_get_by_identifier_unknown() -> None:
    with pytest.raises(InvalidParameterError):
        get_by_identifier(build_catalog(), "generate_planet")


def test_kind_missing_from_catalog() -> None:
    catalog = build_catalog([d for d in SYSTEM_TRANSFORMERS if d.identifier is not ValueKind.CITY])
    with pytest.raises(InvalidParameterError):
        get_by_identifier(catalog, "generate_city")


def test_default_params_are_read_only() -> None:
    definition = get_by_identifier(build_catalog(), "generate_random_string")
    assert isinstance(definition.default_params, MappingProxyType)
    with pytest.raises(TypeError):
        definition.default_params["max_length"] = 1  # type: ignore[index]


def test_duplicate_identifier() -> None:
    with pytest.raises(RegistryError):
        build_catalog([*SYSTEM_TRANSFORMERS, SYSTEM_TRANSFORMERS[0]])


def test_invalid_defaults() -> None:
    bad = define(ValueKind.CITY, "City", "Broken", min_length=9, max_length=2)
    with pytest.raises(RegistryError):
        build_catalog([bad])


def test_empty_name() -> None:
    with pytest.raises(RegistryError):
        build_catalog([define(ValueKind.CITY, " ", "No name", max_length=5)])


def test_registry_requires_generator_for_every_kind() -> None:
    catalog = build_catalog()
    generators = {k: v for k, v in DEFAULT_GENERATORS.items() if k is not ValueKind.EMAIL}
    with pytest.raises(RegistryError):
        build_registry(catalog, generators)


def test_registry_rejects_orphan_generators() -> None:
    catalog = build_catalog([d for d in SYSTEM_TRANSFORMERS if d.identifier is not ValueKind.CITY])
    with pytest.raises(RegistryError):
        build_registry(catalog)


def test_generator_for() -> None:
    registry = build_registry(build_catalog())
    assert registry.generator_for("generate_city") is DEFAULT_GENERATORS[ValueKind.CITY]
    with pytest.raises(InvalidParameterError):
        registry.generator_for("generate_planet")
