"""Catalog and generator registry construction.

Both structures are values: they are built once, by an explicit call, and
passed to whoever needs them.  Nothing is registered globally or implicitly.
Construction problems (duplicate identifiers, defaults that do not validate,
a catalog kind with no generator) are raised as :class:`RegistryError` to the
caller of the builder.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from surrogate.generate import DEFAULT_GENERATORS, GeneratorFn, ValueKind, build_request, parse_kind
from surrogate.utils.errors import InvalidParameterError, RegistryError

from .definitions import SYSTEM_TRANSFORMERS, TransformerDefinition

__all__ = [
    "Catalog",
    "GeneratorRegistry",
    "build_catalog",
    "build_registry",
    "get_by_identifier",
    "list_all",
]


@dataclass(frozen=True, slots=True)
class Catalog:
    """Definitions sorted by name plus a lookup by identifier."""

    definitions: tuple[TransformerDefinition, ...]
    by_identifier: Mapping[ValueKind, TransformerDefinition] = field(repr=False)

    def __len__(self) -> int:
        return len(self.definitions)

    def __contains__(self, kind: object) -> bool:
        return kind in self.by_identifier


@dataclass(frozen=True, slots=True)
class GeneratorRegistry:
    """A catalog paired with the generator function for each of its kinds."""

    catalog: Catalog
    generators: Mapping[ValueKind, GeneratorFn] = field(repr=False)

    def generator_for(self, kind: ValueKind | str) -> GeneratorFn:
        value_kind = parse_kind(kind)
        try:
            return self.generators[value_kind]
        except KeyError:
            raise InvalidParameterError(f"no generator registered for {value_kind.value}") from None


def build_catalog(
    definitions: Iterable[TransformerDefinition] = SYSTEM_TRANSFORMERS,
) -> Catalog:
    """Validate ``definitions`` and return them as an immutable catalog."""

    ordered = tuple(sorted(definitions, key=lambda d: d.name))
    lookup: dict[ValueKind, TransformerDefinition] = {}
    for definition in ordered:
        if definition.identifier in lookup:
            raise RegistryError(f"duplicate catalog identifier: {definition.identifier.value}")
        if not definition.name.strip():
            raise RegistryError(f"{definition.identifier.value}: name must not be empty")
        try:
            build_request(definition.identifier, definition.default_params)
        except InvalidParameterError as exc:
            raise RegistryError(f"invalid default parameters: {exc}") from exc
        lookup[definition.identifier] = definition
    return Catalog(definitions=ordered, by_identifier=MappingProxyType(lookup))


def build_registry(
    catalog: Catalog,
    generators: Mapping[ValueKind, GeneratorFn] = DEFAULT_GENERATORS,
) -> GeneratorRegistry:
    """Pair every catalog kind with its generator.

    Raises :class:`RegistryError` when a catalog kind has no generator or a
    generator has no catalog entry.
    """

    missing = [k.value for k in catalog.by_identifier if k not in generators]
    if missing:
        raise RegistryError(f"no generator for: {', '.join(sorted(missing))}")
    orphaned = [k.value for k in generators if k not in catalog.by_identifier]
    if orphaned:
        raise RegistryError(f"generators without catalog entry: {', '.join(sorted(orphaned))}")
    return GeneratorRegistry(catalog=catalog, generators=MappingProxyType(dict(generators)))


def get_by_identifier(catalog: Catalog, kind: ValueKind | str) -> TransformerDefinition:
    """Return the definition for ``kind`` or raise :class:`InvalidParameterError`."""

    value_kind = parse_kind(kind)
    try:
        return catalog.by_identifier[value_kind]
    except KeyError:
        raise InvalidParameterError(f"{value_kind.value} is not in the catalog") from None


def list_all(catalog: Catalog) -> tuple[TransformerDefinition, ...]:
    """Return every definition, sorted by name."""

    return catalog.definitions
