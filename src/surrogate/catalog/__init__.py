"""Read-only catalog of value kinds and the generator registry built from it."""

from .definitions import SYSTEM_TRANSFORMERS, TransformerDefinition, define
from .registry import (
    Catalog,
    GeneratorRegistry,
    build_catalog,
    build_registry,
    get_by_identifier,
    list_all,
)

__all__ = [
    "Catalog",
    "GeneratorRegistry",
    "SYSTEM_TRANSFORMERS",
    "TransformerDefinition",
    "build_catalog",
    "build_registry",
    "define",
    "get_by_identifier",
    "list_all",
]
