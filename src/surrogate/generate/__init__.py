"""Length-constrained generators for synthetic field values."""

from .base import GeneratorFn
from .kinds import DEFAULT_GENERATORS
from .request import (
    EmailOptions,
    GeneratedValue,
    GenerationRequest,
    NoOptions,
    Stage,
    StateOptions,
    ValueKind,
    build_request,
    parse_kind,
)
from .sampler import pad_to, random_filler, sample
from .seed import (
    Randomizer,
    canonicalize_key,
    derive_seed,
    entropy_seed,
    new_randomizer,
)
from .solver import BudgetAllocation, find_closest_pair

__all__ = [
    "BudgetAllocation",
    "DEFAULT_GENERATORS",
    "EmailOptions",
    "GeneratedValue",
    "GenerationRequest",
    "GeneratorFn",
    "NoOptions",
    "Randomizer",
    "Stage",
    "StateOptions",
    "ValueKind",
    "build_request",
    "canonicalize_key",
    "derive_seed",
    "entropy_seed",
    "find_closest_pair",
    "new_randomizer",
    "pad_to",
    "parse_kind",
    "random_filler",
    "sample",
]
