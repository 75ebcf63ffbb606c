"""Person name and username generators.

Names are drawn from the curated corpora in :mod:`surrogate.corpus.names`.
The two-part forms follow one fallback chain:

1. first and last name, when the pair solver finds ceilings for both;
2. last name only;
3. an opaque filler string of the whole budget.

Every step is taken with the same :class:`~surrogate.generate.seed.Randomizer`
so the chain is deterministic for a given seed, and every step down the chain
is visible in the returned :class:`~surrogate.generate.request.Stage`.
"""

from __future__ import annotations

from collections.abc import Collection

from surrogate.corpus import FIRST_NAME, LAST_NAME, get_corpus
from surrogate.utils.constants import LOWERCASE, strip_special

from .base import degrade, finish, require_budget
from .request import GeneratedValue, GenerationRequest, Stage
from .sampler import random_filler, sample
from .seed import Randomizer
from .solver import find_closest_pair

__all__ = [
    "compose_name",
    "generate_first_name",
    "generate_last_name",
    "generate_full_name",
    "generate_username",
    "name_floors",
]

FIRST_NAMES = get_corpus(FIRST_NAME)
LAST_NAMES = get_corpus(LAST_NAME)


def name_floors(separator: str = "") -> tuple[tuple[Stage, int], ...]:
    """Return the smallest budget that reaches each stage of the name chain."""

    full = FIRST_NAMES.index.shortest + len(separator) + LAST_NAMES.index.shortest
    return (
        (Stage.FULL, full),
        (Stage.PARTIAL, LAST_NAMES.index.shortest),
        (Stage.FILLER, 1),
    )


def compose_name(
    request: GenerationRequest,
    rng: Randomizer,
    budget: int,
    *,
    separator: str = " ",
    excluded: Collection[str] = frozenset(),
) -> tuple[str, Stage]:
    """Return a name of at most ``budget`` characters and its stage."""

    alloc = find_closest_pair(FIRST_NAMES.index, LAST_NAMES.index, budget - len(separator))
    if alloc.complete:
        first = sample(FIRST_NAMES, alloc.first, rng, excluded)
        last = sample(LAST_NAMES, budget - len(separator) - len(first), rng, excluded)
        return f"{first}{separator}{last}", Stage.FULL

    degrade(request, Stage.PARTIAL, budget)
    if LAST_NAMES.index.fits(budget):
        return sample(LAST_NAMES, budget, rng, excluded), Stage.PARTIAL

    degrade(request, Stage.FILLER, budget)
    return random_filler(rng, budget), Stage.FILLER


def _single_name(request: GenerationRequest, rng: Randomizer, corpus_name: str) -> GeneratedValue:
    budget = require_budget(request)
    corpus = FIRST_NAMES if corpus_name == FIRST_NAME else LAST_NAMES
    if corpus.index.fits(budget):
        return finish(request, rng, sample(corpus, budget, rng, request.excluded), Stage.FULL)
    degrade(request, Stage.FILLER, budget)
    return finish(request, rng, random_filler(rng, budget), Stage.FILLER)


def generate_first_name(request: GenerationRequest, rng: Randomizer) -> GeneratedValue:
    """Return a given name, or filler when no name fits."""

    return _single_name(request, rng, FIRST_NAME)


def generate_last_name(request: GenerationRequest, rng: Randomizer) -> GeneratedValue:
    """Return a surname, or filler when no name fits."""

    return _single_name(request, rng, LAST_NAME)


def generate_full_name(request: GenerationRequest, rng: Randomizer) -> GeneratedValue:
    """Return ``"First Last"`` degrading to a last name, then to filler."""

    budget = require_budget(request)
    value, stage = compose_name(request, rng, budget, excluded=request.excluded)
    return finish(request, rng, value, stage)


def generate_username(request: GenerationRequest, rng: Randomizer) -> GeneratedValue:
    """Return ``<initial><lastname>`` in lowercase.

    The initial is a random lowercase letter.  When the last name cannot be
    prefixed, the bare last name is used; below the shortest last name the
    result is a lowercase filler.
    """

    budget = require_budget(request)
    if LAST_NAMES.index.fits(budget - 1):
        initial = rng.string(LOWERCASE, 1)
        last = sample(LAST_NAMES, budget - 1, rng, request.excluded)
        return finish(request, rng, initial + strip_special(last).lower(), Stage.FULL)

    degrade(request, Stage.PARTIAL, budget)
    if LAST_NAMES.index.fits(budget):
        last = sample(LAST_NAMES, budget, rng, request.excluded)
        return finish(request, rng, strip_special(last).lower(), Stage.PARTIAL)

    degrade(request, Stage.FILLER, budget)
    return finish(request, rng, rng.string(LOWERCASE, budget), Stage.FILLER)
