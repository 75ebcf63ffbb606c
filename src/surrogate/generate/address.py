"""Address pseudonym generation helpers.

The functions in this module synthesize plausible but fictitious address
elements from the curated lists in :mod:`surrogate.corpus.places`.  They do not
attempt postal validation.  Unlike names, addresses have no opaque filler
stage: a random string is not a useful city, so a budget that cannot hold at
least the partial form raises :class:`LengthInfeasibleError`.

Formats:

* street address: ``{number} {street} {suffix}``, partial ``{number} {street}``
* full address: ``{street address} {city}, {ST} {zip}``, partial
  ``{city}, {ST} {zip}``
"""

from __future__ import annotations

from surrogate.corpus import (
    CITY,
    STATE_CODE,
    STATE_NAME,
    STREET_NAME,
    STREET_SUFFIX,
    ZIPCODE,
    get_corpus,
)
from surrogate.utils.errors import LengthInfeasibleError

from .base import degrade, finish, require_budget
from .request import GeneratedValue, GenerationRequest, Stage, StateOptions
from .sampler import sample
from .seed import Randomizer
from .solver import find_closest_pair

__all__ = [
    "generate_city",
    "generate_state",
    "generate_zipcode",
    "generate_street_address",
    "generate_full_address",
]

CITIES = get_corpus(CITY)
STATE_CODES = get_corpus(STATE_CODE)
STATE_NAMES = get_corpus(STATE_NAME)
STREETS = get_corpus(STREET_NAME)
SUFFIXES = get_corpus(STREET_SUFFIX)
ZIPCODES = get_corpus(ZIPCODE)

# ", " between city and state, " " between state and zip.
_LOCALITY_SEPARATORS = 3


def _street_number(rng: Randomizer) -> str:
    return str(rng.randint(100, 9999))


def _locality_length() -> int:
    """Characters used by ``", {ST} {zip}"`` after the city."""

    return _LOCALITY_SEPARATORS + STATE_CODES.index.shortest + ZIPCODES.index.shortest


def _locality(rng: Randomizer, city: str, excluded: frozenset[str]) -> str:
    state = sample(STATE_CODES, STATE_CODES.index.shortest, rng, excluded)
    zipcode = sample(ZIPCODES, ZIPCODES.index.shortest, rng, excluded)
    return f"{city}, {state} {zipcode}"


def generate_city(request: GenerationRequest, rng: Randomizer) -> GeneratedValue:
    """Return a US city name."""

    budget = require_budget(request)
    return finish(request, rng, sample(CITIES, budget, rng, request.excluded), Stage.FULL)


def generate_state(request: GenerationRequest, rng: Randomizer) -> GeneratedValue:
    """Return a two-letter state code, or a full state name if requested."""

    budget = require_budget(request)
    options = request.options
    assert isinstance(options, StateOptions)
    corpus = STATE_NAMES if options.full_name else STATE_CODES
    return finish(request, rng, sample(corpus, budget, rng, request.excluded), Stage.FULL)


def generate_zipcode(request: GenerationRequest, rng: Randomizer) -> GeneratedValue:
    """Return a five digit US zip code."""

    budget = require_budget(request)
    return finish(request, rng, sample(ZIPCODES, budget, rng, request.excluded), Stage.FULL)


def generate_street_address(request: GenerationRequest, rng: Randomizer) -> GeneratedValue:
    """Return ``"123 Oak St"`` style street lines."""

    budget = require_budget(request)
    number = _street_number(rng)
    # two spaces: after the number and before the suffix
    pair_budget = budget - len(number) - 2
    alloc = find_closest_pair(STREETS.index, SUFFIXES.index, pair_budget)
    if alloc.complete:
        street = sample(STREETS, alloc.first, rng, request.excluded)
        suffix = sample(SUFFIXES, pair_budget - len(street), rng, request.excluded)
        return finish(request, rng, f"{number} {street} {suffix}", Stage.FULL)

    street_budget = budget - len(number) - 1
    if not STREETS.index.fits(street_budget):
        raise LengthInfeasibleError(
            f"{request.kind.value}: no street address fits within {budget} characters"
        )
    degrade(request, Stage.PARTIAL, budget)
    street = sample(STREETS, street_budget, rng, request.excluded)
    return finish(request, rng, f"{number} {street}", Stage.PARTIAL)


def generate_full_address(request: GenerationRequest, rng: Randomizer) -> GeneratedValue:
    """Return ``"123 Oak St Boston, MA 02169"`` style addresses.

    The street name and the city share the budget left after the number, the
    shortest suffix, the state, the zip and the separators are reserved.  Any
    budget the pair leaves unused widens the ceiling for the suffix.
    """

    budget = require_budget(request)
    number = _street_number(rng)
    # number, space, street, space, suffix, space, city, locality
    reserved = len(number) + 3 + _locality_length()
    pair_budget = budget - reserved - SUFFIXES.index.shortest
    alloc = find_closest_pair(STREETS.index, CITIES.index, pair_budget)
    if alloc.complete:
        street = sample(STREETS, alloc.first, rng, request.excluded)
        city = sample(CITIES, pair_budget - len(street), rng, request.excluded)
        suffix_budget = budget - reserved - len(street) - len(city)
        suffix = sample(SUFFIXES, suffix_budget, rng, request.excluded)
        locality = _locality(rng, city, request.excluded)
        return finish(request, rng, f"{number} {street} {suffix} {locality}", Stage.FULL)

    city_budget = budget - _locality_length()
    if not CITIES.index.fits(city_budget):
        raise LengthInfeasibleError(
            f"{request.kind.value}: no address fits within {budget} characters"
        )
    degrade(request, Stage.PARTIAL, budget)
    city = sample(CITIES, city_budget, rng, request.excluded)
    return finish(request, rng, _locality(rng, city, request.excluded), Stage.PARTIAL)
