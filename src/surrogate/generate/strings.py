"""Random alphanumeric strings."""

from __future__ import annotations

from surrogate.utils.constants import ALPHANUMERIC

from .base import finish, require_budget
from .request import GeneratedValue, GenerationRequest, Stage
from .seed import Randomizer

__all__ = ["generate_random_string"]


def generate_random_string(request: GenerationRequest, rng: Randomizer) -> GeneratedValue:
    """Return an alphanumeric string with a length in ``[min_length, max_length]``.

    ``min_length`` defaults to 1.
    """

    budget = require_budget(request)
    low = max(request.min_length or 1, 1)
    length = rng.randint(low, budget)
    return finish(request, rng, rng.string(ALPHANUMERIC, length), Stage.FULL)
