"""Helpers shared by the per-kind generators."""

from __future__ import annotations

from collections.abc import Callable

from surrogate.utils.errors import LengthInfeasibleError
from surrogate.utils.logging import get_logger

from .request import GeneratedValue, GenerationRequest, Stage
from .sampler import pad_to
from .seed import Randomizer

__all__ = ["GeneratorFn", "require_budget", "degrade", "finish"]

GeneratorFn = Callable[[GenerationRequest, Randomizer], GeneratedValue]

logger = get_logger(__name__)


def require_budget(request: GenerationRequest, minimum: int = 1) -> int:
    """Return ``request.max_length`` or fail when it is below ``minimum``."""

    if request.max_length < minimum:
        raise LengthInfeasibleError(
            f"{request.kind.value}: max_length {request.max_length} is below the "
            f"minimum of {minimum}"
        )
    return request.max_length


def degrade(request: GenerationRequest, stage: Stage, budget: int) -> None:
    """Record a step down the fallback chain to ``stage``.

    Raises :class:`LengthInfeasibleError` instead when the request disabled
    fallbacks.
    """

    if not request.allow_fallback:
        raise LengthInfeasibleError(
            f"{request.kind.value}: a full value does not fit {budget} characters "
            "and fallback is disabled"
        )
    logger.debug(
        "%s: falling back to %s value within %d characters",
        request.kind.value,
        stage.value,
        budget,
    )


def finish(
    request: GenerationRequest, rng: Randomizer, value: str, stage: Stage
) -> GeneratedValue:
    """Pad ``value`` up to ``min_length`` and wrap it as a result."""

    value = pad_to(value, request.min_length, rng)
    return GeneratedValue(value=value, stage=stage, kind=request.kind, seed=rng.seed)
