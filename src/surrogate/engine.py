"""Generation entry points.

:func:`generate` is the single call the host pipeline makes per field: it looks
the kind up in the registry's catalog, merges the catalog defaults under the
caller's parameters, validates the result into a
:class:`~surrogate.generate.GenerationRequest`, creates the request's own
:class:`~surrogate.generate.Randomizer` and runs the kind's generator.

Every call is self-contained.  The registry and corpora it reads are
immutable and the randomizer is discarded when the call returns, so calls may
run concurrently without coordination.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .catalog import GeneratorRegistry, build_catalog, build_registry, get_by_identifier
from .generate import GeneratedValue, GenerationRequest, ValueKind, build_request, new_randomizer
from .utils.logging import get_logger

__all__ = ["ValueGenerator", "default_registry", "generate", "generate_request"]

logger = get_logger(__name__)


def default_registry() -> GeneratorRegistry:
    """Build a registry over the system catalog and the default generators."""

    return build_registry(build_catalog())


def generate_request(registry: GeneratorRegistry, request: GenerationRequest) -> GeneratedValue:
    """Run an already validated ``request``."""

    generator = registry.generator_for(request.kind)
    rng = new_randomizer(request.seed)
    result = generator(request, rng)
    if result.degraded:
        logger.debug("%s produced a %s value", request.kind.value, result.stage.value)
    return result


def _clamp_default_min(merged: dict[str, Any], caller: Mapping[str, Any]) -> None:
    """Keep a catalog ``min_length`` from exceeding a caller supplied ``max_length``."""

    max_length = caller.get("max_length")
    default_min = merged.get("min_length")
    if "min_length" in caller or not isinstance(default_min, int):
        return
    if isinstance(max_length, int) and not isinstance(max_length, bool):
        merged["min_length"] = max(min(default_min, max_length), 0)


def generate(
    registry: GeneratorRegistry,
    kind: ValueKind | str,
    params: Mapping[str, Any] | None = None,
) -> GeneratedValue:
    """Generate one value of ``kind``.

    Parameters
    ----------
    registry:
        Registry built by :func:`surrogate.catalog.build_registry`.
    kind:
        Catalog identifier such as ``"generate_email"``.
    params:
        ``max_length``, ``min_length``, ``seed``, ``excluded`` and
        ``allow_fallback`` plus any kind specific options.  Keys set to
        ``None`` fall back to the catalog defaults.  A default
        ``min_length`` is lowered to fit a caller supplied ``max_length``.

    Raises
    ------
    InvalidParameterError, LengthInfeasibleError, CorpusExhaustedError
        See :mod:`surrogate.utils.errors`.  No value is returned alongside an
        error.
    """

    definition = get_by_identifier(registry.catalog, kind)
    caller = {k: v for k, v in (params or {}).items() if v is not None}
    merged = dict(definition.default_params)
    merged.update(caller)
    _clamp_default_min(merged, caller)
    request = build_request(definition.identifier, merged)
    return generate_request(registry, request)


class ValueGenerator:
    """Convenience wrapper binding :func:`generate` to one registry."""

    def __init__(self, registry: GeneratorRegistry | None = None) -> None:
        self.registry: GeneratorRegistry = registry if registry is not None else default_registry()

    def generate(self, kind: ValueKind | str, **params: Any) -> GeneratedValue:
        return generate(self.registry, kind, params)

    def value(self, kind: ValueKind | str, **params: Any) -> str:
        """Return only the generated string."""

        return self.generate(kind, **params).value

    # -- Shortcuts --------------------------------------------------------

    def email(self, max_length: int, *, email_type: str = "fullname", **params: Any) -> str:
        return self.value(ValueKind.EMAIL, max_length=max_length, email_type=email_type, **params)

    def username(self, max_length: int, **params: Any) -> str:
        return self.value(ValueKind.USERNAME, max_length=max_length, **params)

    def full_name(self, max_length: int, **params: Any) -> str:
        return self.value(ValueKind.FULL_NAME, max_length=max_length, **params)
