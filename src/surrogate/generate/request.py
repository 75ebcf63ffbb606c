"""Generation request and result models.

Requests are validated with pydantic: unknown fields are rejected, lengths
must be non-negative, ``min_length`` may not exceed ``max_length`` and seeds
must fit a signed 64-bit integer.  Kind specific options live in a separate
``options`` mapping that is validated against the option model registered for
the kind, so a typo in an option name fails loudly instead of being ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, conint, model_validator

from surrogate.utils.constants import INT64_MAX, INT64_MIN
from surrogate.utils.errors import InvalidParameterError

# ---------------------------------------------------------------------------
# Kinds and stages
# ---------------------------------------------------------------------------


class ValueKind(str, Enum):
    """Identifiers of every value kind the engine can generate."""

    EMAIL = "generate_email"
    USERNAME = "generate_username"
    FIRST_NAME = "generate_first_name"
    LAST_NAME = "generate_last_name"
    FULL_NAME = "generate_full_name"
    CITY = "generate_city"
    STATE = "generate_state"
    ZIPCODE = "generate_zipcode"
    STREET_ADDRESS = "generate_street_address"
    FULL_ADDRESS = "generate_full_address"
    RANDOM_STRING = "generate_random_string"


class Stage(str, Enum):
    """How elaborate the returned value is along its fallback chain."""

    FULL = "full"
    PARTIAL = "partial"
    FILLER = "filler"


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


class NoOptions(BaseModel):
    """Options for kinds that accept none."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class EmailOptions(NoOptions):
    """Email specific options."""

    email_type: Literal["uuidv4", "fullname", "any"] = "fullname"
    excluded_domains: frozenset[str] = frozenset()


class StateOptions(NoOptions):
    """State specific options."""

    full_name: bool = False


OPTION_MODELS: Mapping[ValueKind, type[NoOptions]] = {
    ValueKind.EMAIL: EmailOptions,
    ValueKind.STATE: StateOptions,
}


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------


class GenerationRequest(BaseModel):
    """A single, validated generation call."""

    kind: ValueKind
    max_length: conint(ge=0)
    min_length: conint(ge=0) | None = None
    seed: conint(ge=INT64_MIN, le=INT64_MAX) | None = None
    excluded: frozenset[str] = frozenset()
    allow_fallback: bool = True
    options: NoOptions = Field(default_factory=NoOptions)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @model_validator(mode="after")
    def _check_bounds(self) -> GenerationRequest:
        expected = OPTION_MODELS.get(self.kind, NoOptions)
        if not isinstance(self.options, expected):
            raise ValueError(f"options for {self.kind.value} must be {expected.__name__}")
        if self.min_length is not None and self.min_length > self.max_length:
            raise ValueError(
                f"min_length ({self.min_length}) must not exceed max_length ({self.max_length})"
            )
        return self


REQUEST_FIELDS: frozenset[str] = frozenset(
    {"max_length", "min_length", "seed", "excluded", "allow_fallback"}
)


def parse_kind(kind: ValueKind | str) -> ValueKind:
    """Return ``kind`` as a :class:`ValueKind`."""

    try:
        return ValueKind(kind)
    except ValueError:
        raise InvalidParameterError(f"unknown value kind: {kind!r}") from None


def build_request(kind: ValueKind | str, params: Mapping[str, Any]) -> GenerationRequest:
    """Validate ``params`` for ``kind`` into a :class:`GenerationRequest`.

    Keys named in :data:`REQUEST_FIELDS` populate the request itself; every
    other key is treated as a kind specific option.  Validation failures are
    raised as :class:`InvalidParameterError`.
    """

    value_kind = parse_kind(kind)
    fields: dict[str, Any] = {"kind": value_kind}
    options: dict[str, Any] = {}
    for key, value in params.items():
        if key in REQUEST_FIELDS:
            fields[key] = value
        else:
            options[key] = value
    if "max_length" not in fields:
        raise InvalidParameterError(f"{value_kind.value}: max_length is required")
    if fields.get("excluded") is None:
        fields.pop("excluded", None)
    try:
        fields["options"] = OPTION_MODELS.get(value_kind, NoOptions).model_validate(options)
        return GenerationRequest.model_validate(fields)
    except ValidationError as exc:
        raise InvalidParameterError(_describe(value_kind, exc)) from exc


def _describe(kind: ValueKind, exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(p) for p in err.get("loc", ()))
    if loc:
        return f"{kind.value}: {loc}: {err['msg']}"
    return f"{kind.value}: {err['msg']}"


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class GeneratedValue:
    """A generated value tagged with the fallback stage that produced it."""

    value: str
    stage: Stage
    kind: ValueKind
    seed: int

    @property
    def degraded(self) -> bool:
        return self.stage is not Stage.FULL

    def __str__(self) -> str:
        return self.value


__all__ = [
    "EmailOptions",
    "GeneratedValue",
    "GenerationRequest",
    "NoOptions",
    "OPTION_MODELS",
    "REQUEST_FIELDS",
    "Stage",
    "StateOptions",
    "ValueKind",
    "build_request",
    "parse_kind",
]
