from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from surrogate.generate import EmailOptions, GenerationRequest, StateOptions, ValueKind, build_request
from surrogate.utils.errors import InvalidParameterError


def test_build_request_splits_options() -> None:
    req = build_request(
        "generate_email",
        {"max_length": 20, "seed": 3, "excluded": ["a.io"], "email_type": "uuidv4"},
    )
    assert req.kind is ValueKind.EMAIL
    assert req.max_length == 20
    assert req.excluded == frozenset({"a.io"})
    assert isinstance(req.options, EmailOptions)
    assert req.options.email_type == "uuidv4"


def test_state_options() -> None:
    req = build_request(ValueKind.STATE, {"max_length": 20, "full_name": True})
    assert isinstance(req.options, StateOptions)
    assert req.options.full_name is True


def test_excluded_none_is_empty() -> None:
    req = build_request("generate_city", {"max_length": 5, "excluded": None})
    assert req.excluded == frozenset()


def test_requests_are_frozen() -> None:
    req = build_request("generate_city", {"max_length": 5})
    with pytest.raises(ValidationError):
        req.max_length = 6  # type: ignore[misc]


@pytest.mark.parametrize(
    "kind, params",
    [
        ("generate_city", {"max_length": 3, "min_length": 4}),
        ("generate_city", {"max_length": -1}),
        ("generate_city", {}),
        ("generate_city", {"max_length": 5, "full_name": True}),
        ("generate_email", {"max_length": 20, "email_type": "mystery"}),
        ("generate_email", {"max_length": 20, "seed": 2**63}),
        ("generate_email", {"max_length": "lots"}),
        ("generate_planet", {"max_length": 5}),
    ],
)
def test_invalid_parameters(kind: str, params: dict[str, Any]) -> None:
    with pytest.raises(InvalidParameterError):
        build_request(kind, params)


def test_invalid_parameter_is_value_error() -> None:
    with pytest.raises(ValueError):
        build_request("generate_city", {"max_length": 1, "min_length": 2})


def test_options_type_checked_on_direct_construction() -> None:
    with pytest.raises(ValueError):
        GenerationRequest(kind=ValueKind.EMAIL, max_length=5, options=StateOptions())
