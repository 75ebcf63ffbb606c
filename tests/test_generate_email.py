from __future__ import annotations

from typing import Any

import pytest

from surrogate import Stage
from surrogate.corpus import get_corpus
from surrogate.utils.errors import CorpusExhaustedError, LengthInfeasibleError

DOMAINS = set(get_corpus("email_domains").values)


def _split(value: str) -> tuple[str, str]:
    assert value.count("@") == 1
    local, domain = value.split("@")
    return local, domain


def test_uuid_email_within_budget(gen: Any) -> None:
    result = gen("generate_email", max_length=10, email_type="uuidv4", seed=42)
    assert len(result.value) <= 10
    local, domain = _split(result.value)
    assert local and domain in DOMAINS
    assert all(c in "0123456789abcdef" for c in local)
    assert result.stage is Stage.FULL
    again = gen("generate_email", max_length=10, email_type="uuidv4", seed=42)
    assert again.value == result.value


def test_uuid_email_full_length_local(gen: Any) -> None:
    local, _ = _split(gen("generate_email", max_length=200, email_type="uuidv4", seed=1).value)
    assert len(local) == 32


def test_tiny_budget_is_infeasible(gen: Any) -> None:
    with pytest.raises(LengthInfeasibleError):
        gen("generate_email", max_length=1, email_type="fullname", seed=1)
    for max_length in range(0, 7):
        with pytest.raises(LengthInfeasibleError):
            gen("generate_email", max_length=max_length, seed=5)
        with pytest.raises(LengthInfeasibleError):
            gen("generate_email", max_length=max_length, email_type="uuidv4", seed=5)


@pytest.mark.parametrize(
    "max_length, stage",
    [(7, Stage.FILLER), (8, Stage.PARTIAL), (9, Stage.PARTIAL), (10, Stage.FULL), (64, Stage.FULL)],
)
def test_fullname_stages(gen: Any, max_length: int, stage: Stage) -> None:
    for seed in range(20):
        result = gen("generate_email", max_length=max_length, seed=seed)
        assert result.stage is stage
        assert len(result.value) <= max_length
        local, domain = _split(result.value)
        assert local and domain in DOMAINS
        assert local == local.lower()


def test_fullname_local_part_is_alphanumeric(gen: Any) -> None:
    for seed in range(30):
        local, _ = _split(gen("generate_email", max_length=40, seed=seed).value)
        assert local.isalnum() and local.isascii()


def test_no_fallback_raises(gen: Any) -> None:
    with pytest.raises(LengthInfeasibleError):
        gen("generate_email", max_length=8, seed=1, allow_fallback=False)
    assert gen("generate_email", max_length=10, seed=1, allow_fallback=False).stage is Stage.FULL


def test_any_type_produces_both_forms(gen: Any) -> None:
    locals_ = [
        _split(gen("generate_email", max_length=100, email_type="any", seed=s).value)[0]
        for s in range(40)
    ]
    hexlike = [loc for loc in locals_ if len(loc) == 32 and all(c in "0123456789abcdef" for c in loc)]
    assert 0 < len(hexlike) < len(locals_)


def test_excluded_domains(gen: Any) -> None:
    excluded = {"gmail.com", "yahoo.com"}
    for seed in range(50):
        value = gen("generate_email", max_length=30, seed=seed, excluded_domains=excluded).value
        assert _split(value)[1] not in excluded


def test_excluded_domains_case_insensitive(gen: Any) -> None:
    for seed in range(30):
        value = gen("generate_email", max_length=30, seed=seed, excluded_domains={"GMAIL.COM"}).value
        assert _split(value)[1] != "gmail.com"


def test_all_short_domains_excluded(gen: Any) -> None:
    short = [d for d in DOMAINS if len(d) <= 5]
    with pytest.raises(CorpusExhaustedError):
        gen("generate_email", max_length=7, email_type="uuidv4", seed=1, excluded=short)


def test_min_length_pads_local_part(gen: Any) -> None:
    result = gen("generate_email", max_length=60, min_length=50, seed=3)
    assert 50 <= len(result.value) <= 60
    _split(result.value)
