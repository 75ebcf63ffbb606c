from __future__ import annotations

import re
from typing import Any

from typer.testing import CliRunner

from surrogate import ValueGenerator
from surrogate.cli import app, parse_options
from surrogate.generate import derive_seed


def _lines(result: Any) -> list[str]:
    return result.stdout.strip().splitlines()


def test_generate_seeded_matches_library() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "generate_full_name", "-m", "20", "-s", "5", "-n", "3"])
    assert result.exit_code == 0
    generator = ValueGenerator()
    expected = [generator.value("generate_full_name", max_length=20, seed=5 + i) for i in range(3)]
    assert _lines(result) == expected


def test_generate_is_repeatable() -> None:
    runner = CliRunner()
    args = ["generate", "generate_email", "--max-length", "30", "--seed", "11"]
    first = runner.invoke(app, args)
    second = runner.invoke(app, args)
    assert first.exit_code == 0
    assert first.stdout == second.stdout
    assert len(_lines(first)[0]) <= 30


def test_generate_uses_catalog_defaults() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "generate_random_string", "-s", "1", "-n", "5"])
    assert result.exit_code == 0
    assert all(2 <= len(line) <= 7 for line in _lines(result))


def test_generate_options() -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["generate", "generate_email", "-m", "60", "-s", "2", "-o", "email_type=uuidv4"],
    )
    assert result.exit_code == 0
    local, _, _ = _lines(result)[0].partition("@")
    assert re.fullmatch(r"[0-9a-f]{32}", local)


def test_generate_state_full_name_option() -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["generate", "generate_state", "-m", "30", "-s", "2", "-o", "full_name=true"]
    )
    assert result.exit_code == 0
    assert len(_lines(result)[0]) > 2


def test_show_stage() -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["generate", "generate_full_name", "-m", "3", "-s", "1", "--show-stage"]
    )
    assert result.exit_code == 0
    value, stage = _lines(result)[0].split("\t")
    assert stage == "partial"
    assert len(value) <= 3


def test_exclude() -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["generate", "generate_state", "-m", "2", "-s", "1", "-n", "20", "-x", "CA", "-x", "TX"],
    )
    assert result.exit_code == 0
    assert not {"CA", "TX"} & set(_lines(result))


def test_key_derived_seed(monkeypatch: Any) -> None:
    monkeypatch.setenv("SURROGATE_SEED_SECRET", "unit-test-secret")
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "generate_username", "-m", "12", "--key", "row-7"])
    assert result.exit_code == 0
    seed = derive_seed("generate_username", "row-7", secret=b"unit-test-secret")
    expected = ValueGenerator().value("generate_username", max_length=12, seed=seed)
    assert _lines(result) == [expected]


def test_require_secret_present(monkeypatch: Any) -> None:
    monkeypatch.setenv("SURROGATE_SEED_SECRET", "unit-test-secret")
    runner = CliRunner()
    result = runner.invoke(
        app, ["generate", "generate_city", "-m", "10", "--key", "k", "--require-secret"]
    )
    assert result.exit_code == 0


def test_parse_options() -> None:
    assert parse_options(["a=1", "b=true", "c=x", "d=[p, q]", "e="]) == {
        "a": 1,
        "b": True,
        "c": "x",
        "d": ["p", "q"],
        "e": "",
    }


def test_generate_short_random_string_under_default_min() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "generate_random_string", "-m", "1", "-s", "3"])
    assert result.exit_code == 0
    assert len(_lines(result)[0]) == 1
