"""Typer-based command line interface for value generation.

``surrogate list`` prints the catalog, ``surrogate show KIND`` prints one
definition with its default parameters and ``surrogate generate KIND`` prints
one or more generated values, one per line.

Exit codes
----------
0 success
3 invalid parameter (unknown kind, bad option, min_length > max_length, ...)
4 configuration error
5 length infeasible
6 corpus exhausted by exclusions
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .catalog import get_by_identifier, list_all
from .config import ConfigModel, load_config
from .config.schema import get_secret_bytes
from .engine import default_registry, generate as generate_value
from .generate import derive_seed
from .utils.errors import (
    CorpusExhaustedError,
    GenerationError,
    InvalidParameterError,
    LengthInfeasibleError,
)
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="surrogate",
    help="Length-constrained synthetic values. Use 'surrogate generate KIND' to draw values.",
)

EXIT_INVALID_PARAMETER = 3
EXIT_CONFIG = 4
EXIT_LENGTH_INFEASIBLE = 5
EXIT_CORPUS_EXHAUSTED = 6


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _exit_code_for(exc: GenerationError) -> int:
    if isinstance(exc, LengthInfeasibleError):
        return EXIT_LENGTH_INFEASIBLE
    if isinstance(exc, CorpusExhaustedError):
        return EXIT_CORPUS_EXHAUSTED
    return EXIT_INVALID_PARAMETER


def _load(config_path: Path | None) -> ConfigModel:
    try:
        return load_config(config_path)
    except ValidationError as exc:
        _safe_exit(EXIT_CONFIG, str(exc).splitlines()[0])
    except (OSError, yaml.YAMLError) as exc:
        _safe_exit(EXIT_CONFIG, str(exc))


def parse_options(pairs: list[str]) -> dict[str, Any]:
    """Parse ``key=value`` pairs; values are read as YAML scalars or lists."""

    options: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise InvalidParameterError(f"option must look like key=value, got {pair!r}")
        try:
            options[key] = yaml.safe_load(raw) if raw.strip() else ""
        except yaml.YAMLError:
            options[key] = raw
    return options


def _seeds(
    kind: str,
    count: int,
    *,
    seed: int | None,
    key: str | None,
    secret: bytes,
) -> list[int | None]:
    if seed is not None and key is not None:
        raise InvalidParameterError("--seed and --key are mutually exclusive")
    if seed is not None:
        return [seed + i for i in range(count)]
    if key is not None:
        keys = [key] if count == 1 else [f"{key}#{i}" for i in range(count)]
        return [derive_seed(kind, k, secret=secret) for k in keys]
    return [None] * count


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.callback()
def main() -> None:
    """Entry point for the surrogate command group."""
    pass


@app.command("list")
def list_kinds() -> None:
    """List every value kind in the catalog."""

    catalog = default_registry().catalog
    for definition in list_all(catalog):
        typer.echo(f"{definition.identifier.value:<26} {definition.name:<24} {definition.description}")


@app.command()
def show(kind: str = typer.Argument(..., help="Kind identifier, e.g. generate_email")) -> None:
    """Show one catalog definition and its default parameters."""

    catalog = default_registry().catalog
    try:
        definition = get_by_identifier(catalog, kind)
    except InvalidParameterError as exc:
        _safe_exit(EXIT_INVALID_PARAMETER, str(exc))
    doc = {
        "identifier": definition.identifier.value,
        "name": definition.name,
        "description": definition.description,
        "data_type": definition.data_type,
        "default_params": dict(definition.default_params),
    }
    typer.echo(yaml.safe_dump(doc, sort_keys=False).rstrip())


@app.command()
def generate(  # noqa: PLR0913
    kind: str = typer.Argument(..., help="Kind identifier, e.g. generate_email"),
    max_length: Optional[int] = typer.Option(  # noqa: B008
        None, "--max-length", "-m", help="Maximum length; defaults to the catalog value"
    ),
    min_length: Optional[int] = typer.Option(  # noqa: B008
        None, "--min-length", help="Pad shorter values up to this length"
    ),
    seed: Optional[int] = typer.Option(  # noqa: B008
        None, "--seed", "-s", help="Seed for reproducible output; value i uses seed + i"
    ),
    key: Optional[str] = typer.Option(  # noqa: B008
        None, "--key", help="Derive seeds from this record key and the configured secret"
    ),
    exclude: list[str] = typer.Option(  # noqa: B008
        [], "--exclude", "-x", help="Value that must not be sampled (repeatable)"
    ),
    option: list[str] = typer.Option(  # noqa: B008
        [], "--option", "-o", help="Kind specific option as key=value (repeatable)"
    ),
    count: int = typer.Option(1, "--count", "-n", min=1, help="Number of values"),  # noqa: B008
    fallback: bool | None = typer.Option(  # noqa: B008
        None,
        "--fallback/--no-fallback",
        help="Allow partial or filler values when the full form does not fit",
    ),
    show_stage: bool = typer.Option(  # noqa: B008
        False, "--show-stage", help="Print the fallback stage next to each value"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    require_secret: bool = typer.Option(  # noqa: B008
        False, "--require-secret", help="Fail if the seed secret is not configured"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Log fallback steps to stderr"
    ),
) -> None:
    """Generate values of KIND and print them one per line."""

    cfg = _load(config_path)
    configure_logging("DEBUG" if verbose else cfg.logging.level)
    try:
        secret = get_secret_bytes(cfg, require=require_secret)
    except ValueError as exc:
        _safe_exit(EXIT_CONFIG, str(exc))

    if count > cfg.generation.count_limit:
        _safe_exit(
            EXIT_INVALID_PARAMETER,
            f"--count {count} exceeds the configured limit of {cfg.generation.count_limit}",
        )

    registry = default_registry()
    try:
        params: dict[str, Any] = parse_options(option)
        overrides = {
            "max_length": max_length,
            "min_length": min_length,
            "excluded": list(exclude) or None,
        }
        params.update({k: v for k, v in overrides.items() if v is not None})
        params["allow_fallback"] = cfg.generation.allow_fallback if fallback is None else fallback
        for value_seed in _seeds(kind, count, seed=seed, key=key, secret=secret):
            result = generate_value(registry, kind, {**params, "seed": value_seed})
            if show_stage:
                typer.echo(f"{result.value}\t{result.stage.value}")
            else:
                typer.echo(result.value)
    except GenerationError as exc:
        _safe_exit(_exit_code_for(exc), str(exc))
