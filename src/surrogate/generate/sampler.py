"""Exclusion-aware sampling from length-indexed corpora."""

from __future__ import annotations

from collections.abc import Collection

from surrogate.corpus import Corpus
from surrogate.utils.constants import FILLER_CHARSET
from surrogate.utils.errors import CorpusExhaustedError, LengthInfeasibleError

from .seed import Randomizer

__all__ = ["sample", "random_filler", "pad_to"]


def sample(
    corpus: Corpus,
    ceiling: int,
    rng: Randomizer,
    excluded: Collection[str] = frozenset(),
) -> str:
    """Return a uniformly chosen entry of ``corpus`` no longer than ``ceiling``.

    Entries present in ``excluded`` are never returned.

    Raises
    ------
    LengthInfeasibleError
        No entry of ``corpus`` fits ``ceiling``.
    CorpusExhaustedError
        Every entry that fits ``ceiling`` is excluded.
    """

    last = corpus.index.max_index_for(ceiling)
    if last < 0:
        raise LengthInfeasibleError(
            f"no {corpus.name} entry fits within {ceiling} characters"
        )
    if not excluded:
        return corpus.entries[rng.intn(last + 1)].value

    candidates = [e.value for e in corpus.entries[: last + 1] if e.value not in excluded]
    if not candidates:
        raise CorpusExhaustedError(
            f"all {last + 1} {corpus.name} entries within {ceiling} characters are excluded"
        )
    return rng.choice(candidates)


def random_filler(rng: Randomizer, length: int, charset: str = FILLER_CHARSET) -> str:
    """Return an opaque alphanumeric string of exactly ``length`` characters."""

    return rng.string(charset, length)


def pad_to(value: str, min_length: int | None, rng: Randomizer) -> str:
    """Append filler so that ``value`` is at least ``min_length`` long."""

    if min_length is None or len(value) >= min_length:
        return value
    return value + random_filler(rng, min_length - len(value))
