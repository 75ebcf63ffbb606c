"""Immutable corpora and their length indexes.

A :class:`Corpus` is an ordered tuple of :class:`CorpusEntry` values sorted
ascending by length.  Its :class:`LengthIndex` answers "which prefix of the
corpus fits under a length ceiling" with a binary search, so feasibility checks
stay logarithmic in the corpus size.  Both structures are frozen once built and
may be shared freely between threads.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = ["CorpusEntry", "LengthIndex", "Corpus", "build_index", "build_corpus"]


@dataclass(frozen=True, slots=True)
class CorpusEntry:
    """A corpus value and its precomputed character length."""

    value: str
    length: int


@dataclass(frozen=True, slots=True)
class LengthIndex:
    """Length lookups over a corpus sorted ascending by length.

    ``entry_lengths`` mirrors the corpus entry by entry; ``lengths`` holds the
    distinct lengths in ascending order.
    """

    entry_lengths: tuple[int, ...]
    lengths: tuple[int, ...]

    def max_index_for(self, ceiling: int) -> int:
        """Return the last corpus position whose prefix fits ``ceiling``.

        Every entry at positions ``0..result`` has length ``<= ceiling``.  The
        result is non-decreasing in ``ceiling`` and ``-1`` when nothing fits.
        """

        return bisect_right(self.entry_lengths, ceiling) - 1

    def longest_at_most(self, ceiling: int) -> int:
        """Return the largest entry length ``<= ceiling`` or ``0``."""

        pos = bisect_right(self.lengths, ceiling)
        return self.lengths[pos - 1] if pos else 0

    def fits(self, ceiling: int) -> bool:
        return bool(self.lengths) and self.lengths[0] <= ceiling

    @property
    def shortest(self) -> int:
        return self.lengths[0] if self.lengths else 0

    @property
    def longest(self) -> int:
        return self.lengths[-1] if self.lengths else 0

    def __len__(self) -> int:
        return len(self.entry_lengths)


@dataclass(frozen=True, slots=True)
class Corpus:
    """Named, immutable sequence of entries with its length index."""

    name: str
    entries: tuple[CorpusEntry, ...]
    index: LengthIndex = field(repr=False)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, value: object) -> bool:
        return any(entry.value == value for entry in self.entries)

    @property
    def values(self) -> tuple[str, ...]:
        return tuple(entry.value for entry in self.entries)


def build_index(entries: Iterable[CorpusEntry]) -> LengthIndex:
    """Build a :class:`LengthIndex` over ``entries``.

    ``entries`` must already be sorted ascending by length; ``ValueError`` is
    raised otherwise.
    """

    lengths = tuple(entry.length for entry in entries)
    if any(a > b for a, b in zip(lengths, lengths[1:])):
        raise ValueError("corpus entries must be sorted ascending by length")
    return LengthIndex(entry_lengths=lengths, lengths=tuple(sorted(set(lengths))))


def build_corpus(name: str, values: Iterable[str]) -> Corpus:
    """Deduplicate ``values``, sort them by ``(length, value)`` and index them."""

    unique = sorted({v for v in values if v}, key=lambda v: (len(v), v))
    entries = tuple(CorpusEntry(value=v, length=len(v)) for v in unique)
    return Corpus(name=name, entries=entries, index=build_index(entries))
