import pytest

from surrogate.corpus import CORPORA, CorpusEntry, build_corpus, build_index, get_corpus
from surrogate.utils.errors import InvalidParameterError


def test_build_corpus_sorts_and_dedupes() -> None:
    corpus = build_corpus("t", ["ccc", "a", "dd", "bb", "a", ""])
    assert corpus.values == ("a", "bb", "dd", "ccc")
    assert [e.length for e in corpus.entries] == [1, 2, 2, 3]
    assert corpus.index.lengths == (1, 2, 3)
    assert "bb" in corpus
    assert len(corpus) == 4


def test_max_index_for() -> None:
    index = build_corpus("t", ["ccc", "a", "dd", "bb"]).index
    assert index.max_index_for(0) == -1
    assert index.max_index_for(1) == 0
    assert index.max_index_for(2) == 2
    assert index.max_index_for(3) == 3
    assert index.max_index_for(100) == 3


def test_max_index_monotonic() -> None:
    for corpus in CORPORA.values():
        previous = -1
        for ceiling in range(0, corpus.index.longest + 3):
            current = corpus.index.max_index_for(ceiling)
            assert current >= previous
            if current >= 0:
                assert all(e.length <= ceiling for e in corpus.entries[: current + 1])
            if current + 1 < len(corpus):
                assert corpus.entries[current + 1].length > ceiling
            previous = current


def test_longest_at_most_and_bounds() -> None:
    index = build_corpus("t", ["abcd", "ab", "abcdef"]).index
    assert index.longest_at_most(1) == 0
    assert index.longest_at_most(3) == 2
    assert index.longest_at_most(5) == 4
    assert index.longest_at_most(50) == 6
    assert index.shortest == 2
    assert index.longest == 6
    assert index.fits(2) and not index.fits(1)


def test_empty_corpus() -> None:
    index = build_corpus("empty", []).index
    assert index.max_index_for(10) == -1
    assert index.longest_at_most(10) == 0
    assert not index.fits(10)


def test_build_index_requires_sorted_entries() -> None:
    entries = [CorpusEntry("abc", 3), CorpusEntry("a", 1)]
    with pytest.raises(ValueError):
        build_index(entries)


def test_shipped_corpora_are_ascii_and_sorted() -> None:
    for name, corpus in CORPORA.items():
        assert len(corpus) > 0, name
        lengths = [e.length for e in corpus.entries]
        assert lengths == sorted(lengths)
        for entry in corpus.entries:
            assert entry.value.isascii()
            assert entry.length == len(entry.value)


def test_corpora_are_read_only() -> None:
    with pytest.raises(TypeError):
        CORPORA["extra"] = build_corpus("extra", ["x"])  # type: ignore[index]


def test_get_corpus() -> None:
    assert get_corpus("email_domains").name == "email_domains"
    with pytest.raises(InvalidParameterError):
        get_corpus("planets")
