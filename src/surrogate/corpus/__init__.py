"""Static value corpora indexed by length.

The corpora are built once, when this package is first imported, and exposed
through a read-only mapping.  Nothing in the package mutates them afterwards,
so they are safe to share between concurrent generation calls.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from surrogate.utils.errors import InvalidParameterError

from .domains import EMAIL_DOMAINS
from .index import Corpus, CorpusEntry, LengthIndex, build_corpus, build_index
from .names import FIRST_NAMES, LAST_NAMES
from .places import CITIES, STATE_CODES, STATE_NAMES, STREET_NAMES, STREET_SUFFIXES, ZIPCODES

# ---------------------------------------------------------------------------
# Corpus names
# ---------------------------------------------------------------------------

FIRST_NAME = "first_names"
LAST_NAME = "last_names"
EMAIL_DOMAIN = "email_domains"
CITY = "cities"
STATE_CODE = "state_codes"
STATE_NAME = "state_names"
ZIPCODE = "zipcodes"
STREET_NAME = "street_names"
STREET_SUFFIX = "street_suffixes"

CORPORA: Mapping[str, Corpus] = MappingProxyType(
    {
        FIRST_NAME: build_corpus(FIRST_NAME, FIRST_NAMES),
        LAST_NAME: build_corpus(LAST_NAME, LAST_NAMES),
        EMAIL_DOMAIN: build_corpus(EMAIL_DOMAIN, EMAIL_DOMAINS),
        CITY: build_corpus(CITY, CITIES),
        STATE_CODE: build_corpus(STATE_CODE, STATE_CODES),
        STATE_NAME: build_corpus(STATE_NAME, STATE_NAMES),
        ZIPCODE: build_corpus(ZIPCODE, ZIPCODES),
        STREET_NAME: build_corpus(STREET_NAME, STREET_NAMES),
        STREET_SUFFIX: build_corpus(STREET_SUFFIX, STREET_SUFFIXES),
    }
)


def get_corpus(name: str) -> Corpus:
    """Return the corpus registered under ``name``."""

    try:
        return CORPORA[name]
    except KeyError:
        raise InvalidParameterError(f"unknown corpus: {name!r}") from None


__all__ = [
    "CORPORA",
    "CITY",
    "Corpus",
    "CorpusEntry",
    "EMAIL_DOMAIN",
    "FIRST_NAME",
    "LAST_NAME",
    "LengthIndex",
    "STATE_CODE",
    "STATE_NAME",
    "STREET_NAME",
    "STREET_SUFFIX",
    "ZIPCODE",
    "build_corpus",
    "build_index",
    "get_corpus",
]
